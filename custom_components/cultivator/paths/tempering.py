"""Tempering - Warrior Trainee path (BODY), levels 1-10.

Five gates: Rooting, Foundation, Core, Flow, Breath.
"""

from .. import const
from ..engines.path_registry import PathMetadata

PATH_ID = "tempering-warrior-trainee"

METADATA = PathMetadata(
    path_id=PATH_ID,
    name="Tempering",
    description=(
        "Warrior Trainee path focusing on body cultivation through the "
        "Five-Gate System"
    ),
    primary_stat=const.STAT_BODY,
    starting_tier=const.TIER_D,
    max_level=10,
)

GATES = (
    ("rooting", "The Rooting"),
    ("foundation", "The Foundation"),
    ("core", "The Core Link"),
    ("flow", "The Flow"),
    ("breath", "The Breath"),
)

LEVELS = [
    {
        "level": 1,
        "subtitle": "The Awakening of the Vessel",
        "days": 3,
        "xp": 120,
        "coins": 30,
        "stat_points": 2,
        "tasks": [
            ["Zhan Zhuang: 3 Minutes"],
            ["Wall Sit: 1 Set × 30 Seconds"],
            ["Dead Bug: 1 Set × 5 Reps (Slow)"],
            ["90/90 Hip Switch: 1 Set × 10 Reps"],
            ["Reverse Breathing: 5 Cycles"],
        ],
        "trial": {
            "name": "The Bronze Statue",
            "tasks": "Zhan Zhuang: 8 Minutes (Continuous)",
            "coins": 200,
            "stars": 1,
            "stat_points": 1,
            "item": "Kaskol of Darkness",
        },
    },
    {
        "level": 2,
        "subtitle": "The Silent Accumulation",
        "days": 5,
        "xp": 200,
        "coins": 35,
        "stat_points": 3,
        "tasks": [
            ["Zhan Zhuang: 5 Minutes"],
            ["Wall Sit: 2 Sets × 30 Seconds"],
            ["Dead Bug: 2 Sets × 5 Reps"],
            ["90/90 Hip Switch: 2 Sets × 10 Reps"],
            ["Reverse Breathing: 7 Cycles"],
        ],
        "trial": {
            "name": "The Stone Roots",
            "tasks": "Zhan Zhuang: 10 Minutes + Wall Sit: 1 Set × 60 Seconds",
            "coins": 300,
            "stars": 1,
            "stat_points": 1,
            "item": "Gentleman Gloves",
        },
    },
    {
        "level": 3,
        "subtitle": "The Severing of Support",
        "days": 7,
        "xp": 280,
        "coins": 40,
        "stat_points": 3,
        "tasks": [
            ["Zhan Zhuang: 7 Minutes"],
            ["Horse Stance (Ma Bu): 1 Set × 30 Seconds"],
            ["Dead Bug: 2 Sets × 8 Reps"],
            ["90/90 Hip Switch: 2 Sets × 12 Reps"],
            ["Reverse Breathing: 9 Cycles"],
        ],
        "trial": {
            "name": "The Unshakable Pillar",
            "tasks": "Zhan Zhuang: 15 Minutes + Horse Stance: 3 Sets × 30 Seconds",
            "coins": 500,
            "stars": 2,
            "stat_points": 1,
            "item": "Long Coat of Elegance",
        },
    },
    {
        "level": 4,
        "subtitle": "The Kinetic Chain",
        "days": 9,
        "xp": 360,
        "coins": 45,
        "stat_points": 4,
        "tasks": [
            ["Zhan Zhuang: 9 Minutes"],
            [
                "Horse Stance: 2 Sets × 30 Seconds",
                "Glute Bridge Hold: 1 Set × 30 Seconds",
            ],
            ["Cat-Cow: 1 Set × 10 Reps (Slow)", "Dead Bug: 3 Sets × 8 Reps"],
            ["90/90 Hip Switch: 3 Sets × 12 Reps"],
            ["Reverse Breathing: 11 Cycles + Perineum Lock"],
        ],
        "trial": {
            "name": "The Serpent's Breath",
            "tasks": (
                "Cat-Cow: 3 Minutes Continuous + Reverse Breathing: 25 Cycles (Seiza)"
            ),
            "coins": 600,
            "stars": 2,
            "stat_points": 1,
            "item": "Bamboo Scroll",
        },
    },
    {
        "level": 5,
        "subtitle": "The Iron Cauldron",
        "days": 11,
        "xp": 440,
        "coins": 50,
        "stat_points": 4,
        "tasks": [
            ["Zhan Zhuang: 11 Minutes"],
            [
                "Horse Stance: 2 Sets × 45 Seconds",
                "Glute Bridge Hold: 2 Sets × 30 Seconds",
            ],
            ["Hard-Style Plank: 1 Set × 30 Seconds", "Cat-Cow: 2 Sets × 10 Reps"],
            ["Bird Dog: 2 Sets × 10 Reps (Slow)"],
            ["Reverse Breathing: 13 Cycles"],
        ],
        "trial": {
            "name": "The Five-Minute Fire",
            "tasks": (
                "Horse Stance: 5 Minutes (Cumulative) + Plank: 2 Minutes (Cumulative)"
            ),
            "coins": 800,
            "stars": 3,
            "stat_points": 1,
            "item": "Copper Wrist Weights",
        },
    },
    {
        "level": 6,
        "subtitle": "The Resonant Vessel",
        "days": 13,
        "xp": 520,
        "coins": 55,
        "stat_points": 5,
        "tasks": [
            ["Zhan Zhuang: 13 Minutes + Low Frequency Hum"],
            [
                "Standard Push-ups: 3 Sets × 10 Reps",
                "Standard Squats: 3 Sets × 15 Reps",
            ],
            ["Plank: 3 Sets × 30 Seconds", "Superman Hold: 3 Sets × 30 Seconds"],
            ["Bear Mobility (Crawl): 3 Sets × 30 Seconds"],
            ["AAAAH Mantra (Sound): 15 Cycles"],
        ],
        "trial": {
            "name": "The Thunderous Silence",
            "tasks": "Zhan Zhuang: 20 Minutes + Bear Crawl: 2 Minutes (Continuous)",
            "coins": 1200,
            "stars": 3,
            "stat_points": 1,
            "item": "Tiger Balm",
        },
    },
    {
        "level": 7,
        "subtitle": "The Rising Heat",
        "days": 15,
        "xp": 600,
        "coins": 60,
        "stat_points": 5,
        "tasks": [
            ["Zhan Zhuang: 15 Minutes"],
            [
                "Tempo Push-ups (3s/3s): 3 Sets × 8 Reps",
                "Tempo Squats (3s/3s): 3 Sets × 12 Reps",
            ],
            [
                "Side Planks: 3 Sets × 30 Seconds (Per Side)",
                "Hollow Body Hold: 3 Sets × 20 Seconds",
            ],
            [
                "Bear Crawl: 45 Seconds",
                "Monkey Mobility (Lateral): 3 Sets × 30 Seconds",
            ],
            ["AAAAH Mantra: 20 Cycles + Heat Circulation Visualization"],
        ],
        "trial": {
            "name": "The Lateral Gate",
            "tasks": "Monkey Flow: 3 Minutes + Horse Stance: 5 Minutes (Cumulative)",
            "coins": 2000,
            "stars": 3,
            "stat_points": 1,
            "item": "Weighted Vest",
        },
    },
    {
        "level": 8,
        "subtitle": "The Iron Shell",
        "days": 17,
        "xp": 680,
        "coins": 65,
        "stat_points": 6,
        "tasks": [
            ["Zhan Zhuang: 20 Minutes"],
            [
                "Tempo Push-ups (5s/5s): 3 Sets × 6 Reps",
                "Horse Stance: 2 Sets × 90 Seconds",
                "Cossack Squat: 3 Sets × 8 Reps/Side",
            ],
            [
                "The Iron Shell (Isometrics): 5 Sets × 10 Seconds Max Tension",
                "Hollow Body Hold: 3 Sets × 35 Seconds",
                "Lunge Hold (L/R): 3 Sets × 45 Seconds",
            ],
            ["Bear (45s) + Monkey (45s) + Crab Mobility (30s)"],
            ["AAAAH Mantra: 25 Cycles + Jing Sealing"],
        ],
        "trial": {
            "name": "The Diamond Body",
            "tasks": (
                "Iron Shell: 20 Sets × 10s + Zhan Zhuang: 10 Minutes "
                "(Immediately after)"
            ),
            "coins": 2500,
            "stars": 4,
            "stat_points": 1,
            "item": "Iron Wrist Beads",
        },
    },
    {
        "level": 9,
        "subtitle": "The Unbreaking Will",
        "days": 19,
        "xp": 760,
        "coins": 70,
        "stat_points": 6,
        "tasks": [
            ["Zhan Zhuang: 25 Minutes"],
            [
                "Master Tempo Push-ups (10s/10s): 3 Sets × 5 Reps",
                "Master Tempo Squats (10s/10s): 3 Sets × 8 Reps",
                "Archer Push-ups: 2 Sets × 5 Reps/Side",
            ],
            [
                "The 7 Pillar Gauntlet: Plank, Side L/R, Lunge L/R, Superman, "
                "Hollow Body (45s each)",
                "Iron Shell: 8 Sets × 15 Seconds",
            ],
            ["Animal Synthesis: 5 Minutes continuous Bear/Monkey/Crab"],
            ["AAAAH Mantra: 30 Cycles"],
        ],
        "trial": {
            "name": "The Red Furnace",
            "tasks": "Master Tempo Gauntlet (10/10 Pushups + Squats) + 5m Animal Flow",
            "coins": 3000,
            "stars": 5,
            "stat_points": 1,
            "item": "Ronin's Bokken",
        },
    },
    {
        "level": 10,
        "subtitle": "The Lighting of the Forge",
        "days": 21,
        "xp": 840,
        "coins": 75,
        "stat_points": 7,
        "tasks": [
            ["Zhan Zhuang: 35 Minutes"],
            [
                "Master Tempo (10s/10s) Push-ups: 5 Sets × 5 Reps",
                "Archer Push-ups: 4 Sets × 8 Reps/Side",
                "Low Horse Stance (Thighs Parallel): 5 Sets × 2 Minutes",
            ],
            ["The 7 Pillar Gauntlet (90s each) + 10 Sets × 15s Iron Shell"],
            ["The Chimera Flow: 30 Minutes non-stop mobility (Bear/Monkey/Crab)"],
            ["Unified Vibration: 50 Cycles"],
        ],
        "trial": {
            "name": "The Gate of Fire",
            "tasks": "Zhan Zhuang (30m) + Iron Shell (10 sets) + Recite the Vow",
            "coins": 3000,
            "stars": 1,
            "stat_points": 50,
            "item": "Crown | Unlock: Stage 2",
        },
    },
]
