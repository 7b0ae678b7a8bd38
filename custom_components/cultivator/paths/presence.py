"""Presence - Mystic Training path (SOUL), levels 1-10.

Five gates: Void, Mirror, Sight, Sonar, Altar.
"""

from .. import const
from ..engines.path_registry import PathMetadata

PATH_ID = "presence-mystic-training"

METADATA = PathMetadata(
    path_id=PATH_ID,
    name="Presence",
    description=(
        "Mystic Training path focusing on soul cultivation through the "
        "Five-Gate System"
    ),
    primary_stat=const.STAT_SOUL,
    starting_tier=const.TIER_D,
    max_level=10,
)

GATES = (
    ("stillness", "The Void"),
    ("reflection", "The Mirror"),
    ("insight", "The Sight"),
    ("sensing", "The Sonar"),
    ("disclosure", "The Altar"),
)

LEVELS = [
    {
        "level": 1,
        "subtitle": "The First Ripple",
        "days": 3,
        "xp": 120,
        "coins": 30,
        "stat_points": 2,
        "tasks": [
            ["The Drop: Set 2 Timers"],
            ["The Gaze: 2 Minutes"],
            ["Card Draw: Single Card"],
            ["Gravity Check: Basic Weight"],
            ["Ritual of Truth: 1 Sentence"],
        ],
        "trial": {
            "name": "The Quiet Room",
            "tasks": "The Drop (Continuous Awareness) + 10 Minutes Silence",
            "coins": 200,
            "stars": 1,
            "stat_points": 1,
            "item": "Rough Quartz",
        },
    },
    {
        "level": 2,
        "subtitle": "The Settling Dust",
        "days": 5,
        "xp": 200,
        "coins": 35,
        "stat_points": 3,
        "tasks": [
            ["The Drop: Set 3 Timers"],
            ["Eye Contact: 3 Minutes"],
            ["Card Draw: Single Card"],
            ["Gravity Check: Heavy Limbs"],
            ["Ritual of Truth: The Annoyance"],
        ],
        "trial": {
            "name": "The Soft Gaze",
            "tasks": "Mirror Gaze: 5 Minutes + Gravity Check: 5 Minutes",
            "coins": 300,
            "stars": 1,
            "stat_points": 1,
            "item": "Candle of Focus",
        },
    },
    {
        "level": 3,
        "subtitle": "The Deepening Waters",
        "days": 7,
        "xp": 280,
        "coins": 40,
        "stat_points": 3,
        "tasks": [
            ["The Drop: Set 4 Timers", "Breath Counting: 5 Minutes"],
            ["The Stranger: 5 Minutes"],
            ["Card Draw: Single Card"],
            ["Gravity Check: Tension Mapping"],
            ["Ritual of Truth: The Secret"],
        ],
        "trial": {
            "name": "The Silent Hour",
            "tasks": "Digital Fast: 60 Minutes + 4x Drop Triggers",
            "coins": 500,
            "stars": 2,
            "stat_points": 1,
            "item": "Silk Blindfold",
        },
    },
    {
        "level": 4,
        "subtitle": "The Anchor in Chaos",
        "days": 9,
        "xp": 360,
        "coins": 45,
        "stat_points": 4,
        "tasks": [
            ["The Drop: Set 5 Timers", "The Pause: 10 Minutes"],
            ["The Judge: 7 Minutes"],
            ["Card Draw: Single Card", "Symbol Hunt"],
            ["Gravity Check: The Center"],
            ["Ritual of Truth: The Failure"],
        ],
        "trial": {
            "name": "The Rooted Mind",
            "tasks": "The Pause: 20 Minutes (Continuous) + Ritual of Truth",
            "coins": 600,
            "stars": 2,
            "stat_points": 1,
            "item": "Incense of Memory",
        },
    },
    {
        "level": 5,
        "subtitle": "The First Awakening",
        "days": 11,
        "xp": 440,
        "coins": 50,
        "stat_points": 4,
        "tasks": [
            ["The Drop: Set 6 Timers", "Zazen (Just Sitting): 15 Minutes"],
            ["The Trance: 10 Minutes"],
            ["Card Draw: Three Card Spread"],
            ["Gravity Check: The Flow"],
            ["Ritual of Truth: The Burning"],
        ],
        "trial": {
            "name": "The Ritual of Truth",
            "tasks": "The Burning Ritual + Zazen: 20 Minutes",
            "coins": 800,
            "stars": 3,
            "stat_points": 1,
            "item": "Amulet of the Seer",
        },
    },
    {
        "level": 6,
        "subtitle": "The Prismatic Weight",
        "days": 13,
        "xp": 520,
        "coins": 55,
        "stat_points": 5,
        "tasks": [
            ["The Drop: Set 7 Timers", "Zazen: 20 Minutes"],
            ["Soft Focus Gaze: 10 Minutes"],
            ["Card Draw: 3 Cards", "Color Sensing"],
            ["Gravity Check: Expansion"],
            ["Ritual of Truth: The Hard Truth"],
        ],
        "trial": {
            "name": "The Weight of Light",
            "tasks": "Color Sensing (Red/Blue/Green) + Zazen: 25 Minutes",
            "coins": 1200,
            "stars": 3,
            "stat_points": 1,
            "item": "Prism Shard",
        },
    },
    {
        "level": 7,
        "subtitle": "The Invisible Touch",
        "days": 15,
        "xp": 600,
        "coins": 60,
        "stat_points": 5,
        "tasks": [
            ["The Drop: Set 8 Timers", "Space Between Thoughts: 20 Minutes"],
            ["The Dissociation: 12 Minutes"],
            ["Card Draw: 3 Cards", "Lucidity Check"],
            ["Gravity Check: The Room", "Heat Mapping"],
            ["Ritual of Truth: The Vow"],
        ],
        "trial": {
            "name": "The Blind Navigator",
            "tasks": "Gravity Check (Room) + Heat Mapping",
            "coins": 2000,
            "stars": 3,
            "stat_points": 1,
            "item": "Velvet Hood",
        },
    },
    {
        "level": 8,
        "subtitle": "The Resonance",
        "days": 17,
        "xp": 680,
        "coins": 65,
        "stat_points": 6,
        "tasks": [
            ["The Drop: Set 9 Timers", "White Noise Meditation: 25 Minutes"],
            ["Scrying: 15 Minutes"],
            ["Card Draw: 3 Cards", "Pattern Hunt"],
            ["Gravity Check: Object Vibe"],
            ["Ritual of Truth: The Release"],
        ],
        "trial": {
            "name": "The Static Field",
            "tasks": "White Noise: 30 Minutes + Ritual of Release",
            "coins": 2500,
            "stars": 4,
            "stat_points": 1,
            "item": "Tuning Fork",
        },
    },
    {
        "level": 9,
        "subtitle": "The Open Channel",
        "days": 19,
        "xp": 760,
        "coins": 70,
        "stat_points": 6,
        "tasks": [
            ["The Drop: Set 10 Timers", "The Great Silence: 30 Minutes"],
            ["The Unified Gaze: 15 Minutes"],
            ["Card Draw: Full Spread", "Prediction Game"],
            ["Gravity Check: The Aura", "Room Read"],
            ["Ritual of Truth: Absolute Honesty"],
        ],
        "trial": {
            "name": "The Clear Vessel",
            "tasks": "Ritual of Absolute Honesty + Great Silence (40m)",
            "coins": 3000,
            "stars": 5,
            "stat_points": 1,
            "item": "Crystal Sphere",
        },
    },
    {
        "level": 10,
        "subtitle": "The Resonant Cord",
        "days": 21,
        "xp": 840,
        "coins": 75,
        "stat_points": 7,
        "tasks": [
            ["The Drop: Every Hour", "The Long Sit: 45 Minutes"],
            ["The Soul Gaze: 20 Minutes"],
            ["Card Draw: The Life Read"],
            ["Gravity Check: Atmosphere Control"],
            ["Ritual of Truth: The Final Disclosure"],
        ],
        "trial": {
            "name": "The Rite of the Void",
            "tasks": "The Long Sit (60m) + The Final Disclosure",
            "coins": 3000,
            "stars": 1,
            "stat_points": 50,
            "item": "The Third Eye | Unlock: Stage 2",
        },
    },
]
