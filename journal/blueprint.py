# journal/blueprint.py
"""Authored roadmap (through Aug 2028). Data only; validation lives in roadmap.py."""
from __future__ import annotations

from functools import lru_cache

from .roadmap import Roadmap, build_blocks

FLAGS = {
    "French": "🇫🇷",
    "Bulgarian": "🇧🇬",
    "Norwegian": "🇳🇴",
    "Portuguese": "🇧🇷",
    "Romanian": "🇷🇴",
    "Swedish": "🇸🇪",
    "Russian": "🇷🇺",
    "Dutch": "🇳🇱",
    "Polish": "🇵🇱",
    "Italian": "🇮🇹",
    "English": "🇬🇧",
    "Spanish": "🇪🇸",
}

BLOCKS = [
    {
        "id": "2025-2026",
        "title": "Block 1",
        "is_current": True,
        "range": "Now → Aug 2026",
        "active": [
            {"name": "Bulgarian", "note": "A2→B2", "graduate_at_end": True},
            {"name": "Norwegian", "note": "A1→B1"},
            {"name": "Portuguese", "note": "B1→C1", "graduate_at_end": True},
        ],
        "passive": {"name": "Romanian", "note": "A0 (exposure only)"},
        "maintenance": ["French"],
    },
    {
        "id": "2026-2027",
        "title": "Block 2",
        "range": "Sep 2026 → Aug 2027",
        "active": [
            {"name": "Norwegian", "note": "B1→B2", "graduate_at_end": True},
            {"name": "Romanian", "note": "A0/A2→B2", "graduate_at_end": True},
            {"name": "Swedish", "note": "A0→B1"},
        ],
        "passive": {"name": "Russian", "note": "A0 (seed)"},
        "maintenance": ["French", "Bulgarian", "Portuguese"],
    },
    {
        "id": "2027-2028",
        "title": "Block 3",
        "range": "Sep 2027 → Aug 2028",
        "active": [
            {"name": "Russian", "note": "A0→A2/B1 (Slavic pace; likely B1 max)"},
            {"name": "Swedish", "note": "B1→B2", "graduate_at_end": True},
            {"name": "Dutch", "note": "A0→A2/B1"},
        ],
        "passive": {"name": "Polish", "note": "A0 (seed)"},
        "maintenance": ["French", "Bulgarian", "Portuguese", "Norwegian", "Romanian"],
    },
]


@lru_cache(maxsize=None)
def get_roadmap() -> Roadmap:
    """Build (and validate) the authored roadmap once per process."""
    return Roadmap(build_blocks(BLOCKS), flags=FLAGS)
