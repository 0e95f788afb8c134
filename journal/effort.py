# journal/effort.py
from __future__ import annotations

import math
from typing import Dict, List, Optional

EFFORT_MIN = 1
EFFORT_MAX = 5

EFFORT_LABELS: Dict[int, str] = {
    1: "Passive",
    2: "Light",
    3: "Focused",
    4: "Intense",
    5: "Deep",
}

EFFORT_HELP: Dict[int, str] = {
    1: "Passive: podcasts, YouTube, background listening, etc.",
    2: "Light: low-friction input or short practice.",
    3: "Focused: deliberate practice with attention.",
    4: "Intense: challenging drills, output-heavy work.",
    5: "Deep: long, immersive, highly demanding session.",
}


def clamp_effort(value: float) -> int:
    # half-up, so an average of 2.5 reads as 3
    return max(EFFORT_MIN, min(EFFORT_MAX, int(math.floor(value + 0.5))))


def effort_label(avg: Optional[float]) -> Optional[str]:
    """
    Label for a (possibly averaged) effort.
    None when there is nothing to rate: no value, or an average that rounds below 1.
    """
    if not avg or math.floor(avg + 0.5) < EFFORT_MIN:
        return None
    return EFFORT_LABELS[clamp_effort(avg)]


def effort_scale() -> List[Dict]:
    return [
        {"value": v, "label": EFFORT_LABELS[v], "help": EFFORT_HELP[v]}
        for v in range(EFFORT_MIN, EFFORT_MAX + 1)
    ]
