# journal/levels.py
from __future__ import annotations

import logging
import re
from typing import Dict, Optional

logger = logging.getLogger(__name__)

CEFR_LEVELS = ("A0", "A1", "A2", "B1", "B2", "C1", "C2")

_SYNONYMS: Dict[str, str] = {code: code for code in CEFR_LEVELS}
_SYNONYMS.update({
    "BEGINNER": "A1",
    "ELEMENTARY": "A2",
    "PREINTERMEDIATE": "A2",
    "INTERMEDIATE": "B1",
    "UPPERINTERMEDIATE": "B2",
    "ADVANCED": "C1",
    "PROFICIENT": "C2",
    "NATIVE": "C2",
    "FLUENT": "C1",
})

_STRIP = re.compile(r"[\s-]")


def normalize_level(raw: Optional[str]) -> Optional[str]:
    """
    Map a free-form proficiency label to a CEFR code.
    - "Upper-Intermediate", "upper intermediate" -> "B2"
    - unrecognized labels come back unchanged
    - None / "" -> None
    """
    if not raw:
        return None
    key = _STRIP.sub("", str(raw).upper())
    code = _SYNONYMS.get(key)
    if code is None:
        logger.debug("level label %r not recognized; passing through", raw)
        return raw
    return code


def is_canonical(code: Optional[str]) -> bool:
    return code in CEFR_LEVELS
