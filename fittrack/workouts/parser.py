# -*- coding: utf-8 -*-
"""Workout text parsing.

A submission holds one or more entries separated by ``;``. Each entry is five
newline-separated fields::

    #Legs
    *Squat
    -3 sets 10 reps
    80 weight
    45 time

The first character of the category, name and sets lines is a marker and is
dropped. Numbers are read leniently: the leading numeral of each sub-field is
used and trailing text is ignored (``"80kg"`` -> 80.0). A sub-field with no
leading numeral, or whose value cannot be stored (an integer outside the
signed 64-bit range, a float that overflows to infinity), yields ``None``.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

MIN_FIELDS = 5

ENTRY_SEPARATOR = ";"

# Stored as SQLite INTEGER, a signed 64-bit value.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_INT_RE = re.compile(r"^[+-]?\d+")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_SETS_TOKEN = re.compile("sets", re.IGNORECASE)
_REPS_TOKEN = re.compile("reps", re.IGNORECASE)
_WEIGHT_TOKEN = re.compile("weight", re.IGNORECASE)
_TIME_TOKEN = re.compile("time", re.IGNORECASE)


@dataclass
class ParsedWorkout:
    category: str
    workout_name: str
    sets: Optional[int]
    reps: Optional[int]
    weight: Optional[float]
    time: Optional[float]
    calories_burned: Optional[float] = None
    user: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.sets, self.reps, self.weight, self.time)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_leading_int(text: str) -> Optional[int]:
    match = _INT_RE.match(text.strip())
    if not match:
        return None
    digits = match.group(0)
    if len(digits) > 20:
        return None
    value = int(digits)
    return value if _INT_MIN <= value <= _INT_MAX else None


def parse_leading_float(text: str) -> Optional[float]:
    match = _FLOAT_RE.match(text.strip())
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def _before(token: re.Pattern, text: str) -> str:
    """Text preceding the first occurrence of ``token`` (all of it when absent)."""
    return token.split(text, maxsplit=1)[0]


def _between(start: re.Pattern, end: re.Pattern, text: str) -> Optional[str]:
    pieces = start.split(text, maxsplit=2)
    if len(pieces) < 2:
        return None
    return _before(end, pieces[1])


def split_submission(raw: str) -> List[str]:
    return [block.strip() for block in raw.split(ENTRY_SEPARATOR)]


def parse_entry(block: str) -> Optional[ParsedWorkout]:
    """Parse one entry block, or return None when it has fewer than five fields."""
    parts = [part.strip() for part in block.split("\n")]
    if len(parts) < MIN_FIELDS:
        return None

    sets_line = parts[2]
    reps_text = _between(_SETS_TOKEN, _REPS_TOKEN, sets_line)

    return ParsedWorkout(
        category=parts[0][1:].strip(),
        workout_name=parts[1][1:].strip(),
        sets=parse_leading_int(_before(_SETS_TOKEN, sets_line)[1:]),
        reps=parse_leading_int(reps_text) if reps_text is not None else None,
        weight=parse_leading_float(_before(_WEIGHT_TOKEN, parts[3])),
        time=parse_leading_float(_before(_TIME_TOKEN, parts[4])),
    )
