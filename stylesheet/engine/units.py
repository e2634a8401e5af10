"""Angle strings → radians."""

from __future__ import annotations

import math
import re

# Leading float the way a lenient float parser reads it: "45.5deg", " -1e2rad"
_LEADING_FLOAT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_leading_float(value: str) -> float:
    """Parse the numeric prefix of a string. NaN if there is none."""
    match = _LEADING_FLOAT_RE.match(value)
    if not match:
        return float("nan")
    return float(match.group(1))


def convert_to_radians(value: str) -> float:
    """Parse '0.5rad' or '60deg' into radians.

    Anything without 'rad' is read as degrees; unit validation happens in
    ``validation.validate_transform``.
    """
    number = parse_leading_float(value)
    if "rad" in value:
        return number
    return number * math.pi / 180
