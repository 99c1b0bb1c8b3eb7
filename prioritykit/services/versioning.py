# prioritykit/services/versioning.py

"""Next-version suggestion for releases.

Parsing is lenient: each dotted component is read as a leading
integer and anything unreadable becomes 0. ``next_version`` never raises.
Callers wanting stricter guarantees check ``is_well_formed`` and log.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Union

from prioritykit.schemas.enums import ChangeType

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_VERSION = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+\Z")
# Longer components read as 0; int and str conversions are bounded
_MAX_COMPONENT_DIGITS = 4000


class VersionParts(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def _component(raw: Optional[str]) -> int:
    if raw is None:
        return 0
    match = _LEADING_INT.match(raw)
    if not match:
        return 0
    digits = match.group(1)
    if len(digits.lstrip("+-")) > _MAX_COMPONENT_DIGITS:
        return 0
    try:
        return int(digits)
    except ValueError:
        return 0


def parse_version(current: Optional[str]) -> VersionParts:
    """Split on '.' and read the first three components, defaulting to 0."""
    parts = (current or "").split(".")
    padded = parts + [None] * (3 - len(parts))
    return VersionParts(_component(padded[0]), _component(padded[1]), _component(padded[2]))


def is_well_formed(version: Optional[str]) -> bool:
    return bool(version) and _STRICT_VERSION.match(version) is not None  # type: ignore[arg-type]


def coerce_change_type(change_type: Union[ChangeType, str, None]) -> ChangeType:
    """Exact enum values only; anything else (including "major") is MINOR."""
    if isinstance(change_type, ChangeType):
        return change_type
    if not isinstance(change_type, str):
        return ChangeType.MINOR
    try:
        return ChangeType(change_type)
    except ValueError:
        return ChangeType.MINOR


def next_version(current: Optional[str], change_type: Union[ChangeType, str, None]) -> str:
    major, minor, patch = parse_version(current)
    kind = coerce_change_type(change_type)

    if kind == ChangeType.MAJOR:
        return str(VersionParts(major + 1, 0, 0))
    if kind in (ChangeType.PATCH, ChangeType.HOTFIX):
        return str(VersionParts(major, minor, patch + 1))
    return str(VersionParts(major, minor + 1, 0))


def is_increase(previous: Optional[str], candidate: Optional[str]) -> bool:
    """Whether ``candidate`` sorts strictly after ``previous`` (lenient parse)."""
    return tuple(parse_version(candidate)) > tuple(parse_version(previous))


__all__ = [
    "VersionParts",
    "parse_version",
    "is_well_formed",
    "coerce_change_type",
    "next_version",
    "is_increase",
]
