# prioritykit/services/priority.py

"""Manual priority alongside the RICE score.

The two are reported as independent facets. No rule in the product merges them
into a single rank, so nothing here does either.
"""

from __future__ import annotations

from typing import Optional, Union

from prioritykit.schemas.enums import Priority
from prioritykit.schemas.idea import DisplayPriority


def coerce_priority(value: Union[Priority, str, None]) -> Priority:
    """Accept the enum or its name in any case; None falls back to MEDIUM."""
    if value is None:
        return Priority.MEDIUM
    if isinstance(value, Priority):
        return value
    try:
        return Priority(str(value).strip().upper())
    except ValueError as e:
        raise ValueError(f"Unknown priority: {value!r}; expected one of HIGH, MEDIUM, LOW") from e


def classify(manual_priority: Union[Priority, str], rice_score: Optional[float]) -> DisplayPriority:
    return DisplayPriority(manual=coerce_priority(manual_priority), rice=rice_score)


__all__ = ["coerce_priority", "classify"]
