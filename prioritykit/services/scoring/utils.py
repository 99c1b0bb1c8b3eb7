# prioritykit/services/scoring/utils.py

from __future__ import annotations

from typing import Any, Iterable, List


class ZeroEffortError(ZeroDivisionError):
    """Raised when a score would be divided by a zero effort / job size."""

    def __init__(self, framework: str, field: str = "effort") -> None:
        self.framework = framework
        self.field = field
        super().__init__(f"{framework}: {field} must be non-zero to compute a score")


def strict_div(numerator: float, denominator: float, framework: str, field: str = "effort") -> float:
    """Divide, failing fast on a zero denominator instead of yielding inf/NaN."""
    if denominator == 0:
        raise ZeroEffortError(framework, field)
    return numerator / denominator


def missing_fields(source: Any, fields: Iterable[str]) -> List[str]:
    """Names of ``fields`` whose value on ``source`` is None."""
    return [name for name in fields if getattr(source, name, None) is None]


__all__ = ["ZeroEffortError", "strict_div", "missing_fields"]
