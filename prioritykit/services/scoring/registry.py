# prioritykit/services/scoring/registry.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from prioritykit.services.scoring.interfaces import ScoringFramework, ScoringEngine
from prioritykit.services.scoring.engines import (
    RICE_FIELDS,
    WSJF_FIELDS,
    RiceScoringEngine,
    WsjfScoringEngine,
)


@dataclass(frozen=True)
class FrameworkInfo:
    """An engine plus the inputs it needs for a score."""
    name: ScoringFramework
    required_fields: Tuple[str, ...]
    engine: ScoringEngine


SCORING_FRAMEWORKS: Dict[ScoringFramework, FrameworkInfo] = {
    ScoringFramework.RICE: FrameworkInfo(
        name=ScoringFramework.RICE,
        required_fields=RICE_FIELDS,
        engine=RiceScoringEngine(),
    ),
    ScoringFramework.WSJF: FrameworkInfo(
        name=ScoringFramework.WSJF,
        required_fields=WSJF_FIELDS,
        engine=WsjfScoringEngine(),
    ),
}


def get_framework(framework: ScoringFramework) -> FrameworkInfo:
    info = SCORING_FRAMEWORKS.get(framework)
    if not info:
        raise ValueError(f"Unknown scoring framework: {framework}")
    return info


def get_engine(framework: ScoringFramework) -> ScoringEngine:
    return get_framework(framework).engine


__all__ = [
    "FrameworkInfo",
    "SCORING_FRAMEWORKS",
    "get_framework",
    "get_engine",
]
