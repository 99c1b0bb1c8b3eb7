# prioritykit/services/scoring/engines/__init__.py

from .rice import RICE_FIELDS, RiceScoringEngine, compute_rice_score
from .wsjf import WSJF_FIELDS, WsjfScoringEngine, compute_wsjf_score

__all__ = [
    "RiceScoringEngine",
    "WsjfScoringEngine",
    "compute_rice_score",
    "compute_wsjf_score",
    "RICE_FIELDS",
    "WSJF_FIELDS",
]
