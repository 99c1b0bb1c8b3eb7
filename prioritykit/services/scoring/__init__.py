from .interfaces import (
    ScoringFramework,
    ScoreInputs,
    ScoreResult,
    ScoringEngine,
)
from .registry import (
    FrameworkInfo,
    SCORING_FRAMEWORKS,
    get_framework,
    get_engine,
)
from .engines import compute_rice_score, compute_wsjf_score
from .utils import ZeroEffortError

__all__ = [
    "ScoringFramework",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
    "FrameworkInfo",
    "SCORING_FRAMEWORKS",
    "get_framework",
    "get_engine",
    "compute_rice_score",
    "compute_wsjf_score",
    "ZeroEffortError",
]
