# prioritykit/services/scoring/engines/rice.py

from __future__ import annotations

from typing import Optional

from prioritykit.services.scoring.interfaces import ScoringFramework, ScoreInputs, ScoreResult
from prioritykit.services.scoring.utils import missing_fields, strict_div

RICE_FIELDS = ("reach", "impact", "confidence", "effort")


def compute_rice_score(
    reach: Optional[float],
    impact: Optional[float],
    confidence: Optional[float],
    effort: Optional[float],
) -> Optional[float]:
    """(reach * impact * confidence) / effort.

    Returns None when any input is missing ("not yet scored" is not zero).
    Raises ZeroEffortError when effort is 0. Values are neither clamped nor
    rounded.
    """
    if reach is None or impact is None or confidence is None or effort is None:
        return None
    return strict_div(reach * impact * confidence, effort, ScoringFramework.RICE.value)


class RiceScoringEngine:
    """RICE scoring engine.

    RICE formula: (Reach * Impact * Confidence) / Effort
    Inputs are taken as-is; range checks belong to whoever collects them.
    """

    framework = ScoringFramework.RICE

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        components = {name: getattr(inputs, name) for name in RICE_FIELDS}

        missing = missing_fields(inputs, RICE_FIELDS)
        if missing:
            return ScoreResult(
                components=components,
                warnings=[f"RICE: missing inputs: {', '.join(missing)}"],
            )

        value = inputs.reach * inputs.impact * inputs.confidence  # type: ignore[operator]
        overall = compute_rice_score(inputs.reach, inputs.impact, inputs.confidence, inputs.effort)
        components["value_raw"] = value

        return ScoreResult(
            value_score=value,
            effort_score=inputs.effort,
            overall_score=overall,
            components=components,
        )


__all__ = ["RiceScoringEngine", "compute_rice_score", "RICE_FIELDS"]
