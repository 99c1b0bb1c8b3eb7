# prioritykit/services/scoring/engines/wsjf.py

from __future__ import annotations

from typing import Optional

from prioritykit.services.scoring.interfaces import ScoringFramework, ScoreInputs, ScoreResult
from prioritykit.services.scoring.utils import missing_fields, strict_div

WSJF_FIELDS = ("business_value", "time_criticality", "risk_reduction", "job_size")


def compute_wsjf_score(
    business_value: Optional[float],
    time_criticality: Optional[float],
    risk_reduction: Optional[float],
    job_size: Optional[float],
) -> Optional[float]:
    """Cost of delay / job size, None when any input is missing."""
    if business_value is None or time_criticality is None or risk_reduction is None or job_size is None:
        return None
    cost_of_delay = business_value + time_criticality + risk_reduction
    return strict_div(cost_of_delay, job_size, ScoringFramework.WSJF.value, field="job_size")


class WsjfScoringEngine:
    """WSJF scoring engine.

    WSJF formula: Cost of Delay / Job Size
    Cost of Delay (CoD) = Business Value + Time Criticality + Risk Reduction
    - Missing components leave the score unset with a warning.
    - A zero job size raises ZeroEffortError.
    """

    framework = ScoringFramework.WSJF

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        components = {name: getattr(inputs, name) for name in WSJF_FIELDS}

        missing = missing_fields(inputs, WSJF_FIELDS)
        if missing:
            return ScoreResult(
                components=components,
                warnings=[f"WSJF: missing inputs: {', '.join(missing)}"],
            )

        overall = compute_wsjf_score(
            inputs.business_value,
            inputs.time_criticality,
            inputs.risk_reduction,
            inputs.job_size,
        )
        cod = inputs.business_value + inputs.time_criticality + inputs.risk_reduction  # type: ignore[operator]
        components["cost_of_delay"] = cod

        return ScoreResult(
            value_score=cod,
            effort_score=inputs.job_size,
            overall_score=overall,
            components=components,
        )


__all__ = ["WsjfScoringEngine", "compute_wsjf_score", "WSJF_FIELDS"]
