"""Launch-delay and recall revenue formulas.

The revenue curve is approximated as a ramp-up triangle, a flat plateau at
peak revenue, and a ramp-down triangle. Ramp-up and ramp-down together span
``triangle_weeks``; the plateau spans ``maturity_weeks``. Each function is a
pure calculation with no side effects. Inputs are validated in full before
any arithmetic, so an invalid call never produces a partial result.
"""

from __future__ import annotations

import math

from revenue_impact.calculators.registry import register_calculator
from revenue_impact.models.errors import InvalidArgumentError
from revenue_impact.models.results import DelayCalculationResult, RecallCalculationResult


def _validate_curve(triangle_weeks: float, maturity_weeks: float, peak_revenue: float) -> None:
    # Chained bounds also reject NaN and infinity
    if not (0 < triangle_weeks < math.inf):
        raise InvalidArgumentError("triangle_weeks", triangle_weeks, "must be greater than 0")
    if not (0 <= maturity_weeks < math.inf):
        raise InvalidArgumentError("maturity_weeks", maturity_weeks, "cannot be negative")
    if not (0 <= peak_revenue < math.inf):
        raise InvalidArgumentError("peak_revenue", peak_revenue, "cannot be negative")


def _percent_of(part: float, whole: float) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


@register_calculator(
    calculator_id="launch_delay",
    label="Launch Delay Loss",
    description=(
        "Revenue lost when a launch slips by delay_weeks. The delay compresses "
        "the ramp, so the plateau is reached at "
        "peak_revenue * (1 - delay_weeks / triangle_weeks)."
    ),
    required_inputs=["triangle_weeks", "maturity_weeks", "peak_revenue", "delay_weeks"],
)
def calc_launch_delay(
    triangle_weeks: float,
    maturity_weeks: float,
    peak_revenue: float,
    delay_weeks: float,
) -> DelayCalculationResult:
    """Ideal vs. delayed revenue and the loss caused by the delay.

    Ideal:   triangle = peak * triangle_weeks, plateau = peak * maturity_weeks
    Delayed: height   = peak * (1 - delay / triangle_weeks)
             triangle = height * (triangle_weeks - delay)
             plateau  = height * maturity_weeks
             extra    = height * delay
             total    = triangle + plateau + extra
    """
    _validate_curve(triangle_weeks, maturity_weeks, peak_revenue)
    if not (0 <= delay_weeks < triangle_weeks):
        raise InvalidArgumentError(
            "delay_weeks", delay_weeks, f"must be >= 0 and < triangle_weeks ({triangle_weeks})"
        )
    if delay_weeks > maturity_weeks:
        raise InvalidArgumentError(
            "delay_weeks", delay_weeks, f"cannot exceed maturity_weeks ({maturity_weeks})"
        )

    ideal_triangle = triangle_weeks * peak_revenue
    ideal_plateau = maturity_weeks * peak_revenue
    ideal_total = ideal_triangle + ideal_plateau

    delayed_height = peak_revenue * (1 - delay_weeks / triangle_weeks)
    delayed_triangle = delayed_height * (triangle_weeks - delay_weeks)
    delayed_plateau = maturity_weeks * delayed_height
    # Revenue during the delay window itself, at the lowered plateau height
    delayed_extra = delay_weeks * delayed_height
    delayed_total = delayed_triangle + delayed_plateau + delayed_extra

    absolute_loss = ideal_total - delayed_total

    return DelayCalculationResult(
        ideal_triangle=ideal_triangle,
        ideal_plateau=ideal_plateau,
        ideal_total=ideal_total,
        delayed_triangle=delayed_triangle,
        delayed_plateau=delayed_plateau,
        delayed_total=delayed_total,
        absolute_loss=absolute_loss,
        percent_loss=_percent_of(absolute_loss, ideal_total),
        delayed_extra=delayed_extra,
        delayed_plateau_height=delayed_height,
    )


@register_calculator(
    calculator_id="recall_loss",
    label="Recall Loss",
    description=(
        "Revenue lost while sales are suspended for recall_weeks during the "
        "plateau phase. Formula: recall_weeks * peak_revenue."
    ),
    required_inputs=["triangle_weeks", "maturity_weeks", "peak_revenue", "recall_weeks"],
)
def calc_recall_loss(
    triangle_weeks: float,
    maturity_weeks: float,
    peak_revenue: float,
    recall_weeks: float,
) -> RecallCalculationResult:
    """Recall_Loss = recall_weeks x peak_revenue, taken out of the ideal total."""
    _validate_curve(triangle_weeks, maturity_weeks, peak_revenue)
    if not (recall_weeks >= 0):
        raise InvalidArgumentError("recall_weeks", recall_weeks, "cannot be negative")
    if recall_weeks > maturity_weeks:
        raise InvalidArgumentError(
            "recall_weeks", recall_weeks, f"cannot exceed maturity_weeks ({maturity_weeks})"
        )

    ideal_total = peak_revenue * (triangle_weeks + maturity_weeks)
    recall_loss = recall_weeks * peak_revenue

    return RecallCalculationResult(
        ideal_total=ideal_total,
        recall_weeks=recall_weeks,
        recall_loss=recall_loss,
        adjusted_total=ideal_total - recall_loss,
        percent_loss=_percent_of(recall_loss, ideal_total),
    )
