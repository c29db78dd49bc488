"""Immutable result records for the revenue impact calculators.

All revenue values are integrals of a revenue-rate curve over time, so their
unit is currency x weeks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DelayCalculationResult:
    """Ideal vs. delayed revenue for a launch that slipped by some weeks."""

    ideal_triangle: float
    ideal_plateau: float
    ideal_total: float
    delayed_triangle: float
    delayed_plateau: float
    delayed_total: float
    absolute_loss: float
    percent_loss: float
    # Components of delayed_total not covered by the two fields above
    delayed_extra: float = 0.0
    delayed_plateau_height: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecallCalculationResult:
    """Revenue lost while sales were suspended during the plateau phase."""

    ideal_total: float
    recall_weeks: float
    recall_loss: float
    adjusted_total: float
    percent_loss: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
