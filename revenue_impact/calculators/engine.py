"""Stateless service object wrapping the launch-delay and recall formulas."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from revenue_impact.calculators.formulas import calc_launch_delay, calc_recall_loss
from revenue_impact.models.errors import InvalidArgumentError
from revenue_impact.models.results import DelayCalculationResult, RecallCalculationResult

logger = logging.getLogger(__name__)


class ImpactCalculatorBase(ABC):
    """Abstract base for revenue impact calculators."""

    @abstractmethod
    def calculate(
        self,
        triangle_weeks: float,
        maturity_weeks: float,
        peak_revenue: float,
        delay_weeks: float,
    ) -> DelayCalculationResult:
        """Ideal vs. delayed revenue for a launch delayed by ``delay_weeks``."""
        ...

    @abstractmethod
    def calculate_recall_loss(
        self,
        triangle_weeks: float,
        maturity_weeks: float,
        peak_revenue: float,
        recall_weeks: float,
    ) -> RecallCalculationResult:
        """Revenue lost to a recall of ``recall_weeks`` during the plateau."""
        ...


class RevenueImpactCalculator(ImpactCalculatorBase):
    """Stateless engine that runs the delay and recall calculations."""

    def calculate(
        self,
        triangle_weeks: float,
        maturity_weeks: float,
        peak_revenue: float,
        delay_weeks: float,
    ) -> DelayCalculationResult:
        logger.debug(
            "Delay calculation: triangle=%s maturity=%s peak=%s delay=%s",
            triangle_weeks, maturity_weeks, peak_revenue, delay_weeks,
        )
        try:
            return calc_launch_delay(triangle_weeks, maturity_weeks, peak_revenue, delay_weeks)
        except InvalidArgumentError as e:
            logger.info("Rejected delay calculation: %s", e)
            raise

    def calculate_recall_loss(
        self,
        triangle_weeks: float,
        maturity_weeks: float,
        peak_revenue: float,
        recall_weeks: float,
    ) -> RecallCalculationResult:
        logger.debug(
            "Recall calculation: triangle=%s maturity=%s peak=%s recall=%s",
            triangle_weeks, maturity_weeks, peak_revenue, recall_weeks,
        )
        try:
            return calc_recall_loss(triangle_weeks, maturity_weeks, peak_revenue, recall_weeks)
        except InvalidArgumentError as e:
            logger.info("Rejected recall calculation: %s", e)
            raise
