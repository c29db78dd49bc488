"""Tests for the RevenueImpactCalculator service object."""

import logging

import pytest

from revenue_impact.calculators import (
    ImpactCalculatorBase,
    RevenueImpactCalculator,
    calc_launch_delay,
    calc_recall_loss,
)
from revenue_impact.models.errors import InvalidArgumentError


class TestRevenueImpactCalculator:
    def test_is_an_impact_calculator(self, calculator):
        assert isinstance(calculator, ImpactCalculatorBase)

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ImpactCalculatorBase()

    def test_calculate_matches_formula(self, calculator, large_launch):
        assert calculator.calculate(**large_launch, delay_weeks=4) == calc_launch_delay(
            **large_launch, delay_weeks=4
        )

    def test_recall_matches_formula(self, calculator, small_launch):
        assert calculator.calculate_recall_loss(
            **small_launch, recall_weeks=2
        ) == calc_recall_loss(**small_launch, recall_weeks=2)

    def test_holds_no_state_between_calls(self, small_launch):
        calc = RevenueImpactCalculator()
        before = calc.calculate(**small_launch, delay_weeks=1)
        calc.calculate_recall_loss(**small_launch, recall_weeks=5)
        calc.calculate(**small_launch, delay_weeks=3)
        assert calc.calculate(**small_launch, delay_weeks=1) == before

    def test_rejection_is_logged_and_reraised(self, calculator, small_launch, caplog):
        with caplog.at_level(logging.INFO, logger="revenue_impact.calculators.engine"):
            with pytest.raises(InvalidArgumentError):
                calculator.calculate(**small_launch, delay_weeks=4)
        assert "Rejected delay calculation" in caplog.text

    def test_recall_rejection_is_logged_and_reraised(self, calculator, small_launch, caplog):
        with caplog.at_level(logging.INFO, logger="revenue_impact.calculators.engine"):
            with pytest.raises(InvalidArgumentError):
                calculator.calculate_recall_loss(**small_launch, recall_weeks=11)
        assert "Rejected recall calculation" in caplog.text
