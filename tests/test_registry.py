"""Tests for the calculator registry."""

import pytest

from revenue_impact.calculators.formulas import calc_launch_delay, calc_recall_loss
from revenue_impact.calculators.registry import get_all_calculators, get_calculator
from revenue_impact.models.errors import InvalidArgumentError
from revenue_impact.models.results import DelayCalculationResult, RecallCalculationResult


class TestAllCalculatorsRegistered:
    def test_two_calculators_registered(self):
        assert len(get_all_calculators()) == 2

    def test_expected_ids_present(self):
        all_calculators = get_all_calculators()
        for calculator_id in ["launch_delay", "recall_loss"]:
            assert calculator_id in all_calculators

    def test_registry_copy_is_detached(self):
        copy = get_all_calculators()
        copy.pop("launch_delay")
        assert get_calculator("launch_delay") is not None

    def test_unknown_id_returns_none(self):
        assert get_calculator("churn_reduction") is None


class TestCalculatorDefinition:
    def test_launch_delay_definition(self):
        d = get_calculator("launch_delay")
        assert d.calculator_fn is calc_launch_delay
        assert d.required_inputs == [
            "triangle_weeks",
            "maturity_weeks",
            "peak_revenue",
            "delay_weeks",
        ]

    def test_recall_loss_definition(self):
        d = get_calculator("recall_loss")
        assert d.calculator_fn is calc_recall_loss
        assert d.required_inputs[-1] == "recall_weeks"

    def test_run_from_mapping(self, large_launch):
        r = get_calculator("launch_delay").run({**large_launch, "delay_weeks": 4})
        assert isinstance(r, DelayCalculationResult)
        assert r.delayed_total == pytest.approx(80_000)

    def test_run_ignores_extra_inputs(self, small_launch):
        r = get_calculator("recall_loss").run(
            {**small_launch, "recall_weeks": 2, "delay_weeks": 1}
        )
        assert isinstance(r, RecallCalculationResult)
        assert r.recall_loss == pytest.approx(200)

    def test_run_missing_input_raises(self, small_launch):
        with pytest.raises(InvalidArgumentError, match="recall_weeks is required"):
            get_calculator("recall_loss").run(small_launch)
