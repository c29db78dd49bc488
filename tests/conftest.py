"""Shared fixtures for the revenue impact test suite."""

import pytest

from revenue_impact.calculators import RevenueImpactCalculator
from revenue_impact.config import Settings


@pytest.fixture
def calculator() -> RevenueImpactCalculator:
    return RevenueImpactCalculator()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def small_launch() -> dict:
    """4-week ramp, 10-week plateau at 100/week -- ideal total 1400."""
    return {"triangle_weeks": 4.0, "maturity_weeks": 10.0, "peak_revenue": 100.0}


@pytest.fixture
def large_launch() -> dict:
    """20-week ramp, 80-week plateau at 1000/week -- ideal total 100,000."""
    return {"triangle_weeks": 20.0, "maturity_weeks": 80.0, "peak_revenue": 1000.0}
