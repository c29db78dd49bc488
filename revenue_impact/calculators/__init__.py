# Importing formulas registers every calculator
from revenue_impact.calculators.engine import ImpactCalculatorBase, RevenueImpactCalculator
from revenue_impact.calculators.formulas import calc_launch_delay, calc_recall_loss
from revenue_impact.calculators.registry import (
    CalculatorDefinition,
    get_all_calculators,
    get_calculator,
)

__all__ = [
    "CalculatorDefinition",
    "ImpactCalculatorBase",
    "RevenueImpactCalculator",
    "calc_launch_delay",
    "calc_recall_loss",
    "get_all_calculators",
    "get_calculator",
]
