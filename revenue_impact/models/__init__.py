from revenue_impact.models.errors import InvalidArgumentError
from revenue_impact.models.results import DelayCalculationResult, RecallCalculationResult

__all__ = [
    "DelayCalculationResult",
    "InvalidArgumentError",
    "RecallCalculationResult",
]
