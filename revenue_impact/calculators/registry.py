from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from revenue_impact.models.errors import InvalidArgumentError

# Global registry -- maps calculator_id -> CalculatorDefinition
_REGISTRY: dict[str, CalculatorDefinition] = {}


@dataclass(frozen=True)
class CalculatorDefinition:
    """A calculator exposed to the shell and the API."""

    id: str
    label: str
    description: str
    required_inputs: list[str]  # keyword argument names, in prompt order
    calculator_fn: Callable[..., Any]

    def run(self, inputs: Mapping[str, float]) -> Any:
        """Call the calculator with keyword arguments pulled from ``inputs``."""
        kwargs: dict[str, float] = {}
        for name in self.required_inputs:
            if name not in inputs:
                raise InvalidArgumentError(name, None, "is required")
            kwargs[name] = inputs[name]
        return self.calculator_fn(**kwargs)


def register_calculator(
    calculator_id: str,
    label: str,
    description: str,
    required_inputs: list[str],
) -> Callable:
    """Decorator to register a pure calculation function by ID."""

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        definition = CalculatorDefinition(
            id=calculator_id,
            label=label,
            description=description,
            required_inputs=required_inputs,
            calculator_fn=fn,
        )
        _REGISTRY[calculator_id] = definition
        return fn

    return decorator


def get_calculator(calculator_id: str) -> Optional[CalculatorDefinition]:
    """Look up a calculator definition by ID."""
    return _REGISTRY.get(calculator_id)


def get_all_calculators() -> dict[str, CalculatorDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
