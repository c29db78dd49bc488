"""Console rendering of calculation results."""

from __future__ import annotations

from revenue_impact.models.results import DelayCalculationResult, RecallCalculationResult

DELAY_LINES = [
    ("Ideal total", "ideal_total"),
    ("Delayed total", "delayed_total"),
    ("Absolute loss", "absolute_loss"),
]

RECALL_LINES = [
    ("Ideal total", "ideal_total"),
    ("Recall weeks", "recall_weeks"),
    ("Recall loss", "recall_loss"),
    ("Adjusted total", "adjusted_total"),
]


def format_number(value: float, decimal_places: int = 2) -> str:
    """Fixed-point, '.' decimal separator, no grouping."""
    return f"{value:.{decimal_places}f}"


def _render(result, lines: list[tuple[str, str]], decimal_places: int) -> str:
    rendered = [
        f"{label}: {format_number(getattr(result, field), decimal_places)}"
        for label, field in lines
    ]
    rendered.append(f"Percent loss: {format_number(result.percent_loss, decimal_places)}%")
    return "\n".join(rendered)


def format_delay_result(result: DelayCalculationResult, decimal_places: int = 2) -> str:
    return _render(result, DELAY_LINES, decimal_places)


def format_recall_result(result: RecallCalculationResult, decimal_places: int = 2) -> str:
    return _render(result, RECALL_LINES, decimal_places)
