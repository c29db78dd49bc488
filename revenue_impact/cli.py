"""Market Delay Calculator console.

Run without arguments for the interactive prompt loop, or pass a subcommand
to compute a single result:

    revenue-impact delay 20 80 1000 4
    revenue-impact recall 4 10 100 2 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

import uvicorn

from revenue_impact.calculators import ImpactCalculatorBase, RevenueImpactCalculator
from revenue_impact.config import Settings, get_settings
from revenue_impact.formatting import format_delay_result, format_recall_result
from revenue_impact.models.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

BANNER = "=== Market Delay Calculator ==="


def parse_number(text: str) -> float:
    """Parse a number with '.' as the decimal separator, whatever the locale."""
    return float(text.strip())


class InteractiveShell:
    """Prompt loop feeding the delay and recall calculators."""

    def __init__(
        self,
        calculator: ImpactCalculatorBase,
        settings: Settings,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.calculator = calculator
        self.settings = settings
        self.read = read or input
        self.write = write or print

    def run(self) -> int:
        self.write(BANNER)
        try:
            while self._run_once():
                pass
        except EOFError:
            logger.debug("End of input, leaving shell")
            self.write("")
        return 0

    def _prompt_number(self, prompt: str, allow_exit: bool = False) -> Optional[float]:
        # Re-prompts the same field until it parses; None means the exit sentinel
        while True:
            entry = self.read(prompt)
            if allow_exit and entry.strip().lower() == self.settings.exit_sentinel.lower():
                return None
            try:
                return parse_number(entry)
            except ValueError:
                self.write(f"Invalid number: {entry!r}")

    def _run_once(self) -> bool:
        sentinel = self.settings.exit_sentinel
        triangle_weeks = self._prompt_number(
            f"Enter ideal ramp-up time in weeks ('{sentinel}' for exit): ", allow_exit=True
        )
        if triangle_weeks is None:
            return False
        maturity_weeks = self._prompt_number("Enter maturity phase length in weeks: ")
        peak_revenue = self._prompt_number("Enter peak revenue (per week): ")
        delay_weeks = self._prompt_number("Enter development delay in weeks: ")

        places = self.settings.decimal_places
        try:
            result = self.calculator.calculate(
                triangle_weeks, maturity_weeks, peak_revenue, delay_weeks
            )
        except InvalidArgumentError as e:
            self.write(f"Error: {e}")
            return True
        self.write("")
        self.write(format_delay_result(result, places))

        answer = self.read("Calculate recall impact? (y/n): ")
        if answer.strip().lower() not in ("y", "yes"):
            return True
        recall_weeks = self._prompt_number("Enter recall duration in weeks: ")
        try:
            recall = self.calculator.calculate_recall_loss(
                triangle_weeks, maturity_weeks, peak_revenue, recall_weeks
            )
        except InvalidArgumentError as e:
            self.write(f"Error: {e}")
            return True
        self.write("")
        self.write(format_recall_result(recall, places))
        return True


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="revenue-impact", description=BANNER.strip("= "))
    p.add_argument("--log-level", default=None, help="override REVENUE_IMPACT_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd")

    curve = argparse.ArgumentParser(add_help=False)
    curve.add_argument("triangle_weeks", type=float)
    curve.add_argument("maturity_weeks", type=float)
    curve.add_argument("peak_revenue", type=float)
    curve.add_argument("--json", action="store_true", help="print the result as JSON")

    p_delay = sub.add_parser("delay", parents=[curve], help="launch delay loss")
    p_delay.add_argument("delay_weeks", type=float)
    p_recall = sub.add_parser("recall", parents=[curve], help="recall loss")
    p_recall.add_argument("recall_weeks", type=float)

    p_serve = sub.add_parser("serve", help="run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    calculator = RevenueImpactCalculator()
    if args.cmd is None:
        return InteractiveShell(calculator, settings).run()
    if args.cmd == "serve":
        uvicorn.run("revenue_impact.main:app", host=args.host, port=args.port)
        return 0

    try:
        if args.cmd == "delay":
            result = calculator.calculate(
                args.triangle_weeks, args.maturity_weeks, args.peak_revenue, args.delay_weeks
            )
            text = format_delay_result(result, settings.decimal_places)
        else:
            result = calculator.calculate_recall_loss(
                args.triangle_weeks, args.maturity_weeks, args.peak_revenue, args.recall_weeks
            )
            text = format_recall_result(result, settings.decimal_places)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), indent=2) if args.json else text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
