"""CLI for the infixeval expression evaluator.

Usage:
    echo "2 + 3 * 4" | python -m infixeval     # Read one line from stdin
    python -m infixeval "(1 + 2) ^ 2"           # Expression as an argument
    python -m infixeval --log-level debug "1+2" # Trace every reduction
    python -m infixeval -- "-1"                 # Force argument parsing
"""

from __future__ import annotations

import logging
import math
import sys
from decimal import Decimal
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from infixeval.config import Settings
from infixeval.errors import ExpressionError
from infixeval.evaluator import Evaluator
from infixeval.tokenizer import Tokenizer

app = typer.Typer(
    name="infixeval",
    help="Evaluate an infix arithmetic expression",
    add_completion=False,
)
console = Console(stderr=True)

_PLAIN_MIN = 1e-3
_PLAIN_MAX = 1e7


def format_result(value: float) -> str:
    """Render a result the way Java's Double.toString does.

    14.0, 0.5, 1.0E7, 1.5E-4, Infinity, -Infinity, NaN. Scientific form is
    used for magnitudes of at least 1e7 or below 1e-3.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 or _PLAIN_MIN <= abs(value) < _PLAIN_MAX:
        return repr(value)

    # Shortest round-tripping digits, as repr() picks them.
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    mantissa = f"{text[0]}.{text[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{exponent + len(digits) - 1}"


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command(context_settings={"ignore_unknown_options": True})
def cmd_evaluate(
    expression: Optional[str] = typer.Argument(None, help="Expression to evaluate (default: one line of stdin)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="debug, info, warning, error"),
) -> None:
    """Evaluate an expression and print its value."""
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level
    try:
        level = settings.level
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    _configure_logging(level)

    source = expression if expression is not None else Tokenizer.from_stream(sys.stdin)
    try:
        value = Evaluator().evaluate(source)
    except ExpressionError as e:
        console.print(f"[red]Invalid expression:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(format_result(value))


if __name__ == "__main__":
    app()
