# Command-line interface definition for sevendate.
# This file is responsible only for argument parsing, validation,
# usage text, and turning errors into exit codes.
#
# No time lookup or formatting logic should live here.

from __future__ import annotations

from typing import List, Sequence

import typer
from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from typer.core import TyperCommand

from sevendate.core import render
from sevendate.exceptions import ArgumentError, SevenDateError
from sevendate.models import Configuration, Scope

USAGE = """\
Usage:

  7date [-d] [--week|--7month] [filepath]

Available options:
  -d        Use digital notation; better for sorting / filtering.
  --week    Print with week precision; for example, 12-.2016.
  --7month  Print with 7month precision; for example, 1--.2016."""

# Key under which the raw argument list is handed to the command.
_TOKENS_KEY = "sevendate.tokens"

app = typer.Typer(
    add_completion=False,
    help="Print a date in the 7date calendar (day-of-year in base 7).",
)
console = Console()


class _Verbatim:
    # Rich renderable that emits its text as a single unstyled segment:
    # no markup, tab expansion, control-code stripping or wrapping.
    def __init__(self, text: str) -> None:
        self.text = text

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Segment(self.text)
        yield Segment.line()


class _RawArgsCommand(TyperCommand):
    # Only -d, --week and --7month are flags; every other token, including
    # "--", "--help" and "-dx", is a file path. Click never sees the tokens.
    def parse_args(self, ctx: typer.Context, args: List[str]) -> List[str]:
        ctx.meta[_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, [])


def _say(text: str) -> None:
    # soft_wrap also turns off cropping to the terminal width.
    console.print(_Verbatim(text), soft_wrap=True)


def print_usage() -> None:
    _say(USAGE)


def build_configuration(tokens: Sequence[str]) -> Configuration:
    # Walk the tokens left to right; a later scope flag overrides an
    # earlier one, and the second path is reported as soon as it is seen.
    scope = Scope.day
    digital = False
    path = None

    for token in tokens:
        if token == "--week":
            scope = Scope.week
        elif token == "--7month":
            scope = Scope.seven_month
        elif token == "-d":
            digital = True
        elif path is not None:
            raise ArgumentError(token)
        else:
            path = token

    return Configuration(scope=scope, digital=digital, path=path)


@app.command(
    cls=_RawArgsCommand,
    add_help_option=False,
    help="Print today's 7date, or the 7date of a file's modification time.",
)
def main(ctx: typer.Context):
    try:
        config = build_configuration(ctx.meta.get(_TOKENS_KEY, []))
        output = render(config)
    except SevenDateError as exc:
        _say(f"!{exc}")
        print_usage()
        raise typer.Exit(code=exc.exit_code)

    _say(output)


if __name__ == "__main__":
    app()
