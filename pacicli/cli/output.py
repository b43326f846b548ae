"""CLI output helpers.

Command results go to stdout in the selected format: the command's own
text view, JSON or TOML. Errors go to stderr in text mode and to stdout
as a JSON object in JSON mode.
"""

import json
from collections.abc import Iterable, Sequence
from typing import Any, Callable, Optional

import tomli_w
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pacicli.cli.state import CLIState, OutputFormat
from pacicli.render import format_scalar

# Console instances for stdout and stderr
console = Console()
error_console = Console(stderr=True)

JSON_INDENT = 2


def print_error(message: str, state: CLIState, error: Optional[Exception] = None) -> None:
    """Print an error message (human) or a JSON error object.

    Args:
        message: The error message to display.
        state: CLI state with the output format.
        error: Optional exception carrying an error code, status code or suggestion.
    """
    error_code = getattr(error, "error_code", None)
    status_code = getattr(error, "status_code", None)
    suggestion = getattr(error, "suggestion", None)

    if state.json_mode:
        output: dict[str, Any] = {"status": "error", "message": message}
        if error_code:
            output["error_code"] = error_code
        if status_code is not None:
            output["status_code"] = status_code
        if suggestion:
            output["suggestion"] = suggestion
        print(json.dumps(output))
        return

    error_console.print(f"[red bold]Error:[/red bold] {escape(message)}", soft_wrap=True)
    if suggestion:
        error_console.print(
            f"\n[cyan]Suggestion:[/cyan] {escape(suggestion)}", soft_wrap=True
        )


def print_message(*parts: str) -> None:
    """Print a plain result line such as an API status message."""
    print(" ".join(part for part in parts if part))


def dump_record(record: BaseModel, output_format: OutputFormat) -> str:
    """Serialize a record as JSON or TOML text."""
    if output_format is OutputFormat.JSON:
        return json.dumps(record.model_dump(mode="json"), indent=JSON_INDENT)
    return tomli_w.dumps(record.model_dump(mode="json", exclude_none=True))


def output_result(
    state: CLIState, record: BaseModel, text_view: Callable[[], None]
) -> None:
    """Print a decoded record in the selected output format.

    Args:
        state: CLI state with the output format.
        record: Record to print.
        text_view: Prints the command's text view of the record.
    """
    if state.output_format is OutputFormat.JSON:
        print(dump_record(record, OutputFormat.JSON))
    elif state.output_format is OutputFormat.TOML:
        print(dump_record(record, OutputFormat.TOML), end="")
    else:
        text_view()


def _cell(value: Any) -> str:
    if value is None:
        return ""
    text = format_scalar(value)
    return escape(text if text is not None else str(value))


def build_table(
    columns: Sequence[tuple[str, bool]],
    rows: Iterable[Sequence[Any]],
    no_header: bool = False,
) -> Table:
    """Build a borderless table.

    Args:
        columns: ``(header, align_right)`` per column
        rows: Row values; text values print their wire text
        no_header: Leave out the header row
    """
    table = Table(box=None, show_header=not no_header, pad_edge=False, padding=(0, 3, 0, 0))
    for header, align_right in columns:
        table.add_column(header, justify="right" if align_right else "left", no_wrap=True)
    for row in rows:
        table.add_row(*(_cell(value) for value in row))
    return table


def print_table(
    columns: Sequence[tuple[str, bool]],
    rows: Iterable[Sequence[Any]],
    no_header: bool = False,
) -> None:
    table = build_table(columns, rows, no_header)
    # Rows are never squeezed or cropped to fit the terminal
    width = max(console.width, console.measure(table).maximum)
    console.print(table, width=width, crop=False)
