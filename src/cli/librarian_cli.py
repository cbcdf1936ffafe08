# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line front end for snippet analysis and the record wizard."""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any, TextIO

import Levenshtein
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Confirm, Prompt
from rich.table import Table

from librarian.analyzers import JsxAnalyzer
from librarian.analyzers.jsx import DEFAULT_FRAMEWORK_PACKAGE
from librarian.config import (
    DEFAULT_PROCESSING_DELAY_SECONDS,
    LibrarianConfig,
)
from librarian.export import (
    DEFAULT_PREVIEW_LENGTH,
    format_payload,
    format_preview,
    serialize_payload,
)
from librarian.model import (
    CATEGORIES,
    ComponentRecord,
    FinalizedRecord,
    finalize_record,
)
from librarian.wizard import WizardController

logger = logging.getLogger(__name__)

TABLE_COLUMN_RATIOS: dict[str, int] = {
    "field": 1,
    "value": 4,
}


class InputError(RuntimeError):
    """Represent an unreadable snippet source."""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--path",
        required=True,
        help="Snippet file to read, or '-' for standard input.",
    )
    common.add_argument(
        "--output",
        required=False,
        help="Optional output file path for the JSON payload.",
    )
    common.add_argument(
        "--framework-package",
        default=DEFAULT_FRAMEWORK_PACKAGE,
        help="UI framework package excluded from dependencies.",
    )
    common.add_argument(
        "--processing-delay",
        type=float,
        default=DEFAULT_PROCESSING_DELAY_SECONDS,
        help="Simulated analysis latency in seconds; 0 disables it.",
    )
    common.add_argument(
        "--preview-length",
        type=int,
        default=DEFAULT_PREVIEW_LENGTH,
        help="Snippet characters shown in the payload preview.",
    )
    common.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )

    parser = argparse.ArgumentParser(prog="component-librarian")
    subparsers = parser.add_subparsers(dest="command", required=True)
    analyze_parser = subparsers.add_parser("analyze", parents=[common])
    analyze_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )

    wizard_parser = subparsers.add_parser("wizard", parents=[common])
    wizard_parser.add_argument(
        "--yes",
        action="store_true",
        help="Accept the extracted record without prompting.",
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO | None = None,
) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Standard input stream for snippets and prompts.

    Returns:
        Exit code.
    """
    stdin = stdin if stdin is not None else sys.stdin
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = LibrarianConfig(
            framework_package=args.framework_package,
            processing_delay_seconds=args.processing_delay,
            preview_length=args.preview_length,
        )
    except ValueError as exc:
        logger.warning(f"Invalid configuration (error={exc})")
        stderr.write(f"Invalid configuration: {exc}\n")
        return 2

    try:
        snippet = _read_snippet(args.path, stdin=stdin)
    except InputError as exc:
        stderr.write(f"{exc}\n")
        return 2

    if args.command == "analyze":
        return _run_analyze(
            args=args, config=config, snippet=snippet, stdout=stdout, stderr=stderr
        )
    if args.command == "wizard":
        return _run_wizard(
            args=args,
            config=config,
            snippet=snippet,
            stdout=stdout,
            stderr=stderr,
            stdin=stdin,
        )

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_analyze(
    args: argparse.Namespace,
    config: LibrarianConfig,
    snippet: str,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Run analyze command.

    Args:
        args: Parsed CLI arguments.
        config: Resolved settings.
        snippet: Snippet text.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    if not snippet.strip():
        logger.warning(f"Snippet is empty (path={args.path})")
        stderr.write("Snippet is empty\n")
        return 1

    record = JsxAnalyzer(framework_package=config.framework_package).analyze(snippet)
    logger.info(f"Analysis completed (path={args.path} name={record.name})")
    payload = format_payload(finalize_record(record), snippet)
    if args.output:
        if not _write_payload_file(payload, output_path=Path(args.output), stderr=stderr):
            return 2
        return 0
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if args.format == "json":
        _print_json(payload, console=console)
    else:
        _write_record_table(record, console=console)
    return 0


def _run_wizard(
    args: argparse.Namespace,
    config: LibrarianConfig,
    snippet: str,
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO,
) -> int:
    """Run wizard command.

    Args:
        args: Parsed CLI arguments.
        config: Resolved settings.
        snippet: Snippet text.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Prompt input stream.

    Returns:
        Exit code.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")

    def show_processing(_snippet: str) -> None:
        with console.status("Analyzing snippet..."):
            if config.processing_delay_seconds > 0:
                time.sleep(config.processing_delay_seconds)

    controller = WizardController(
        analyzer=JsxAnalyzer(framework_package=config.framework_package),
        processing_hook=show_processing,
    )
    if not controller.submit(snippet):
        logger.warning(f"Snippet is empty (path={args.path})")
        stderr.write("Snippet is empty\n")
        return 1

    console.rule("Review extracted record", characters="-")
    _write_record_table(controller.get_state().record, console=console)
    if not args.yes:
        _prompt_edits(controller, console=console, stdin=stdin)
        confirmed = Confirm.ask(
            "Create record?", default=True, console=console, stream=stdin
        )
        if not confirmed:
            controller.back()
            logger.info("Record not confirmed; returned to input")
            stderr.write("Record not confirmed\n")
            return 1

    controller.confirm()
    state = controller.get_state()
    if not isinstance(state.record, FinalizedRecord):
        stderr.write("Record was not finalized\n")
        return 2

    console.rule("Record payload", characters="-")
    _print_json(
        format_preview(state.record, state.snippet, limit=config.preview_length),
        console=console,
    )
    if args.output:
        payload = controller.export_payload()
        if not _write_payload_file(payload, output_path=Path(args.output), stderr=stderr):
            return 2
        console.print(f"Payload written to {args.output}", markup=False, highlight=False)
    return 0


def _prompt_edits(controller: WizardController, console: Console, stdin: TextIO) -> None:
    """Prompt for each record field; an empty answer keeps the value.

    Args:
        controller: Wizard in review stage.
        console: Output console.
        stdin: Prompt input stream.
    """
    record = controller.get_state().record
    if not isinstance(record, ComponentRecord):
        return
    controller.edit_field(
        "name", _ask("Name", current=record.name, console=console, stdin=stdin)
    )

    while True:
        answer = _ask(
            f"Category ({', '.join(CATEGORIES)})",
            current=record.category.value,
            console=console,
            stdin=stdin,
        )
        category = match_category(answer)
        if category is not None and controller.edit_field("category", category):
            break
        console.print(
            f"Unknown category {answer!r}; did you mean {suggest_category(answer)}?",
            markup=False,
            highlight=False,
        )

    controller.edit_field(
        "dependencies",
        _ask(
            "Dependencies (comma-separated)",
            current=record.dependencies,
            console=console,
            stdin=stdin,
        ),
    )
    controller.edit_field(
        "description",
        _ask("Description", current=record.description, console=console, stdin=stdin),
    )


def _ask(label: str, current: str, console: Console, stdin: TextIO) -> str:
    answer = Prompt.ask(label, default=current, console=console, stream=stdin)
    if not answer.strip():
        return current
    return answer.strip()


def match_category(value: str) -> str | None:
    """Match a typed category name ignoring case.

    Args:
        value: User input.

    Returns:
        Canonical category name, or ``None`` when nothing matches.
    """
    lowered = value.strip().lower()
    for category in CATEGORIES:
        if category.lower() == lowered:
            return category
    return None


def suggest_category(value: str) -> str:
    """Return the category closest to a mistyped value by edit distance."""
    lowered = value.strip().lower()
    return min(
        CATEGORIES,
        key=lambda category: Levenshtein.distance(lowered, category.lower()),
    )


def _read_snippet(path: str, stdin: TextIO) -> str:
    """Read snippet text from a file or standard input.

    Args:
        path: File path, or ``-`` for standard input.
        stdin: Standard input stream.

    Returns:
        Snippet text.

    Raises:
        InputError: If the file cannot be read.
    """
    if path == "-":
        return stdin.read()
    snippet_path = Path(path)
    if not snippet_path.is_file():
        logger.warning(f"Snippet file does not exist (path={snippet_path})")
        raise InputError(f"Snippet file does not exist: {snippet_path}")
    try:
        return snippet_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read snippet file (path={snippet_path} error={exc})")
        raise InputError(f"Failed to read snippet file: {snippet_path}") from exc


def _write_record_table(
    record: ComponentRecord | FinalizedRecord, console: Console
) -> None:
    """Write record fields as a two-column table.

    Args:
        record: Draft or finalized record.
        console: Output console.
    """
    if isinstance(record, ComponentRecord):
        dependencies = record.dependency_list()
    else:
        dependencies = list(record.dependencies)
    table = Table(show_header=True, show_lines=True, expand=True)
    table.add_column("field", ratio=TABLE_COLUMN_RATIOS["field"], overflow="fold")
    table.add_column("value", ratio=TABLE_COLUMN_RATIOS["value"], overflow="fold")
    table.add_row("name", record.name)
    table.add_row("category", record.category.value)
    table.add_row("dependencies", ", ".join(dependencies) or "-")
    table.add_row("description", record.description)
    console.print(table)


def _print_json(payload: dict[str, Any], console: Console) -> None:
    console.print(
        serialize_payload(payload),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def _write_payload_file(
    payload: dict[str, Any], output_path: Path, stderr: TextIO
) -> bool:
    """Write the JSON payload to a file.

    Args:
        payload: Export payload.
        output_path: Target file path.
        stderr: Standard error stream.

    Returns:
        True when the file was written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(serialize_payload(payload), encoding="utf-8")
    except OSError as exc:
        logger.warning(
            f"Failed to write JSON output file (output_path={output_path} error={exc})"
        )
        stderr.write(f"Failed to write JSON output file: {output_path}\n")
        return False
    return True


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr, stdin=sys.stdin)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
