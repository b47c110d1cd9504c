"""
Command-line interface for javagen.

Reads a JSON model document and prints or writes the generated Java source.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    ModelError,
    generate_unit,
    load_class_models,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .utils import ModelSourceError, read_model_document

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="javagen",
        description="Generate Java source code from a JSON class model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  javagen model.json
  javagen model.json --output-dir src/main/java
  javagen --url https://example.com/model.json -o Dao.java
  javagen --stdin --tabs < model.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="JSON model file")
    input_group.add_argument("--url", help="URL to fetch the JSON model from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the JSON model from standard input"
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
    )
    output_group.add_argument(
        "--output-dir",
        metavar="DIR",
        help="Write each class to DIR/<package path>/<Name>.java",
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")

    style_group = parser.add_argument_group("formatting")
    indent = style_group.add_mutually_exclusive_group()
    indent.add_argument("--tabs", action="store_true", help="Indent with tabs")
    indent.add_argument(
        "--indent", type=int, metavar="N", help="Indent with N spaces (default: 4)"
    )
    style_group.add_argument(
        "--no-comments", action="store_true", help="Don't generate Javadoc comments"
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Show generation metadata and warnings"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the configuration file with command-line overrides."""
    overrides: dict[str, Any] = {}
    if args.tabs:
        overrides["use_tabs"] = True
    if args.indent is not None:
        overrides["indent_size"] = args.indent
        overrides["use_tabs"] = False
    if args.no_comments:
        overrides["add_comments"] = False
    if args.output:
        overrides["output_file"] = args.output

    return load_config(overrides, args.config)


def _read_document(args: argparse.Namespace) -> tuple[str, Any]:
    if args.stdin:
        return read_model_document(stream=sys.stdin)
    if not (args.file or args.url):
        raise CLIError("Input source required (file, --url, or --stdin)")
    return read_model_document(file_path=args.file, url=args.url)


def _show_result(result: GenerationResult) -> None:
    """Print metadata and warnings for one generated unit."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="bold cyan")
    table.add_column("Value")
    for key, value in result.metadata.items():
        table.add_row(key, str(value))
    console.print(table)

    if result.warnings:
        console.print(
            Panel(
                "\n".join(f"• {escape(warning)}" for warning in result.warnings),
                title="⚠️  Warnings",
                border_style="yellow",
            )
        )


def _unit_path(output_dir: Path, result: GenerationResult) -> Path:
    package, _, _ = result.metadata["class_name"].rpartition(".")
    directory = output_dir.joinpath(*package.split(".")) if package else output_dir
    return directory / result.metadata["file_name"]


def _write_output(results: list[GenerationResult], args: argparse.Namespace,
                  config: GeneratorConfig) -> None:
    if args.output_dir:
        output_dir = Path(args.output_dir)
        for result in results:
            path = _unit_path(output_dir, result)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.code, encoding="utf-8", newline="")
            console.print(f"[green]✓[/green] Wrote {path}")
            logger.info("Wrote %s", path)
        return

    if config.output_file:
        path = Path(config.output_file)
        path.write_text("\n".join(result.code for result in results), encoding="utf-8",
                        newline="")
        console.print(f"[green]✓[/green] Wrote {path}")
        logger.info("Wrote %s", path)
        return

    for result in results:
        if console.is_terminal:
            console.print(Syntax(result.code, "java", theme="monokai", line_numbers=False))
        else:
            sys.stdout.write(result.code)


def run(args: argparse.Namespace) -> int:
    """
    Execute a parsed command line.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = _build_config(args)
        source, document = _read_document(args)
        logger.info("Loaded model from %s", source)

        results = [generate_unit(model, config) for model in load_class_models(document)]

        failed = [result for result in results if not result.success]
        if failed:
            for result in failed:
                console.print(f"[red]✗ Error:[/red] {escape(result.error_message)}")
            return 1

        if args.verbose:
            for result in results:
                _show_result(result)

        _write_output(results, args, config)
        return 0

    except (CLIError, ConfigError, ModelError, ModelSourceError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.error("%s", e)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
