"""
CLI integration for code generation functionality.

Provides the command-line interface for generating builder and
immutable Go types from a schema document or from --field flags.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.syntax import Syntax
from rich import box

from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.errors import GeneratorError, SchemaError, SinkFailure
from .core.generator import GenerationResult
from .core.schema import TypeSpec, field_from_arg, type_spec_from_dict
from .formatter import GoFormatter
from .languages.go import BUILDER, IMMUTABLE, generate_all
from .sink import FileSink
from ..logging_config import get_logger, setup_logging
from ..utils import load_type_spec

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_SINK_FAILURE = 2


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the genbuilder argument parser."""
    parser = argparse.ArgumentParser(
        prog="genbuilder",
        description="Generate a Go builder and immutable value type from a type schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  genbuilder jason.json --output-dir ./builders
  genbuilder --type Jason --field count:int --field label:string --stdout
  genbuilder --url https://example.com/jason.json -o ./models --package models
        """.strip(),
    )

    # Input options
    input_group = parser.add_argument_group("input")
    input_group.add_argument("schema", nargs="?", help="JSON schema document")
    input_group.add_argument("--url", help="URL to fetch the schema document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema document from standard input"
    )
    input_group.add_argument(
        "--type", dest="type_name", metavar="NAME", help="Type name (with --field)"
    )
    input_group.add_argument(
        "--field",
        "-f",
        dest="fields",
        action="append",
        default=[],
        metavar="NAME:TYPE",
        help="Field of the type, repeatable, in declaration order",
    )

    # Output options
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output-dir", "-o", metavar="DIR", help="Directory to write generated files to"
    )
    output_group.add_argument(
        "--package-name",
        "--package",
        metavar="NAME",
        help="Go package name (default: last segment of the output directory)",
    )
    output_group.add_argument(
        "--only",
        choices=[BUILDER, IMMUTABLE],
        help="Generate only one of the two files",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    output_group.add_argument(
        "--no-comments", action="store_true", help="Don't add doc comments"
    )

    # Formatting
    format_group = parser.add_argument_group("formatting")
    format_group.add_argument(
        "--no-format", action="store_true", help="Don't run goimports on written files"
    )
    format_group.add_argument(
        "--formatter", metavar="CMD", help="Formatter command (default: goimports)"
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging and metadata"
    )
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings")

    parser.set_defaults(func=handle_codegen_command)
    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {
        "output_dir": args.output_dir,
        "package_name": args.package_name,
        "formatter_command": args.formatter,
    }
    if args.no_format or args.stdout:
        overrides["run_formatter"] = False
    if args.no_comments:
        overrides["add_comments"] = False

    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        logger.warning("Config: %s", warning)
    return config


def _get_type_spec(args: argparse.Namespace) -> TypeSpec:
    """Resolve the TypeSpec from exactly one input source."""
    sources = [
        bool(args.schema),
        bool(args.url),
        bool(args.stdin),
        bool(args.type_name or args.fields),
    ]
    if sum(sources) != 1:
        raise CLIError(
            "Exactly one input is required: a schema file, --url, --stdin, "
            "or --type with --field"
        )

    if args.schema or args.url:
        source, type_spec = load_type_spec(file_path=args.schema, url=args.url)
        logger.debug("Schema source: %s", source)
        return type_spec

    if args.stdin:
        try:
            return type_spec_from_dict(json.load(sys.stdin))
        except json.JSONDecodeError as e:
            raise SchemaError(f"Invalid JSON on standard input: {e}") from e

    if not args.type_name:
        raise CLIError("--field requires --type")
    return TypeSpec(
        type_name=args.type_name,
        fields=tuple(field_from_arg(value) for value in args.fields),
    )


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for invalid input, 2 for write failures)
    """
    if args.verbose:
        setup_logging(logging.DEBUG)
    elif args.quiet:
        setup_logging(logging.WARNING)
    else:
        setup_logging(logging.INFO)

    try:
        config = _build_config(args)
        type_spec = _get_type_spec(args)
        kinds = [args.only] if args.only else None
        result = generate_all(type_spec, config, kinds)

        if not result.success:
            console.print(f"[red]✗ {result.error_message}[/red]")
            return EXIT_ERROR

        if args.stdout:
            _print_artifacts(result)
        else:
            _write_artifacts(result, config)

        _print_report(result, verbose=args.verbose)
        return EXIT_OK

    except SinkFailure as e:
        console.print(f"[red]✗ Write failed:[/red] {e}")
        return EXIT_SINK_FAILURE
    except (CLIError, ConfigError, GeneratorError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return EXIT_ERROR


def _write_artifacts(result: GenerationResult, config: GeneratorConfig) -> None:
    """Persist artifacts, then run the formatter as a best-effort pass."""
    sink = FileSink(config.output_dir)
    paths = sink.write_all(result.artifacts)
    result.metadata["written"] = [str(p) for p in paths]

    for path in paths:
        console.print(f"[green]✓[/green] Generated [cyan]{path}[/cyan]")

    if config.run_formatter:
        formatter = GoFormatter(config.formatter_command, config.formatter_timeout)
        result.warnings.extend(formatter.format_files(paths))


def _print_artifacts(result: GenerationResult) -> None:
    for artifact in result.artifacts:
        console.print(f"[green]// {artifact.file_name}[/green]")
        console.print(Syntax(artifact.text, "go", theme="monokai"))


def _print_report(result: GenerationResult, verbose: bool = False) -> None:
    """Print warnings and, when verbose, the generation metadata."""
    if verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)
