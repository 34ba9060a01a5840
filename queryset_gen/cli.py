"""
Command line interface for queryset-gen.

    queryset-gen generate models.json -o queryset_gen.go
    queryset-gen methods models.json
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich import box

from . import __version__
from .codegen import (
    ConfigError,
    GeneratorError,
    ModelDescription,
    SchemaError,
    create_go_generator,
    generate_code,
    load_config_file,
)
from .logging_config import configure_logging, get_logger
from .utils import ModelLoaderError, load_model_description

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def _add_input_args(parser: argparse.ArgumentParser):
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="JSON model description")
    input_group.add_argument("--url", help="URL to fetch the model description from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the model description from stdin"
    )


def _add_config_args(parser: argparse.ArgumentParser):
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--package-name", "--package", metavar="NAME", help="Go package name"
    )
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit doc comments on generated methods",
    )
    parser.add_argument(
        "--no-fail-fast",
        action="store_true",
        help="Skip methods that can't be built instead of aborting",
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="queryset-gen",
        description="Generate typed GORM query-set methods from model structs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  queryset-gen generate models.json -o models/queryset.go
  queryset-gen generate --stdin --package store < models.json
  queryset-gen methods models.json
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings only")

    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate the query-set Go file"
    )
    _add_input_args(generate_parser)
    _add_config_args(generate_parser)
    generate_parser.add_argument(
        "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
    )
    generate_parser.add_argument(
        "--show-metadata", action="store_true", help="Print generation metadata"
    )
    generate_parser.set_defaults(func=_handle_generate)

    methods_parser = subparsers.add_parser(
        "methods", help="List the methods that would be generated"
    )
    _add_input_args(methods_parser)
    _add_config_args(methods_parser)
    methods_parser.set_defaults(func=_handle_methods)

    return parser


def main(argv: Optional[list] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _load_description(args: argparse.Namespace) -> ModelDescription:
    """Load and validate the model description from the selected source."""
    try:
        if args.file:
            return load_model_description(file_path=args.file)
        if args.url:
            return load_model_description(url=args.url)
        return load_model_description(stream=sys.stdin)
    except ModelLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e
    except SchemaError as e:
        raise CLIError(f"Invalid model description: {e}") from e


def _build_config(args: argparse.Namespace, description: ModelDescription) -> Dict[str, Any]:
    """
    Overrides for the generator config, lowest precedence first: the
    model's package, the config file, then CLI flags.

    Raises:
        ConfigError: the config file can't be read
    """
    config_dict: Dict[str, Any] = {}

    if description.package_name:
        config_dict["package_name"] = description.package_name

    if args.config:
        config_dict.update(load_config_file(args.config))
    if args.package_name:
        config_dict["package_name"] = args.package_name
    if args.no_comments:
        config_dict["add_comments"] = False
    if args.no_fail_fast:
        config_dict["fail_fast"] = False
    return config_dict


def _prepare(args: argparse.Namespace):
    description = _load_description(args)
    try:
        generator = create_go_generator(_build_config(args, description))
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e
    return description, generator


def _handle_generate(args: argparse.Namespace) -> int:
    """Generate code and write it to a file or the console."""
    description, generator = _prepare(args)

    result = generate_code(generator, description.schemas)

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        logger.info("Wrote %s", output_path)
        console.print(
            f"[green]✓[/green] Generated query sets saved to "
            f"[cyan]{output_path}[/cyan]"
        )
    else:
        console.print(Syntax(result.code, generator.language_name, theme="monokai"))

    if args.show_metadata and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def _handle_methods(args: argparse.Namespace) -> int:
    """Print a table of planned methods per struct."""
    description, generator = _prepare(args)

    for schema in description.schemas.values():
        try:
            methods, skipped = generator.build_methods(schema)
        except GeneratorError as e:
            raise CLIError(str(e)) from e

        table = Table(
            title=f"🔧 {schema.query_set_name}",
            box=box.ROUNDED,
            title_style="bold cyan",
        )
        table.add_column("Method", style="bold green", no_wrap=True)
        table.add_column("Receiver", style="dim")
        table.add_column("Arguments", style="cyan")
        table.add_column("Returns", style="blue")

        for method in methods:
            table.add_row(
                method.method_name,
                method.receiver_declaration or f"qs {schema.query_set_name}",
                method.args_declaration,
                method.return_values_declaration(schema.query_set_name),
            )

        console.print(table)
        for warning in skipped:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0

