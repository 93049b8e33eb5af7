"""
Command-line interface for enumer.

Loads an ``*.enum.yaml`` document, generates the enumeration in the
requested language and writes it next to the document (or to ``--output``).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    build_generator_config,
    generate_from_document,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .codegen.core.config import ConfigError, get_config_manager
from .codegen.registry import RegistryError
from .logging_config import configure_logging, get_logger
from .output import OutputError, install_editor_schema, write_output
from .utils import SpecLoaderError, load_spec

logger = get_logger(__name__)


class CLIError(Exception):
    """Invalid command-line usage."""

    pass


# Shared console for all CLI output
console = Console()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="enumer",
        description="Generate enumerations with parse and codec support from *.enum.yaml documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  enumer --config status/task-status.enum.yaml
  enumer --config task-status.enum.yaml --language python --stdout
  enumer --url https://example.com/task-status.enum.yaml --output status/task_status.go
  enumer --vscode .
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "--config", metavar="FILE", help="The input file used for the enum being generated"
    )
    input_group.add_argument("--url", help="URL to fetch the enumeration document from")

    # Core generation options
    parser.add_argument(
        "--language", "-l", default="go", help="Target language for code generation (default: go)"
    )
    parser.add_argument("--output", "-o", metavar="FILE", help="Output file (overrides output-path)")
    parser.add_argument(
        "--stdout", action="store_true", help="Print the generated code instead of writing it"
    )
    parser.add_argument("--package-name", "--package", help="Package name for generated code")
    parser.add_argument(
        "--no-comments", action="store_true", help="Don't add comments to generated code"
    )
    parser.add_argument("--skip-format", action="store_true", help="Skip source formatting")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite existing output files")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages", action="store_true", help="List supported languages and exit"
    )
    info_group.add_argument(
        "--vscode",
        metavar="DIR",
        help="Path to a project to configure the Visual Studio Code JSON schema for",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv``)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)
    logger.debug("Arguments: %s", vars(args))

    try:
        if args.list_languages:
            return _list_languages()

        if args.vscode:
            _install_vscode(args.vscode)
            if not (args.config or args.url):
                return 0

        if not (args.config or args.url):
            console.print("[red]✗[/red] Input source required (--config or --url)")
            return 1

        if not _validate_language(args.language):
            return 1

        return _generate_and_output(args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        console.print(f"[red]✗ Unexpected error:[/red] {escape(str(e))}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] enumer --config [dim]name.enum.yaml[/dim] --language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language (or alias) is supported."""
    if not is_language_supported(language):
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{escape(language)}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _install_vscode(project_dir: str):
    try:
        written = install_editor_schema(project_dir)
    except OutputError as e:
        raise CLIError(str(e)) from e

    console.print(
        f"[green]✓[/green] Installed enumeration schema at [cyan]{escape(str(written['schema']))}[/cyan]"
    )
    if written["settings"].name != "settings.json":
        console.print(
            f"[yellow]⚠️  Add the contents of {escape(str(written['settings']))} "
            "to your settings.json file[/yellow]"
        )


def _build_config(args: argparse.Namespace, document) -> GeneratorConfig:
    """Merge document settings with command-line overrides."""
    overrides = {
        "package_name": args.package_name,
        "skip_format": True if args.skip_format else None,
        "overwrite": True if args.overwrite else None,
        "debug": True if args.debug else None,
        "add_comments": False if args.no_comments else None,
    }

    try:
        return build_generator_config(document, args.language, overrides)
    except (ConfigError, RegistryError) as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(args: argparse.Namespace) -> int:
    """Load, generate and write (or print) the enumeration."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        load_task = progress.add_task("[cyan]Loading enumeration document...", total=None)
        try:
            document = load_spec(file_path=args.config, url=args.url)
        except SpecLoaderError as e:
            raise CLIError(str(e)) from e
        progress.remove_task(load_task)

        if args.output:
            document.output_path = str(Path(args.output).absolute())
        if args.package_name:
            document.package = args.package_name

        config = _build_config(args, document)
        if config.debug and not args.debug:
            configure_logging(debug=True)
        config_warnings = get_config_manager().validate_config(config)

        gen_task = progress.add_task(f"[green]Generating {args.language} code...", total=None)
        result = generate_from_document(document, args.language, config)
        progress.remove_task(gen_task)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {escape(result.error_message)}")
        return 1

    if args.stdout:
        _print_code(result, args.language)
    else:
        output_path = result.metadata.get("output_path")
        if not output_path:
            raise CLIError("No output path: set output-path, --output or use --stdout")

        overwrite = config.overwrite or result.definition.overwrite
        try:
            written = write_output(output_path, result.code, overwrite=overwrite)
        except OutputError as e:
            raise CLIError(str(e)) from e

        if written:
            console.print(
                f"[green]✓[/green] Generated {args.language} code saved to [cyan]{escape(output_path)}[/cyan]"
            )
        else:
            console.print(
                f"[yellow]⚠️  {escape(output_path)} exists; use --overwrite to replace it[/yellow]"
            )

    if args.verbose and result.metadata:
        _print_metadata(result)

    warnings = config_warnings + result.warnings
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        console.print()

    return 0


def _print_code(result: GenerationResult, language: str):
    if not console.is_terminal:
        # Plain output so the code can be piped.
        sys.stdout.write(result.code)
        return

    console.print(Syntax(result.code, result.metadata.get("language", language), theme="monokai"))


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), escape(str(value)))

    console.print()
    console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())
