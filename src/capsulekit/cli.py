"""
CapsuleKit command line interface.

Commands:
- compile: Compile a composition JSON file for one or more platforms
- platforms: List the supported target platforms
- capsules: Browse the capsule catalog
"""

from __future__ import annotations

import asyncio
import logging
import platform as _platform
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ._version import __version__
from .capsules import get_registry
from .compilers import PLATFORM_INFO, create_compiler, summarize, write_result
from .core.composition_loader import load_composition
from .core.errors import CompositionError, OutputError, SettingsError
from .core.ir import CapsuleCategory, TargetPlatform
from .core.settings import CompilerSettings, find_settings, load_settings

app = typer.Typer(
    help="CapsuleKit - compile capsule compositions into native projects",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"CapsuleKit {__version__}")
        typer.echo(f"Python {_platform.python_version()} ({_platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """CapsuleKit CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def _resolve_settings(config: Path | None, composition_path: Path) -> tuple[CompilerSettings, Path]:
    """Load settings and return them with the directory relative outputs resolve against."""
    if config is None:
        config = find_settings(composition_path.parent)
    if config is None:
        return CompilerSettings(), Path.cwd()
    return load_settings(config), config.parent


@app.command(name="compile")
def compile_command(
    composition_path: Path = typer.Argument(  # noqa: B008
        ...,
        metavar="COMPOSITION",
        help="Composition JSON file",
    ),
    platforms: list[TargetPlatform] | None = typer.Option(  # noqa: B008
        None,
        "--platform",
        "-p",
        help="Target platform (repeatable; default: the composition's targets)",
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Output directory (overrides capsulekit.toml)",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Settings file (default: nearest capsulekit.toml)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Compile and report without writing files",
    ),
) -> None:
    """
    Compile a composition into native projects.

    Each platform's project is written to <output>/<platform>/.

    Examples:
        capsulekit compile app.json                   # All composition targets
        capsulekit compile app.json -p web -p ios     # Selected platforms
        capsulekit compile app.json --dry-run         # Report only
    """
    try:
        composition = load_composition(composition_path)
        settings, project_root = _resolve_settings(config, composition_path)
    except (CompositionError, SettingsError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    requested = platforms or settings.compiler.platforms or None
    output_dir = output if output is not None else settings.get_output_path(project_root)

    orchestrator = create_compiler(settings=settings)
    results = asyncio.run(orchestrator.compile_all(composition, requested))
    summary = summarize(results)

    table = Table(title=f"{composition.name} v{composition.version}")
    table.add_column("Platform")
    table.add_column("Status")
    table.add_column("Files", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Warnings", justify="right")
    table.add_column("Errors", justify="right")
    for target, result in results.items():
        table.add_row(
            PLATFORM_INFO[target].name,
            "[green]ok[/green]" if result.success else "[red]failed[/red]",
            str(result.stats.file_count),
            _format_size(result.stats.total_size),
            str(len(result.warnings)),
            str(len(result.errors)),
        )
    console.print(table)

    for target, result in results.items():
        for error in result.errors:
            console.print(f"[red]{target} {error.code}:[/red] {error.message}")
        for warning in result.warnings:
            line = f"[yellow]{target} {warning.code}:[/yellow] {warning.message}"
            if warning.suggestion:
                line += f" [dim]({warning.suggestion})[/dim]"
            console.print(line)

    if dry_run:
        console.print("[dim]Dry run, no files written.[/dim]")
    else:
        try:
            for target, result in results.items():
                if result.success:
                    written = write_result(result, output_dir / str(target))
                    console.print(f"[green]Wrote[/green] {len(written)} files to {output_dir / str(target)}")
        except OutputError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(code=1)

    if not summary.success:
        console.print(
            f"[red]{len(summary.failed_platforms)} of {summary.total_platforms} platforms failed[/red]"
        )
        raise typer.Exit(code=1)


@app.command(name="platforms")
def platforms_command() -> None:
    """List supported target platforms."""
    table = Table(title="Platforms")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Framework")
    table.add_column("Output")
    table.add_column("Description")
    for target, info in PLATFORM_INFO.items():
        table.add_row(str(target), info.name, info.framework, info.output, info.description)
    console.print(table)


@app.command(name="capsules")
def capsules_command(
    category: CapsuleCategory | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Only capsules in this category",
    ),
    tag: str | None = typer.Option(
        None,
        "--tag",
        "-t",
        help="Only capsules carrying this tag",
    ),
) -> None:
    """Browse the capsule catalog."""
    registry = get_registry()
    capsules = registry.get_by_category(category) if category is not None else registry.get_all()
    if tag is not None:
        tagged = {capsule.id for capsule in registry.get_by_tag(tag)}
        capsules = [capsule for capsule in capsules if capsule.id in tagged]

    if not capsules:
        console.print("[dim]No capsules found.[/dim]")
        return

    table = Table(title="Capsules")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Version")
    table.add_column("Platforms")
    table.add_column("Tags")
    for capsule in capsules:
        table.add_row(
            capsule.id,
            capsule.name,
            str(capsule.category),
            capsule.version,
            ", ".join(str(p) for p in capsule.supported_platforms()),
            ", ".join(capsule.tags),
        )
    console.print(table)

    stats = registry.stats()
    console.print(
        f"{stats.total} capsules in {len(stats.categories)} categories, "
        + ", ".join(f"{p}: {count}" for p, count in stats.by_platform.items())
    )


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
