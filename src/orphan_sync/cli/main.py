#!/usr/bin/env python3
"""Command line interface for bootstrapping orphan files."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from orphan_sync.config import SyncConfig
from orphan_sync.errors import ConfigurationError
from orphan_sync.log import configure_logging
from orphan_sync.sync.models import Outcome
from orphan_sync.sync.synchronizer import OrphanSynchronizer

app = typer.Typer(help="Bootstrap build-generated orphan files for the development server", add_completion=False)
console = Console()

PLANNED_ACTIONS = {
    Outcome.COPIED: "[green]copy[/green]",
    Outcome.SKIPPED_EXISTS: "[dim]already bootstrapped[/dim]",
    Outcome.SKIPPED_MISSING_SOURCE: "[yellow]orphan missing[/yellow]",
}

RootOption = typer.Option(None, "--root", help="Project root (default: $ORPHANS_PROJECT_ROOT or cwd)")
OrphansDirOption = typer.Option(
    None, "--orphans-dir", help="Directory holding orphan files, relative to the current directory (default: <root>/_orphans)"
)
ManifestOption = typer.Option(
    None, "--manifest", help="JSON manifest of mappings, relative to the current directory (default: built-in mappings)"
)


def _load_config(root, orphans_dir, manifest):
    # Paths typed on the command line are relative to where the command runs.
    orphans_dir = orphans_dir.resolve() if orphans_dir else None
    manifest = manifest.resolve() if manifest else None
    config = SyncConfig.from_env(project_root=root, orphans_dir=orphans_dir, manifest=manifest)
    return config, config.mappings()


@app.command("run")
def run(
    root: Optional[Path] = RootOption,
    orphans_dir: Optional[Path] = OrphansDirOption,
    manifest: Optional[Path] = ManifestOption,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (default: $ORPHANS_LOG_LEVEL or INFO)"),
    as_json: bool = typer.Option(False, "--json", help="Print the run result as JSON"),
):
    """Copy missing orphan files into place. Existing files are never overwritten."""
    try:
        configure_logging(log_level)
        _, mappings = _load_config(root, orphans_dir, manifest)
        result = OrphanSynchronizer().synchronize(mappings)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(2)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    elif result.failed:
        console.print(f"[yellow]⚠️  {result.summary}[/yellow]")
    else:
        console.print(f"[green]✅ {result.summary}[/green]")

    if result.failed:
        raise typer.Exit(1)


@app.command("status")
def status(
    root: Optional[Path] = RootOption,
    orphans_dir: Optional[Path] = OrphansDirOption,
    manifest: Optional[Path] = ManifestOption,
):
    """Show what a run would do, without writing anything."""
    try:
        config, mappings = _load_config(root, orphans_dir, manifest)
        planned = OrphanSynchronizer().plan(mappings)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(2)

    table = Table(title=f"Orphan files for {config.project_root}")
    table.add_column("Description")
    table.add_column("Source")
    table.add_column("Destination")
    table.add_column("Action")
    for item in planned:
        table.add_row(
            item.entry.label,
            str(item.entry.source_path),
            str(item.entry.destination_path),
            PLANNED_ACTIONS[item.outcome],
        )
    console.print(table)

    pending = sum(1 for item in planned if item.outcome is Outcome.COPIED)
    console.print(f"{pending} file(s) would be bootstrapped")


def main():
    """Main entry point for the orphan-sync CLI."""
    app()


if __name__ == "__main__":
    main()
