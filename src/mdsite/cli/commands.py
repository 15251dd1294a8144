"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdsite.config import load_config
from mdsite.core.builder import build_site
from mdsite.core.errors import BuildFailed, SiteError
from mdsite.core.highlight import available_themes
from mdsite.core.models import BuildReport
from mdsite.util.log import configure_logging


def _echo_failure(config: Path, error: SiteError) -> None:
    """Print every error of a failed site to stderr."""
    typer.echo(f"Error: {config}: {error}", err=True)
    if isinstance(error, BuildFailed):
        for e in error.errors:
            typer.echo(f"  {e}", err=True)


def _echo_report(config: Path, report: BuildReport) -> None:
    for r in report.pages:
        typer.echo(f"  {r.source} -> {r.output}")
    for directory in report.missing_indices:
        typer.echo(f"  NEEDS INDEX {directory}")
    typer.echo(f"Built {len(report.pages)} page(s) for {config}")


def build_cmd(
    configs: Annotated[list[Path], typer.Argument(help="Site configuration file(s), one site each")],
    mode: Annotated[Optional[str], typer.Option("--mode", help="walk (from base_file) or scan (every file)")] = None,
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Repeat for more log output")] = 0,
    ):
    """Build every site; a failing site does not stop the others."""
    configure_logging(verbose)
    failed = 0
    for config in configs:
        try:
            settings = load_config(config, overrides={"mode": mode})
            report = build_site(settings, config)
        except SiteError as e:
            _echo_failure(config, e)
            failed += 1
            continue
        _echo_report(config, report)

    if failed:
        typer.echo(f"{failed} of {len(configs)} site(s) failed", err=True)
        raise typer.Exit(1)


def themes_cmd():
    """List available syntax highlighting themes."""
    for name in available_themes():
        typer.echo(name)
