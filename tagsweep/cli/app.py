from __future__ import annotations

import typer

from tagsweep import __version__
from tagsweep.cli._helpers import exit_on_error
from tagsweep.cli.context import build_context
from tagsweep.core.config import DEFAULT_PER_PAGE, MAX_PER_PAGE
from tagsweep.output.console import Style
from tagsweep.services.cleanup import CleanupService

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def cleanup(
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Report what would be deleted without deleting."
    ),
    per_page: int = typer.Option(
        DEFAULT_PER_PAGE,
        "--per-page",
        min=1,
        max=MAX_PER_PAGE,
        help="Page size for the tags and releases listings (one page only).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Delete expired temp_/tmp_ tags and their releases.

    Reads REPO_OWNER, REPO_NAME (or GITHUB_REPOSITORY) and GITHUB_TOKEN
    from the environment.
    """
    del version
    ctx = build_context(per_page=per_page, dry_run=dry_run)

    service = CleanupService(config=ctx.config, api=ctx.api, console=ctx.console)
    report = exit_on_error(service.run(), ctx.console)

    ctx.console.newline()
    kept = len(report.skipped_tags)
    if not report.deleted_anything:
        ctx.console.print(f"nothing to delete, kept {kept} tag(s)", Style.DIM)
        return

    verb = "would delete" if report.dry_run else "deleted"
    ctx.console.print(
        f"{verb} {len(report.deleted_releases)} release(s) and {len(report.deleted_tags)} tag(s),"
        f" kept {kept} tag(s)",
        Style.DIM,
    )


def main() -> None:
    app()
