"""CLI entrypoints for frontpress content tooling."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from .config import Config, load_config
from .content import ContentError, ContentItem
from .ingest import IngestResult, load_items
from .listing import publishable
from .scaffold import ScaffoldError, ScaffoldResult, normalize_slug, scaffold_post
from .validation import DocumentIssue, IssueSeverity, lint_workspace

console = Console()
app = typer.Typer(help="frontpress content ingestion toolkit.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file or project directory."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Parse, validate, and list front-matter content."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@app.command()
def new(
    slug: Annotated[
        str,
        typer.Argument(..., help="Slug identifier used for the file name."),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Override the default title derived from the slug."),
    ] = None,
    config_path: ConfigPathOption = ".",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite the file if it already exists."),
    ] = False,
) -> None:
    """Create a new draft post with TOML front matter."""
    config: Config = _load(config_path)

    try:
        normalized_slug = normalize_slug(slug)
        result = scaffold_post(config, normalized_slug, title, force=force)
    except ScaffoldError as exc:
        console.print(f"[bold red]Cannot scaffold[/]: {exc}")
        raise typer.Exit(code=1) from exc

    if normalized_slug != slug:
        console.print(f"[bold yellow]Note[/]: slug normalized to '{normalized_slug}'.")

    _print_scaffold_summary(normalized_slug, result)


@app.command()
def lint(
    config_path: ConfigPathOption = ".",
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat warnings as errors."),
    ] = False,
) -> None:
    """Check every content file for parse errors and publishing problems."""
    config: Config = _load(config_path)
    report = lint_workspace(config)

    if not report.issues:
        console.print("[bold green]Lint clean[/]: no issues detected.")
        raise typer.Exit()

    for issue in sorted(report.issues, key=_lint_sort_key):
        style = "red" if issue.severity is IssueSeverity.ERROR else "yellow"
        location = _display_path(Path(issue.source_path))
        if issue.pointer:
            location = f"{location} :: {issue.pointer}"
        console.print(f"[bold {style}]{issue.severity.name}[/] {location} - {issue.message}")

    console.print(
        f"[bold blue]Summary[/]: {report.error_count} error(s), {report.warning_count} warning(s) "
        f"across {report.document_count} document(s)."
    )

    exit_code = 0
    if report.error_count > 0 or (strict and report.warning_count > 0):
        exit_code = 1
    raise typer.Exit(code=exit_code)


@app.command("list")
def list_items(
    config_path: ConfigPathOption = ".",
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Include drafts and future-dated items."),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the listing as a JSON array."),
    ] = False,
) -> None:
    """Show publishable items, newest first."""
    config: Config = _load(config_path)
    ingest = _load_workspace_items(config)

    if drafts:
        items = sorted(ingest.items, key=lambda item: item.date, reverse=True)
    else:
        as_of = None if config.build_future else datetime.now(timezone.utc)
        items = list(publishable(ingest.items, as_of=as_of))

    if as_json:
        typer.echo(json.dumps([_item_payload(item) for item in items], indent=2))
    else:
        _print_listing(items)

    for failure in ingest.failures:
        console.print(
            f"[bold yellow]Skipped[/] {_display_path(failure.path)} - "
            f"{failure.kind}: {failure.error.args[0]}",
        )


def _load_workspace_items(config: Config) -> IngestResult:
    try:
        return load_items(config)
    except ContentError as exc:
        console.print(f"[bold red]Load failed[/] ({exc.kind}): {exc}")
        raise typer.Exit(code=1) from exc


def _print_listing(items: list[ContentItem]) -> None:
    if not items:
        console.print("[bold yellow]No items[/]: nothing to publish.")
        return

    table = Table(title="Content")
    table.add_column("Date", no_wrap=True)
    table.add_column("Title")
    table.add_column("Slug")
    table.add_column("Draft")
    for item in items:
        table.add_row(
            item.date.isoformat(),
            item.title,
            item.slug,
            "yes" if item.draft else "no",
        )
    console.print(table)
    console.print(f"[bold green]Listed[/]: {len(items)} item(s).")


def _item_payload(item: ContentItem) -> dict[str, Any]:
    return {
        "title": item.title,
        "date": item.date.isoformat(),
        "draft": item.draft,
        "summary": item.summary,
        "slug": item.slug,
        "tags": list(item.meta.tags),
        "source_path": item.source_path,
    }


def _print_scaffold_summary(slug: str, result: ScaffoldResult) -> None:
    console.print(f"[bold green]Scaffold ready[/]: post '{slug}'")

    for path in result.created:
        console.print(f"- {_display_path(path)} (new)")
    for path in result.updated:
        console.print(f"- {_display_path(path)} (updated)")

    if result.notes:
        console.print("[bold blue]Next steps[/]:")
        for note in result.notes:
            console.print(f"- {note}")


def _lint_sort_key(issue: DocumentIssue) -> tuple[int, str, str]:
    severity_order = 0 if issue.severity is IssueSeverity.ERROR else 1
    pointer = issue.pointer or ""
    return (severity_order, issue.source_path, pointer)


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
