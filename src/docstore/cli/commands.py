"""CLI command implementations"""

import json
import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_into, read_documents
from docstore.store.memory_repo import MemoryRepo
from docstore.store.models import Document, SearchRequest


FileOption = Annotated[Optional[str], typer.Option("--file", "-f", help="Documents file (YAML or JSON)")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _open_repo(settings: Settings) -> tuple[MemoryRepo, dict]:
    """Build a fresh repo from settings and fill it from the configured documents file."""
    repo = MemoryRepo.from_settings(settings)
    try:
        counts = load_into(repo, read_documents(settings.documents_file))
    except FileNotFoundError:
        _fail(f"documents file not found: {settings.documents_file}")
    except ValueError as e:
        _fail(str(e))
    return repo, counts


def _parse_time(value: Optional[str], option: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        _fail(f"{option} expects an ISO 8601 timestamp, got '{value}'")


def _echo_docs(docs: list[Document], output_format: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False))
        return
    for doc in docs:
        typer.echo(f"  {doc.id}  {doc.created.isoformat()}  {doc.title}")


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Query an in-memory document store filled from a YAML or JSON file."""
    level = "DEBUG" if verbose else _settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def load_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Documents file (YAML or JSON)")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text or json")] = None,
    ):
    """Load a documents file, report inserts and merges, and list the stored documents."""
    settings = _settings(overrides={"documents_file": path, "output_format": fmt})
    repo, counts = _open_repo(settings)
    typer.echo(f"Loaded {settings.documents_file} - {counts['created']} created, {counts['merged']} merged")
    _echo_docs(list(repo), settings.output_format)


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    path: FileOption = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text or json")] = None,
    ):
    """Show the document with the given id."""
    settings = _settings(overrides={"documents_file": path, "output_format": fmt})
    repo, _ = _open_repo(settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"document '{doc_id}' not found")
    if settings.output_format == "json":
        typer.echo(doc.model_dump_json(indent=2))
        return
    typer.echo(f"id:      {doc.id}")
    typer.echo(f"title:   {doc.title}")
    typer.echo(f"author:  {doc.author.id}" + (f" ({doc.author.name})" if doc.author.name else ""))
    typer.echo(f"created: {doc.created.isoformat()}")
    typer.echo("")
    typer.echo(doc.content)


def search_cmd(
    path: FileOption = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contents: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Created strictly after (ISO 8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Created strictly before (ISO 8601)")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text or json")] = None,
    ):
    """Search stored documents; criteria combine with AND, repeated values with OR."""
    settings = _settings(overrides={"documents_file": path, "output_format": fmt})
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contents or None,
        author_ids=author_ids or None,
        created_from=_parse_time(created_from, "--from"),
        created_to=_parse_time(created_to, "--to"),
    )
    repo, _ = _open_repo(settings)
    results = repo.search(request)
    if not results and settings.output_format == "text":
        typer.echo("No documents matched.")
        return
    _echo_docs(results, settings.output_format)
