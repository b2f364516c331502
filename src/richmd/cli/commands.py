"""CLI command implementations"""

import csv
import json
from pathlib import Path
from typing import Annotated, Iterator, Optional

import typer

from richmd.config import Settings, load_config
from richmd.core.extract import extract_links, get_linked_assets, get_linked_entries
from richmd.core.nodes import document_node
from richmd.core.pipeline import (
    discover_files, load_document, prepare_document, render_document, run_render,
)
from richmd.core.statistics import get_reading_time, get_word_count
from richmd.core.tables import create_table
from richmd.core.text import to_plain_text
from richmd.exceptions import RichMDError


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


def _documents(path: str) -> Iterator[tuple[Path, dict]]:
    """Yield (file, document) for every JSON document under path; exit 1 if there are none."""
    files = discover_files(Path(path))
    if not files:
        typer.echo(f"No .json documents found at {path}.")
        raise typer.Exit(1)
    for f in files:
        try:
            yield f, load_document(f)
        except RichMDError as e:
            _fail(str(e))


def render_cmd(
    path: Annotated[str, typer.Argument(help="Document JSON file or directory")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="md or html")] = None,
    frontmatter: Annotated[Optional[bool], typer.Option("--frontmatter/--no-frontmatter", help="Prepend frontmatter")] = None,
    minify: Annotated[Optional[bool], typer.Option("--minify", help="Reduce embedded payloads first")] = None,
    clean: Annotated[Optional[bool], typer.Option("--clean", help="Drop empty paragraphs first")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print output instead of writing files")] = False,
    ):
    """Render rich text documents to Markdown (or HTML)."""
    settings = _settings(overrides={
        "output_dir": out, "output_format": fmt, "frontmatter": frontmatter,
        "minify": minify or None, "remove_empty": clean or None,
    })

    if stdout:
        for _, doc in _documents(path):
            typer.echo(render_document(prepare_document(doc, settings), settings))
        return

    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .json documents found at {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def text_cmd(
    path: Annotated[str, typer.Argument(help="Document JSON file or directory")],
    separator: Annotated[Optional[str], typer.Option("--separator", help="Block separator")] = None,
    ignore_links: Annotated[bool, typer.Option("--ignore-links", help="Omit link text")] = False,
    ):
    """Print the plain text of each document."""
    settings = _settings(overrides={"plain_text_separator": separator})
    for _, doc in _documents(path):
        typer.echo(to_plain_text(doc, settings.plain_text_separator, ignore_links))


def stats_cmd(
    path: Annotated[str, typer.Argument(help="Document JSON file or directory")],
    wpm: Annotated[Optional[int], typer.Option("--wpm", help="Reading speed in words per minute")] = None,
    ):
    """Print word count and reading time per document."""
    settings = _settings(overrides={"words_per_minute": wpm})
    for f, doc in _documents(path):
        words = get_word_count(doc)
        minutes = get_reading_time(doc, settings.words_per_minute)
        typer.echo(f"  {f}: {words} words, {minutes} min read")


def links_cmd(
    path: Annotated[str, typer.Argument(help="Document JSON file or directory")],
    ):
    """List linked entry IDs, asset IDs, and hyperlink URIs per document."""
    for f, doc in _documents(path):
        typer.echo(f"{f}:")
        typer.echo(f"  entries: {', '.join(get_linked_entries(doc)) or '-'}")
        typer.echo(f"  assets:  {', '.join(get_linked_assets(doc)) or '-'}")
        typer.echo(f"  links:   {', '.join(extract_links(doc)) or '-'}")


def table_cmd(
    path: Annotated[Path, typer.Argument(help="CSV file; the first row is the header")],
    ):
    """Print a document JSON containing a table built from a CSV file."""
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            rows = [row for row in csv.reader(fh)]
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(json.dumps(document_node([create_table(rows)]), indent=2, ensure_ascii=False))
