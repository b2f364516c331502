"""Pipeline step functions: load, prepare, render, and write documents"""

import json
import logging
from pathlib import Path
from typing import Any

from markdown_it import MarkdownIt

from richmd.config import Settings
from richmd.core.markdown import render
from richmd.core.minify import minify_rich_text
from richmd.core.models import RenderOptions
from richmd.core.sanitize import remove_empty_nodes, strip_marks
from richmd.exceptions import DocumentLoadError


logger = logging.getLogger(__name__)

DOC_EXTENSIONS = {'.json'}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def discover_files(path: Path) -> list[Path]:
    """Return sorted .json files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in DOC_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in DOC_EXTENSIONS)


def load_document(path: Path) -> dict[str, Any]:
    """Read a rich text document from a JSON file."""
    try:
        doc = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(doc, dict):
        raise DocumentLoadError(f"Invalid document in {path}: expected an object, got {type(doc).__name__}")
    return doc


def prepare_document(document: dict[str, Any], settings: Settings) -> dict[str, Any]:
    """Apply the configured cleanup steps: empty paragraphs, marks, then minify."""
    if settings.remove_empty:
        document = remove_empty_nodes(document)
    if settings.strip_marks:
        document = strip_marks(document, settings.strip_marks)
    if settings.minify:
        document = minify_rich_text(
            document,
            keep_entry_fields=settings.keep_entry_fields,
            keep_asset_fields=settings.keep_asset_fields,
        )
    return document


def render_document(document: dict[str, Any], settings: Settings) -> str:
    """Render to markdown (with optional frontmatter) or to html via markdown-it."""
    if settings.output_format == 'html':
        return _make_parser(settings.parser_config).render(render(document))
    options = RenderOptions(frontmatter=dict(settings.frontmatter_fields) if settings.frontmatter else None)
    return render(document, options)


def run_render(
    path: str,
    settings: Settings,
    output_dir: Path,
    ) -> list[tuple[Path, Path]]:
    """Render every document under path into output_dir. Returns (source, output) pairs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        try:
            document = prepare_document(load_document(p), settings)
            out_file = output_dir / f"{p.stem}.{settings.output_format}"
            out_file.write_text(render_document(document, settings), encoding='utf-8')
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("Rendered %s -> %s", p, out_file)
    return results
