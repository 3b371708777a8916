"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mmformat.config import Settings, load_config
from mmformat.core.emit import diff_documents, emit_document
from mmformat.core.export import dump_document, write_doc
from mmformat.core.models import Document
from mmformat.core.parse import discover_files, parse_file
from mmformat.util.log import configure_logging


logger = logging.getLogger(__name__)

PathArg = Annotated[Path, typer.Argument(help="MM file or directory to process")]
DepthOpt = Annotated[Optional[int], typer.Option("--max-depth", help="Max nested inline spans")]
EncodingOpt = Annotated[Optional[str], typer.Option("--encoding", help="Source file encoding")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: bool = False) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
        configure_logging(settings.log_level, verbose=verbose)
    except ValueError as e:
        _fail(str(e))
    return settings


def _load(path: Path, settings: Settings) -> list[tuple[Path, Document]]:
    """Parse every .mm file at path; exit 1 if none exist or one cannot be decoded."""
    if not path.exists():
        _fail(f"Path not found: {path}")
    files = discover_files(path)
    if not files:
        _fail(f"No .mm files found at {path}")
    docs = []
    for p in files:
        try:
            docs.append((p, parse_file(p, settings.encoding, settings.max_depth)))
        except ValueError as e:
            _fail(f"Failed to read {p}", e)
    logger.info("parsed %d file(s) from %s", len(docs), path)
    return docs


def parse_cmd(
    path: PathArg,
    fmt: Annotated[Optional[str], typer.Option("--format", "-f", help="json or yaml")] = None,
    out: Annotated[Optional[Path], typer.Option("--out-dir", help="Write one file per document here")] = None,
    depth: DepthOpt = None,
    encoding: EncodingOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Parse MM files and dump the document tree as JSON or YAML."""
    settings = _settings({"output_format": fmt, "max_depth": depth, "encoding": encoding}, verbose)
    for src, doc in _load(path, settings):
        if out is None:
            typer.echo(dump_document(doc, settings.output_format, settings.indent))
            continue
        rel_path = src.relative_to(path) if path.is_dir() else Path(src.name)
        out_file = write_doc(doc, out, rel_path, settings.output_format, settings.indent)
        typer.echo(f"  {src} -> {out_file}")


def summary_cmd(
    path: PathArg,
    depth: DepthOpt = None,
    encoding: EncodingOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print a one-line debug summary for every block."""
    settings = _settings({"max_depth": depth, "encoding": encoding}, verbose)
    docs = _load(path, settings)
    for src, doc in docs:
        if len(docs) > 1:
            typer.echo(f"{src}:")
        for line in doc.summaries():
            typer.echo(line)


def text_cmd(
    path: PathArg,
    depth: DepthOpt = None,
    encoding: EncodingOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print the plain text of every heading, paragraph, quote and list item."""
    settings = _settings({"max_depth": depth, "encoding": encoding}, verbose)
    for _, doc in _load(path, settings):
        for line in doc.plain_text():
            typer.echo(line)


def fmt_cmd(
    path: PathArg,
    check: Annotated[bool, typer.Option("--check", help="Exit 1 if a file is not in canonical form")] = False,
    depth: DepthOpt = None,
    encoding: EncodingOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print the canonical MM form of each file."""
    settings = _settings({"max_depth": depth, "encoding": encoding}, verbose)
    changed = []
    for src, doc in _load(path, settings):
        canonical = emit_document(doc)
        if not check:
            typer.echo(canonical, nl=False)
        elif canonical != src.read_text(encoding=settings.encoding):
            changed.append(src)
    for src in changed:
        typer.echo(f"  would reformat: {src}")
    if changed:
        raise typer.Exit(1)


def diff_cmd(
    old: Annotated[Path, typer.Argument(help="Original MM file")],
    new: Annotated[Path, typer.Argument(help="Changed MM file")],
    depth: DepthOpt = None,
    encoding: EncodingOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Show a unified diff between the canonical forms of two MM files."""
    settings = _settings({"max_depth": depth, "encoding": encoding}, verbose)
    for p in (old, new):
        if not p.is_file():
            _fail(f"Not a file: {p}")
    [(_, old_doc)] = _load(old, settings)
    [(_, new_doc)] = _load(new, settings)
    lines = diff_documents(old_doc, new_doc, from_label=str(old), to_label=str(new))
    if not lines:
        typer.echo("No structural differences.")
        return
    typer.echo("".join(lines), nl=False)
