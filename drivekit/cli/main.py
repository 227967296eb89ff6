#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import List, Optional

import click
import typer

from drivekit.cli.prompts import next_page, prompt_for_changes
from drivekit.config.commented_file import read_commented_file
from drivekit.config.configuration import DriveConfiguration
from drivekit.desktop.entry import (
    MIME_TYPE_JOINER,
    UNESCAPED_PATH_SEP,
    UrlMimeTypeExt,
    serialize_as_desktop_entry,
    to_desktop_entry,
)
from drivekit.utils.logger import setup_logging
from drivekit.utils.path_utils import remote_path_split
from drivekit.utils.prefix import common_prefix
from drivekit.utils.size_format import pretty_bytes

app = typer.Typer(
    add_completion=False,
    help="drivekit – formatting and text helpers for remote file sync"
)

logger = logging.getLogger("drivekit")


@app.callback()
def main(
        ctx: typer.Context,
        config_file: Optional[Path] = typer.Option(
            None, "-z", "--config",
            help="Path to TOML configuration file",
        ),
        log_level: Optional[str] = typer.Option(
            None,
            "--log-level",
            help="Log level: debug | info | warning",
            click_type=click.Choice(
                ["debug", "info", "warning"],
                case_sensitive=False,
            ),
        ),
        log_file: Optional[Path] = typer.Option(
            None, "--log-file",
            help="Also write log records to this file",
        ),
        log_type: Optional[str] = typer.Option(
            None, "-t", "--log-type",
            help="Log file format: plain | json",
            click_type=click.Choice(
                ["plain", "json"],
                case_sensitive=False,
            ),
        ),
):
    # ---------- load configuration ----------
    cfg = DriveConfiguration()

    if config_file:
        cfg.load_from_toml(str(config_file))

    # ---------- OUTPUT ----------
    if log_level:
        cfg.output.log_level = log_level
    if log_file:
        cfg.output.log_file = str(log_file)
    if log_type:
        cfg.output.log_type = log_type

    # ---------- validate ----------
    try:
        cfg.validate()
    except ValueError as e:
        raise typer.BadParameter(str(e))

    # ---------- logging ----------
    setup_logging(
        log_level=cfg.output.log_level,
        log_file_path=cfg.output.log_file,
        log_type=cfg.output.log_type,
    )

    ctx.obj = cfg


@app.command()
def size(
        values: List[int] = typer.Argument(..., help="Byte counts to format"),
):
    """Print byte counts in human readable form."""
    for value in values:
        typer.echo(pretty_bytes(value))


@app.command()
def prefix(
        values: Optional[List[str]] = typer.Argument(None, help="Paths or names"),
):
    """Print the longest prefix shared by all values."""
    typer.echo(common_prefix(*(values or [])))


@app.command()
def split(
        path: str = typer.Argument(..., help="Slash separated remote path"),
):
    """Print the directory and base name of a remote path."""
    directory, base = remote_path_split(path)
    typer.echo(directory)
    typer.echo(base)


@app.command()
def ignore(
        ctx: typer.Context,
        path: Optional[Path] = typer.Argument(
            None, help="Commented file to read (default: configured ignore file)",
        ),
        comment: Optional[str] = typer.Option(
            None, "-c", "--comment",
            help="Comment marker (default: configured marker)",
        ),
        page_size: int = typer.Option(
            0, "--page-size",
            help="Pause after this many lines (0 disables paging)",
            min=0,
        ),
):
    """Print the directives of an ignore or filter-rules file."""
    cfg: DriveConfiguration = ctx.obj
    path = path or Path(cfg.filters.ignore_file)
    if comment is None:
        comment = cfg.filters.comment_marker

    try:
        clauses = read_commented_file(str(path), comment)
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise typer.Exit(code=1)

    for i, clause in enumerate(clauses, start=1):
        # undecodable bytes come back as surrogate escapes
        typer.echo(clause.encode("utf-8", "surrogateescape"))
        if page_size and i % page_size == 0 and i < len(clauses):
            if not next_page():
                break


@app.command()
def shortcut(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Display name of the remote file"),
        url: str = typer.Argument(..., help="URL the shortcut opens"),
        mime_type: str = typer.Argument(..., help="Content type, e.g. application/pdf"),
        ext: str = typer.Option("", "--ext", help="Export extension, e.g. pdf"),
        output: Optional[Path] = typer.Option(
            None, "-o", "--output",
            help="Destination file (default: <name>.desktop)",
        ),
        force: bool = typer.Option(
            False, "-f", "--force",
            help="Overwrite an existing file without asking",
        ),
):
    """Write a desktop shortcut pointing at a remote file."""
    cfg: DriveConfiguration = ctx.obj
    descriptor = UrlMimeTypeExt(url=url, mime_type=mime_type, ext=ext)

    if output is None:
        entry = to_desktop_entry(name, descriptor)
        file_name = entry.name.replace(UNESCAPED_PATH_SEP, MIME_TYPE_JOINER)
        output = Path(f"{file_name}{cfg.shortcut.extension}")

    if output.exists() and not force:
        typer.echo(f"{output} already exists and will be overwritten")
        if not prompt_for_changes():
            raise typer.Exit(code=1)

    try:
        written = serialize_as_desktop_entry(name, str(output), descriptor)
    except OSError as e:
        logger.error(f"Cannot write {output}: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {output} ({pretty_bytes(written)})")


if __name__ == "__main__":
    app()
