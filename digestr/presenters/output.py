"""
Result output sink.

Writes one complete result (digest or listing) followed by exactly one
newline, either to a file or to stdout. Callers hand over the finished
string, so a failed computation never leaves partial output behind.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from ..core.exceptions import DigestIOError


def write_output(text: str, path: str | os.PathLike[str] | None = None) -> None:
    """
    Write text plus a trailing newline to path, or to stdout if path is None.

    An existing file at path is overwritten.

    Raises:
        DigestIOError: If the output file cannot be written
    """
    if path is None:
        click.echo(text)
        return

    out_path = Path(path)
    if out_path.is_dir():
        raise DigestIOError("Output path is a directory", path=str(out_path))

    try:
        with open(out_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.write("\n")
    except OSError as e:
        raise DigestIOError(
            f"Cannot write output file: {e.strerror or e}", path=str(out_path), cause=e
        ) from e
