"""
Click-based CLI for digestr.

This module provides the single `digestr` command:

    digestr [OPTIONS] ALGORITHM INPUT
    digestr --list

Usage:
    from digestr.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import InvalidInvocationError
from ..presenters.listing import format_algorithm_list
from ..presenters.output import write_output
from ..services.encoding import encode, encoding_names, parse_encoding
from ..services.router import digest_input
from .context import DigestrContext
from .decorators import handle_errors

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("digestr")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="digestr")
@click.option(
    "-f",
    "--file",
    "from_file",
    is_flag=True,
    help="Input denotes a filepath (cannot be a directory).",
)
@click.option(
    "-l",
    "--list",
    "list_algorithms",
    is_flag=True,
    help="Print the list of all the available hashing algorithms.",
)
@click.option(
    "-e",
    "--encoding",
    "encoding_name",
    metavar="NAME",
    default=None,
    help=f"Encoding type for output hash ({', '.join(encoding_names())}). [default: hex]",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=None,
    help="Output file to write the digest result to. [default: stdout]",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.argument("algorithm", required=False)
@click.argument("input_value", metavar="INPUT", required=False)
@handle_errors
def cli(
    from_file: bool,
    list_algorithms: bool,
    encoding_name: str | None,
    output: Path | None,
    verbose: bool,
    algorithm: str | None,
    input_value: str | None,
) -> None:
    """digestr - compute the digest of a string or a file.

    \b
    Examples:
        digestr sha256 abc             Hash the literal string "abc"
        digestr -f blake3 disk.img     Hash a file's contents
        digestr -e base64 md5 hello    Print the digest as base64
        digestr --list                 Show every supported algorithm
    """
    ctx = DigestrContext.create(verbose=verbose)

    # Reject a bad encoding before any digest work happens
    encoding = parse_encoding(
        encoding_name if encoding_name is not None else ctx.settings.digest.encoding
    )

    if list_algorithms:
        write_output(format_algorithm_list(ctx.registry), output)
        return

    if algorithm is None or input_value is None:
        raise InvalidInvocationError(
            "Missing ALGORITHM and INPUT; pass both, or use --list "
            "(see 'digestr --help')"
        )

    digest = digest_input(
        input_value,
        algorithm,
        from_file=from_file,
        chunk_size=ctx.settings.digest.chunk_size,
        registry=ctx.registry,
    )
    result = encode(digest, encoding)
    ctx.logger.debug("%s digest (%s): %s", algorithm, encoding.value, result)

    write_output(result, output)


__all__ = [
    "DigestrContext",
    "__version__",
    "cli",
]
