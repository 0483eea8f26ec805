"""
Click decorators for digestr CLI commands.

- handle_errors: turns DigestrException into a Click error carrying the
  exception's exit code, so every failure ends as one "Error: ..." line
  on stderr and a non-zero status.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import DigestrException

F = TypeVar("F", bound=Callable[..., Any])


class DigestrClickException(click.ClickException):
    """ClickException that keeps the originating exit code."""

    def __init__(self, error: DigestrException) -> None:
        super().__init__(str(error))
        self.exit_code = error.exit_code
        self.error = error


def handle_errors(f: F) -> F:
    """Decorator converting DigestrException into DigestrClickException.

    Usage:
        @click.command()
        @handle_errors
        def cli(...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except DigestrException as e:
            raise DigestrClickException(e) from e

    return wrapper  # type: ignore[return-value]
