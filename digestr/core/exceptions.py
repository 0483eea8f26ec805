"""
Custom exception hierarchy for digestr.

Every failure a digest invocation can hit is a typed exception rooted at
DigestrException, so the CLI can turn any of them into one diagnostic
message and a non-zero exit status.
"""

from __future__ import annotations


class DigestrException(Exception):
    """
    Base exception for all digestr errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, names, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retrying with fresh input may succeed
    """

    exit_code: int = 1
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# I/O Errors
# =============================================================================


class DigestIOError(DigestrException):
    """
    A file could not be opened, read, or written.

    Covers missing paths, directories passed where a file is expected,
    permission problems and read errors in the middle of a file.
    """

    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
        self.path = path


# =============================================================================
# Lookup Errors
# =============================================================================


class UnknownAlgorithmError(DigestrException, LookupError):
    """
    Requested algorithm name matches no registry entry.

    Family names are not valid lookup targets, so asking for a family
    header also raises this.
    """

    def __init__(
        self,
        name: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            f"Unknown hash algorithm: {name!r} (use --list to see available algorithms)",
            context=context,
            cause=cause,
        )
        self.name = name


class UnknownEncodingError(DigestrException, ValueError):
    """Requested output encoding matches no supported encoding."""

    def __init__(
        self,
        name: str,
        *,
        supported: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if supported:
            ctx["supported"] = supported
        super().__init__(f"Unknown encoding: {name!r}", context=ctx, cause=cause)
        self.name = name


# =============================================================================
# Invocation Errors
# =============================================================================


class InvalidInvocationError(DigestrException):
    """
    Neither the listing mode nor an (algorithm, input) pair was supplied.
    """

    exit_code: int = 2


# =============================================================================
# Internal Contract Errors
# =============================================================================


class DuplicateAlgorithmError(DigestrException, ValueError):
    """A name appears more than once while building an algorithm registry."""

    def __init__(
        self,
        name: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            f"Algorithm name registered more than once: {name!r}",
            context=context,
            cause=cause,
        )
        self.name = name


class SourceConsumedError(DigestrException, RuntimeError):
    """A chunked source was traversed a second time."""

    def __init__(
        self,
        label: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            f"Input source already consumed: {label}",
            context=context,
            cause=cause,
        )


class HashStateFinalizedError(DigestrException, RuntimeError):
    """A hash state was updated or finalized after it had been finalized."""

    def __init__(
        self,
        algorithm: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            f"Hash state for {algorithm!r} has already been finalized",
            context=context,
            cause=cause,
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigValidationError(DigestrException, ValueError):
    """
    Invalid configuration value.

    Raised when a TOML file or environment variable holds a value the
    settings models reject.
    """

    def __init__(
        self,
        message: str,
        *,
        config_file: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if config_file:
            ctx["config_file"] = config_file
        super().__init__(message, context=ctx, cause=cause)
