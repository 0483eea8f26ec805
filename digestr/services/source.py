"""
Chunked input sources.

A ChunkedSource yields an input's bytes as a lazy sequence of buffers.
File sources read fixed-size chunks on demand, so memory use does not
depend on file size. Every source can be traversed exactly once.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from ..core.exceptions import DigestIOError, SourceConsumedError

DEFAULT_CHUNK_SIZE = 64 * 1024  # 64 KiB


class ChunkedSource:
    """
    One-shot, lazy sequence of byte buffers.

    Build one with from_file(), from_string() or from_bytes(). The file
    handle of a file-backed source is closed when iteration ends, when a
    read fails, or on close() / context-manager exit, whichever comes first.

    Usage:
        with ChunkedSource.from_file("big.iso") as source:
            for chunk in source:
                hasher.update(chunk)
    """

    def __init__(
        self,
        *,
        kind: str,
        label: str,
        handle: BinaryIO | None = None,
        data: bytes | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.kind = kind
        self.label = label
        self.chunk_size = chunk_size
        self.bytes_read = 0
        self._handle = handle
        self._data = data
        self._consumed = False

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> ChunkedSource:
        """
        Open a file for chunked reading.

        Args:
            path: File to read (directories are rejected)
            chunk_size: Maximum size of each yielded buffer

        Raises:
            DigestIOError: If the path is missing, a directory, or unreadable
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        file_path = Path(path)
        if file_path.is_dir():
            raise DigestIOError("Input path is a directory, not a file", path=str(file_path))

        try:
            handle = open(file_path, "rb")
        except FileNotFoundError as e:
            raise DigestIOError("Input file not found", path=str(file_path), cause=e) from e
        except OSError as e:
            raise DigestIOError(
                f"Cannot open input file: {e.strerror or e}", path=str(file_path), cause=e
            ) from e

        return cls(kind="file", label=str(file_path), handle=handle, chunk_size=chunk_size)

    @classmethod
    def from_string(cls, text: str) -> ChunkedSource:
        """
        Wrap a string; its UTF-8 bytes become the single buffer.

        Undecodable command-line bytes arrive as surrogate escapes and are
        hashed as the original bytes.
        """
        return cls.from_bytes(text.encode("utf-8", "surrogateescape"), label="<string>")

    @classmethod
    def from_bytes(cls, data: bytes, label: str = "<bytes>") -> ChunkedSource:
        """Wrap in-memory bytes as a single-buffer source."""
        return cls(kind="string", label=label, data=bytes(data))

    @property
    def consumed(self) -> bool:
        """Whether iteration has started (a source is never reusable)."""
        return self._consumed

    def __iter__(self) -> Iterator[bytes]:
        if self._consumed:
            raise SourceConsumedError(self.label)
        self._consumed = True
        if self._handle is not None:
            return self._iter_file(self._handle)
        data, self._data = self._data or b"", None
        return self._iter_data(data)

    def _iter_data(self, data: bytes) -> Iterator[bytes]:
        self.bytes_read += len(data)
        yield data

    def _iter_file(self, handle: BinaryIO) -> Iterator[bytes]:
        try:
            while True:
                try:
                    chunk = handle.read(self.chunk_size)
                except OSError as e:
                    raise DigestIOError(
                        f"Failed reading input file: {e.strerror or e}",
                        path=self.label,
                        cause=e,
                    ) from e
                if not chunk:
                    return
                self.bytes_read += len(chunk)
                yield chunk
        finally:
            self.close()

    def close(self) -> None:
        """Release the file handle, if any. Safe to call repeatedly."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()
        # An unopened source that gets closed can never be read
        self._consumed = True
        self._data = None

    def __enter__(self) -> ChunkedSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ChunkedSource(kind={self.kind!r}, label={self.label!r})"
