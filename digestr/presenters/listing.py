"""
Algorithm listing formatter.

Renders the registry catalog as:

    Algorithm count: <N>
    · <single>
    · <family> family
    ˪→ <member>

with no trailing newline; the output sink adds exactly one.
"""

from __future__ import annotations

from ..hashing.catalog import Family, Single
from ..hashing.registry import AlgorithmRegistry

BULLET = "·"
MEMBER_ARROW = "˪→"


def format_algorithm_list(registry: AlgorithmRegistry) -> str:
    """Format every registry entry, in declaration order, under a count header."""
    lines: list[str] = []
    for entry in registry.entries:
        if isinstance(entry, Single):
            lines.append(f"{BULLET} {entry.name}")
        elif isinstance(entry, Family):
            lines.append(f"{BULLET} {entry.name} family")
            for member in entry.member_names:
                lines.append(f"{MEMBER_ARROW} {member}")

    header = f"Algorithm count: {registry.leaf_count}"
    return "\n".join([header, *lines])
