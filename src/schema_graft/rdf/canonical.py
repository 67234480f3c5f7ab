from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .terms import Statement


class Canonicalizer(Protocol):
    """Batch step applied once to the accumulated statements.

    Implementations return statements with consistent blank node labels
    and no duplicates.
    """

    def canonicalize(self, statements: Sequence[Statement]) -> list[Statement]: ...


class Deduplicator:
    """Deduplicate and sort without relabeling blank nodes.

    Node labels are already content hashes of (namespace, path), so equal
    nodes from different documents carry equal labels and no isomorphism
    canonicalization is needed to merge them.
    """

    def canonicalize(self, statements: Sequence[Statement]) -> list[Statement]:
        return deduplicate(statements)


def deduplicate(statements: Iterable[Statement]) -> list[Statement]:
    return sorted(set(statements))
