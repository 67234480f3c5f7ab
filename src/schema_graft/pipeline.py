from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .packages.models import PackageField
from .packages.statements import fake_field
from .packages.statements import statements as package_statements
from .rdf.canonical import Canonicalizer, Deduplicator
from .rdf.graph import Graph
from .rdf.terms import Statement, StatementError
from .taxonomy.models import SchemaField
from .taxonomy.statements import statements as schema_statements

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    schema_documents: int = 0
    package_documents: int = 0
    statements: int = 0
    errors: int = 0
    unique_statements: int = 0
    canonicalize_ms: float = 0.0


class GraphBuilder:
    """Accumulates flattened documents and builds the query graph.

    Each document is flattened into its own buffer, which is appended to
    the accumulated statements in call order. Canonicalization runs once,
    over everything, when the graph is built.
    """

    def __init__(self, canonicalizer: Canonicalizer | None = None):
        self.canonicalizer = canonicalizer or Deduplicator()
        self.stats = BuildStats()
        self.errors: list[StatementError] = []
        self._statements: list[Statement] = []

    def add_schema(self, doc: Mapping[str, SchemaField]) -> int:
        buf: list[Statement] = []
        schema_statements("", doc, buf.append, self._on_error)
        self.stats.schema_documents += 1
        return self._extend(buf)

    def add_package(self, doc: Sequence[PackageField]) -> int:
        buf: list[Statement] = []
        package_statements("", doc, buf.append, self._on_error)
        self.stats.package_documents += 1
        return self._extend(buf)

    def add_fake_field(self, full: str, typ: str) -> int:
        buf: list[Statement] = []
        fake_field(full, typ, buf.append, self._on_error)
        return self._extend(buf)

    def add_statements(self, statements: Iterable[Statement]) -> int:
        return self._extend(list(statements))

    def statements(self) -> list[Statement]:
        """Canonicalize the accumulated statements."""
        t0 = time.perf_counter()
        out = self.canonicalizer.canonicalize(self._statements)
        self.stats.canonicalize_ms = (time.perf_counter() - t0) * 1000.0
        self.stats.unique_statements = len(out)
        logger.debug(
            "canonicalized %d statements to %d in %.1fms",
            len(self._statements),
            len(out),
            self.stats.canonicalize_ms,
        )
        return out

    def build(self) -> Graph:
        return Graph.load(self.statements())

    def _extend(self, buf: list[Statement]) -> int:
        self._statements.extend(buf)
        self.stats.statements += len(buf)
        return len(buf)

    def _on_error(self, err: StatementError) -> None:
        logger.warning("skipping statement: %s", err)
        self.errors.append(err)
        self.stats.errors += 1
