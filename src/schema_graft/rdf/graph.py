"""In-memory statement graph and the query algebra over it.

The graph is an arena of `Statement` values indexed by subject and by
object. It is built once and never mutated, so any number of queries may
run against it concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .filters import StatementFilter
from .terms import Statement, Term, quote


class Graph:
    """An immutable set of statements with adjacency indices."""

    def __init__(self, statements: Iterable[Statement] = ()):
        by_subject: dict[Term, list[Statement]] = {}
        by_object: dict[Term, list[Statement]] = {}
        terms: dict[str, Term] = {}
        seen: set[Statement] = set()
        for s in statements:
            if s in seen:
                continue
            seen.add(s)
            by_subject.setdefault(s.subject, []).append(s)
            by_object.setdefault(s.object, []).append(s)
            for t in (s.subject, s.predicate, s.object):
                terms.setdefault(t.value, t)

        self._statements = frozenset(seen)
        self._by_subject = {k: tuple(v) for k, v in by_subject.items()}
        self._by_object = {k: tuple(v) for k, v in by_object.items()}
        self._terms = terms

    @classmethod
    def load(cls, statements: Iterable[Statement]) -> Graph:
        return cls(statements)

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(sorted(self._statements))

    def __contains__(self, s: object) -> bool:
        return s in self._statements

    def term_for(self, value: str) -> Term | None:
        """Return the term with the given serialized value, if present."""
        return self._terms.get(value)

    def literal(self, text: str) -> Term | None:
        return self._terms.get(quote(text))

    def from_(self, term: Term) -> tuple[Statement, ...]:
        """Statements with term in subject position."""
        return self._by_subject.get(term, ())

    def to(self, term: Term) -> tuple[Statement, ...]:
        """Statements with term in object position."""
        return self._by_object.get(term, ())

    def query(self, *terms: Term) -> Query:
        return Query(self, tuple(terms))


@dataclass(frozen=True, slots=True)
class Query:
    """A set of terms and the operations that derive new sets from it.

    Every operation returns a new Query; the receiver is left unchanged.
    """

    graph: Graph
    terms: tuple[Term, ...] = ()

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def out(self, fn: StatementFilter) -> Query:
        """Objects of statements with a current term as subject that satisfy fn."""
        return Query(
            self.graph,
            tuple(s.object for t in self.terms for s in self.graph.from_(t) if fn(s)),
        )

    def in_(self, fn: StatementFilter) -> Query:
        """Subjects of statements with a current term as object that satisfy fn."""
        return Query(
            self.graph,
            tuple(s.subject for t in self.terms for s in self.graph.to(t) if fn(s)),
        )

    def where(self, fn: StatementFilter) -> Query:
        """Current terms with at least one outgoing statement that satisfies fn.

        Same set as q.and_(q.out(fn).in_(fn)), but only the adjacency of the
        current terms is read.
        """
        return Query(
            self.graph,
            tuple(t for t in self.terms if any(fn(s) for s in self.graph.from_(t))),
        )

    def and_(self, other: Query) -> Query:
        keep = set(other.terms)
        return Query(self.graph, tuple(t for t in self.terms if t in keep))

    def not_(self, other: Query) -> Query:
        drop = set(other.terms)
        return Query(self.graph, tuple(t for t in self.terms if t not in drop))

    def unique(self) -> Query:
        return Query(self.graph, tuple(dict.fromkeys(self.terms)))

    def result(self) -> list[Term]:
        """The current terms sorted by value."""
        return sorted(self.terms)
