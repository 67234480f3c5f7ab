"""Statement filters used by the query algebra.

A filter is any callable taking a `Statement` and returning a bool.
`Match` covers the common case of a fixed predicate with an optional
bound object, which the graft walk rebinds at every step.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .terms import (
    AS_TYPE,
    EXTERNAL_TYPE,
    HAS_CHILD,
    HAS_MULTI,
    IS_NAME,
    IS_PATH,
    IS_PUBLISHED,
    IS_TYPE,
    Statement,
    Term,
)

StatementFilter = Callable[[Statement], bool]


@dataclass(frozen=True, slots=True)
class Match:
    predicate: str
    object: Term | None = None

    @classmethod
    def literal(cls, predicate: str, text: str) -> Match:
        return cls(predicate, Term.literal(text))

    def __call__(self, s: Statement) -> bool:
        if s.predicate.value != self.predicate:
            return False
        return self.object is None or s.object == self.object


by_name = Match(IS_NAME)
by_path = Match(IS_PATH)
by_type = Match(IS_TYPE)
by_used_type = Match(AS_TYPE)
by_external = Match(EXTERNAL_TYPE)
is_published = Match.literal(IS_PUBLISHED, "true")
has_child = Match(HAS_CHILD)
has_multi = Match(HAS_MULTI)
