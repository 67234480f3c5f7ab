"""Statement graph primitives.

- terms: Term, Statement, predicate tokens, content-addressed node ids
- graph: the immutable Graph and its Query algebra
- filters: statement filters for Query.out / Query.in_
- canonical: the canonicalize/deduplicate batch step
- emit: statement construction with per-statement error reporting
- nquads: text form of the statement set
"""

from .canonical import Canonicalizer, Deduplicator, deduplicate
from .graph import Graph, Query
from .terms import Statement, StatementError, Term

__all__ = [
    "Canonicalizer",
    "Deduplicator",
    "deduplicate",
    "Graph",
    "Query",
    "Statement",
    "StatementError",
    "Term",
]
