"""Graft candidate queries over a taxonomy and package statement graph.

A graft candidate for a field is a taxonomy node with the same declared
type whose trailing path segments match the field's. Candidates are
ranked by the length of the matching suffix and only the longest matches
are returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..rdf.filters import Match, by_name, by_path, by_used_type, has_child, is_published
from ..rdf.graph import Graph, Query
from ..rdf.terms import IS_NAME, IS_TYPE, Term
from .errors import GraftError, MultipleTypesError, NotFoundError, NoTypeError


def candidate_grafts_in(g: Graph, full: str) -> list[str]:
    """Return graft candidates for the published field with path full.

    The field must already be in the graph. Its own type is used for
    matching, and no node carrying the same path, in either namespace,
    is offered as a candidate.
    """
    path = full.split(".")
    term = g.literal(full)
    if term is None:
        raise NotFoundError(full)

    # Nodes with this exact path, taxonomy and package alike.
    q = g.query(term).in_(by_path)
    if not q:
        raise NotFoundError(full)
    published = q.where(is_published)
    if not published:
        raise NotFoundError(full, "not published")

    typs = published.out(by_used_type).unique().result()
    if not typs:
        raise NoTypeError(full)
    if len(typs) > 1:
        raise MultipleTypesError(full, [t.text for t in typs])

    # Every other node with the same name.
    candidates = q.out(by_name).in_(by_name).not_(q)
    return _walk_matching_path(candidates, typs[0], path)


def candidate_grafts_for(g: Graph, full: str, typ: str) -> list[str]:
    """Return graft candidates for a field with path full and type typ.

    The field does not need to be in the graph.
    """
    path = full.split(".")
    name = g.literal(path[-1])
    q = g.query(name).in_(by_name) if name is not None else g.query()
    if not q:
        raise NotFoundError(full)

    # A type no node carries cannot match anything.
    t = g.literal(typ)
    if t is None:
        return []

    return _walk_matching_path(q, t, path)


def published_fields_in(g: Graph) -> Query:
    """Return a query holding every published node in g."""
    true = g.literal("true")
    if true is None:
        return g.query()
    return g.query(true).in_(is_published).unique()


def published_paths_in(g: Graph) -> list[str]:
    return [t.text for t in published_fields_in(g).out(by_path).unique().result()]


@dataclass(slots=True)
class GraftReport:
    path: str
    candidates: list[str] = field(default_factory=list)
    error: GraftError | None = None


def graft_report(g: Graph) -> list[GraftReport]:
    """Run candidate_grafts_in for every published field of g."""
    reports: list[GraftReport] = []
    for path in published_paths_in(g):
        try:
            reports.append(GraftReport(path, candidate_grafts_in(g, path)))
        except GraftError as e:
            reports.append(GraftReport(path, error=e))
    return reports


def _walk_matching_path(q: Query, typ: Term, path: list[str]) -> list[str]:
    # Only taxonomy nodes carry <is:type>, so package nodes drop out here.
    matching_type = Match(IS_TYPE, typ)
    leaves = q.where(matching_type).unique()

    # Walk up from each leaf one path segment at a time. A leaf survives a
    # step while its ancestor at that depth has the expected name; the walk
    # stops at the first step no leaf survives, keeping the previous level.
    g = q.graph
    level = {leaf: g.query(leaf) for leaf in leaves}
    for i in range(len(path) - 2, -1, -1):
        name = Match.literal(IS_NAME, path[i])
        survivors: dict[Term, Query] = {}
        for leaf, ancestors in level.items():
            parents = ancestors.in_(has_child)
            matched = parents.where(name).unique()
            if matched:
                survivors[leaf] = matched
        if not survivors:
            break
        level = survivors

    return [t.text for t in g.query(*level).out(by_path).unique().result()]
