"""Graph queries for finding graft candidates."""

from .errors import GraftError, MultipleTypesError, NotFoundError, NoTypeError
from .grafting import (
    GraftReport,
    candidate_grafts_for,
    candidate_grafts_in,
    graft_report,
    published_fields_in,
    published_paths_in,
)

__all__ = [
    "GraftError",
    "MultipleTypesError",
    "NotFoundError",
    "NoTypeError",
    "GraftReport",
    "candidate_grafts_for",
    "candidate_grafts_in",
    "graft_report",
    "published_fields_in",
    "published_paths_in",
]
