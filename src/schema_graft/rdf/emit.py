from __future__ import annotations

import logging
from collections.abc import Callable

from .terms import Statement, StatementError, Term, triple

logger = logging.getLogger(__name__)

Emit = Callable[[Statement], None]
OnError = Callable[[StatementError], None]


def log_error(err: StatementError) -> None:
    logger.warning("skipping statement: %s", err)


class Emitter:
    """Builds statements and hands them to emit.

    A statement that fails to build goes to on_error, tagged with the
    field it belongs to, and does not stop the statements after it.
    """

    __slots__ = ("emit", "on_error", "where")

    def __init__(self, emit: Emit, on_error: OnError | None = None, where: str = ""):
        self.emit = emit
        self.on_error = on_error or log_error
        self.where = where

    def at(self, where: str) -> Emitter:
        return Emitter(self.emit, self.on_error, where)

    def error(self, err: StatementError) -> None:
        self.on_error(StatementError(f"{self.where}: {err}") if self.where else err)

    def __call__(self, subject: Term, predicate: str, obj: Term | str | None) -> None:
        try:
            s = triple(subject, predicate, obj)
        except StatementError as e:
            self.error(e)
            return
        self.emit(s)
