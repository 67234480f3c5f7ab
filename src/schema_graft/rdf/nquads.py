"""Text form of the statement set, one N-Quads line per statement.

Only the subset of N-Quads produced by this package is understood:
blank node subjects, predicate tokens, and blank node or string literal
objects, with no graph label.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Iterator
from typing import TextIO

from .terms import Statement, StatementError, Term

_LINE_RE = re.compile(
    r"""^\s*
    (?P<subject>_:[0-9A-Za-z]+)\s+
    (?P<predicate><[^<>\s]+>)\s+
    (?P<object>_:[0-9A-Za-z]+|"(?:[^"\\]|\\.)*")\s*
    \.\s*$""",
    re.VERBOSE,
)


def parse_nquad(line: str) -> Statement:
    m = _LINE_RE.match(line)
    if not m:
        raise StatementError(f"malformed statement: {line.strip()!r}")
    obj = Term(m.group("object"))
    if obj.is_literal:
        # Requote so escapes are normalized to the form the flatteners write.
        try:
            obj = Term.literal(json.loads(obj.value))
        except ValueError as e:
            raise StatementError(f"malformed literal {obj}: {e}") from e
    return Statement(
        Term(m.group("subject")),
        Term.predicate(m.group("predicate")),
        obj,
    )


def read_nquads(stream: TextIO) -> Iterator[Statement]:
    for lineno, line in enumerate(stream, 1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        try:
            yield parse_nquad(line)
        except StatementError as e:
            raise StatementError(f"line {lineno}: {e}") from e


def write_nquads(statements: Iterable[Statement], stream: TextIO) -> int:
    n = 0
    for s in statements:
        stream.write(f"{s}\n")
        n += 1
    return n
