from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass

# Predicate tokens. The serialized forms are part of the wire format.
IS_NAME = "<is:name>"
IS_PATH = "<is:path>"
IS_TYPE = "<is:type>"
AS_TYPE = "<as:type>"
IS_PUBLISHED = "<is:published>"
EXTERNAL_TYPE = "<external:type>"
HAS_CHILD = "<has:child>"
HAS_MULTI = "<has:multi>"

PREDICATES = frozenset(
    {IS_NAME, IS_PATH, IS_TYPE, AS_TYPE, IS_PUBLISHED, EXTERNAL_TYPE, HAS_CHILD, HAS_MULTI}
)

# Namespaces keep taxonomy and package node ids apart even for equal paths.
SCHEMA_NAMESPACE = "schema"
PACKAGE_NAMESPACE = "package"

_BLANK_RE = re.compile(r"_:[0-9A-Za-z]+")


class StatementError(ValueError):
    """Raised when a statement cannot be constructed from its parts."""


@dataclass(frozen=True, slots=True, order=True)
class Term:
    """An atomic graph value, identified by its serialized form.

    `value` is one of:
    - `_:<label>` for an anonymous node
    - `"text"` for a literal
    - `<token>` for a predicate
    """

    value: str

    @classmethod
    def blank(cls, label: str) -> Term:
        term = cls(f"_:{label}")
        if not _BLANK_RE.fullmatch(term.value):
            raise StatementError(f"invalid blank node label: {label!r}")
        return term

    @classmethod
    def literal(cls, text: str) -> Term:
        if not isinstance(text, str):
            raise StatementError(f"literal must be a string, got {type(text).__name__}")
        return cls(quote(text))

    @classmethod
    def predicate(cls, token: str) -> Term:
        if token not in PREDICATES:
            raise StatementError(f"unknown predicate: {token}")
        return cls(token)

    @property
    def is_blank(self) -> bool:
        return self.value.startswith("_:")

    @property
    def is_literal(self) -> bool:
        return self.value.startswith('"')

    @property
    def text(self) -> str:
        """The unquoted text of a literal; other terms return their value."""
        if self.is_literal:
            return unquote(self.value)
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Statement:
    """An immutable (subject, predicate, object) triple."""

    subject: Term
    predicate: Term
    object: Term

    def __str__(self) -> str:
        return f"{self.subject} {self.predicate} {self.object} ."


def quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def unquote(value: str) -> str:
    return json.loads(value)


def node_id(namespace: str, path: str) -> str:
    """Stable content-addressed label for a field node."""
    h = hashlib.sha1()
    h.update(namespace.encode("utf-8"))
    h.update(path.encode("utf-8"))
    return h.hexdigest()


def node(namespace: str, path: str) -> Term:
    return Term.blank(node_id(namespace, path))


def split_path(path: str) -> list[str]:
    """Split a dotted path, rejecting empty segments."""
    if not isinstance(path, str):
        raise StatementError(f"path must be a string, got {type(path).__name__}")
    segments = path.split(".")
    if any(not s for s in segments):
        raise StatementError(f"empty segment in path {path!r}")
    return segments


def triple(subject: Term, predicate: str, obj: Term | str | None) -> Statement:
    """Build a statement; a plain string object is taken as a literal."""
    if isinstance(obj, str):
        obj = Term.literal(obj)
    elif not isinstance(obj, Term):
        raise StatementError(f"object of {predicate} must be a string, got {type(obj).__name__}")
    return Statement(subject, Term.predicate(predicate), obj)
