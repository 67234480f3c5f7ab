from __future__ import annotations

from collections.abc import Mapping

from ..rdf.emit import Emit, Emitter, OnError
from ..rdf.terms import (
    HAS_CHILD,
    HAS_MULTI,
    IS_NAME,
    IS_PATH,
    IS_TYPE,
    SCHEMA_NAMESPACE,
    StatementError,
    node,
    split_path,
)
from .models import MultiField, SchemaField


def statements(
    parent: str,
    schema: Mapping[str, SchemaField],
    emit: Emit,
    on_error: OnError | None = None,
) -> None:
    """Call emit on every statement constructed from the taxonomy schema.

    The resulting graph has the following structure

        _:field <is:name> "name" .
        _:field <is:path> "full.dotted.path.to.name" .
        _:field <is:type> "type" .
        _:field <has:child> _:child .
        _:field <has:multi> _:multichild .

    where _:child and _:multichild behave like _:field except that
    _:multichild is only the subject of is: statements. Every leading
    path segment of a field gets its own node typed "group".

    The keys of schema are full dotted paths, except at the top level
    where parent is empty and the keys name field sets. Field sets get
    no node of their own.

    A statement that cannot be constructed is passed to on_error (by
    default logged) and flattening carries on with the next one.
    """
    _statements(parent, schema, Emitter(emit, on_error))


def _statements(parent: str, schema: Mapping[str, SchemaField], out: Emitter) -> None:
    for field, props in schema.items():
        _statements(field, props.fields, out)
        if parent == "":
            continue
        fn = out.at(field)
        try:
            path = split_path(field)
        except StatementError as e:
            fn.error(e)
            continue

        for i in range(len(path) - 1):
            sub = ".".join(path[: i + 1])
            n = node(SCHEMA_NAMESPACE, sub)
            fn(n, IS_TYPE, "group")
            fn(n, IS_NAME, path[i])
            fn(n, IS_PATH, sub)
            fn(n, HAS_CHILD, node(SCHEMA_NAMESPACE, ".".join(path[: i + 2])))
        n = node(SCHEMA_NAMESPACE, field)
        fn(n, IS_TYPE, props.type)
        fn(n, IS_NAME, path[-1])
        fn(n, IS_PATH, field)
        for m in props.multi_fields:
            _multi_field(m, fn)


def _multi_field(m: MultiField, fn: Emitter) -> None:
    flat = m.flat_name
    try:
        if not flat or "." not in flat:
            raise StatementError(f"multi-field {m.name!r} flat_name {flat!r} has no parent field")
        split_path(flat)
    except StatementError as e:
        fn.error(e)
        return
    n = node(SCHEMA_NAMESPACE, flat)
    fn(node(SCHEMA_NAMESPACE, flat.rsplit(".", 1)[0]), HAS_MULTI, n)
    fn(n, IS_TYPE, m.type)
    fn(n, IS_NAME, m.name)
    fn(n, IS_PATH, flat)
