from __future__ import annotations

from collections.abc import Sequence

from ..rdf.emit import Emit, Emitter, OnError
from ..rdf.terms import (
    AS_TYPE,
    EXTERNAL_TYPE,
    HAS_CHILD,
    HAS_MULTI,
    IS_NAME,
    IS_PATH,
    IS_PUBLISHED,
    PACKAGE_NAMESPACE,
    StatementError,
    node,
    split_path,
)
from .models import PackageField


def statements(
    parent: str,
    fields: Sequence[PackageField],
    emit: Emit,
    on_error: OnError | None = None,
) -> None:
    """Call emit on every statement constructed from package field metadata.

    The resulting graph has the following structure

        _:field <is:name> "name" .
        _:field <is:path> "full.dotted.path.to.name" .
        _:field <as:type> "type" .
        _:field <has:child> _:child .
        _:field <has:multi> _:multichild .

    where _:child and _:multichild behave like _:field except that
    _:multichild is only the subject of is: and as: statements.

    Two more statements mark package fields. Every node is published, and
    fields imported from another schema carry that schema's name:

        _:field <is:published> "true" .
        _:field <external:type> "ecs" .

    Names are relative to parent; nested fields are flattened with their
    full dotted path.
    """
    _statements(parent, fields, Emitter(emit, on_error))


def fake_field(full: str, typ: str, emit: Emit, on_error: OnError | None = None) -> None:
    """Emit the statements of a single hypothetical package field."""
    statements("", [PackageField(name=full, type=typ)], emit, on_error)


def _statements(parent: str, fields: Sequence[PackageField], out: Emitter) -> None:
    for props in fields:
        full = f"{parent}.{props.name}" if parent else props.name
        fn = out.at(full)
        try:
            path = split_path(full)
        except StatementError as e:
            fn.error(e)
            continue
        _statements(full, props.fields, out)

        for i in range(len(path) - 1):
            sub = ".".join(path[: i + 1])
            n = node(PACKAGE_NAMESPACE, sub)
            fn(n, IS_PUBLISHED, "true")
            fn(n, AS_TYPE, "group")
            fn(n, IS_NAME, path[i])
            fn(n, IS_PATH, sub)
            fn(n, HAS_CHILD, node(PACKAGE_NAMESPACE, ".".join(path[: i + 2])))
        n = node(PACKAGE_NAMESPACE, full)
        fn(n, IS_PUBLISHED, "true")
        fn(n, IS_NAME, path[-1])
        fn(n, IS_PATH, full)
        if props.external:
            fn(n, EXTERNAL_TYPE, props.external)
        if props.type:
            fn(n, AS_TYPE, props.type)

        for m in props.multi_fields:
            flat = f"{full}.{m.name}"
            try:
                split_path(flat)
            except StatementError as e:
                fn.error(e)
                continue
            multi = node(PACKAGE_NAMESPACE, flat)
            fn(n, HAS_MULTI, multi)
            fn(multi, IS_PUBLISHED, "true")
            fn(multi, AS_TYPE, m.type)
            fn(multi, IS_NAME, m.name)
            fn(multi, IS_PATH, flat)
