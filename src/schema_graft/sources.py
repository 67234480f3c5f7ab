"""Decoding of taxonomy and package documents, and taxonomy retrieval."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Any

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from .packages.models import PackageDocument
from .taxonomy.models import SchemaDocument

logger = logging.getLogger(__name__)

_schema_adapter = TypeAdapter(SchemaDocument)
_package_adapter = TypeAdapter(PackageDocument)


class DocumentError(ValueError):
    """A source document could not be decoded."""


class SourceError(RuntimeError):
    """A source document could not be retrieved."""


def iter_schema_documents(stream: str | IO[str], *, strict: bool = True) -> Iterator[SchemaDocument]:
    """Decode a YAML stream of taxonomy documents."""
    for i, data in enumerate(_load_all(stream)):
        doc = _validate(_schema_adapter, data, i)
        if strict:
            _check_known_fields(doc.items(), i)
        yield doc


def iter_package_documents(stream: str | IO[str], *, strict: bool = True) -> Iterator[PackageDocument]:
    """Decode a YAML stream of package field documents."""
    for i, data in enumerate(_load_all(stream)):
        doc = _validate(_package_adapter, data, i)
        if strict:
            _check_known_fields(((f.name, f) for f in doc), i)
        yield doc


def ecs_spec(root: str | Path, version: str, nested_path: str) -> str:
    """Return the nested ECS schema at version from the git repo at root."""
    cmd = ["git", "show", f"{version}:{nested_path}"]
    logger.info("reading %s at %s from %s", nested_path, version, root)
    try:
        res = subprocess.run(cmd, cwd=root, capture_output=True, text=True, check=True)
    except FileNotFoundError as e:
        raise SourceError(f"cannot run git in {root}: {e}") from e
    except subprocess.CalledProcessError as e:
        raise SourceError(f"{' '.join(cmd)}: {e.stderr.strip() or e}") from e
    return res.stdout


def _load_all(stream: str | IO[str]) -> Iterator[Any]:
    try:
        for data in yaml.safe_load_all(stream):
            if data is None:
                continue
            yield data
    except yaml.YAMLError as e:
        raise DocumentError(f"invalid YAML: {e}") from e


def _validate(adapter: TypeAdapter, data: Any, index: int) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise DocumentError(f"document {index}: {e}") from e


def _check_known_fields(items: Iterable[tuple[str, BaseModel]], index: int) -> None:
    unknown = [u for key, model in items for u in _unknown_fields(model, str(key))]
    if unknown:
        raise DocumentError(f"document {index}: unknown fields: {', '.join(unknown)}")


def _unknown_fields(model: BaseModel, where: str) -> Iterator[str]:
    for key in model.model_extra or {}:
        yield f"{where}.{key}"
    for name, value in model:
        if isinstance(value, BaseModel):
            yield from _unknown_fields(value, f"{where}.{name}")
        elif isinstance(value, list):
            for i, v in enumerate(value):
                if isinstance(v, BaseModel):
                    yield from _unknown_fields(v, f"{where}.{name}[{i}]")
        elif isinstance(value, dict):
            for k, v in value.items():
                if isinstance(v, BaseModel):
                    yield from _unknown_fields(v, f"{where}.{name}[{k}]")
