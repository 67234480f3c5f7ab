"""Records of the ECS nested schema (generated/ecs/ecs_nested.yml).

See https://github.com/elastic/ecs/blob/main/schemas/README.md
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    # Unknown keys are kept so the loader can report them in strict mode.
    model_config = ConfigDict(extra="allow")


class AllowedValue(_Record):
    name: str
    description: str | None = None
    expected_event_types: list[str] = Field(default_factory=list)
    beta: str | None = None


class MultiField(_Record):
    """An additional way to index a field."""

    type: str
    name: str
    # Full dotted path of the multi-field, parent path included.
    flat_name: str | None = None
    norms: bool | None = None
    default_field: bool | None = None
    analyzer: str | None = None


class Expected(_Record):
    at: str
    as_: str | None = Field(default=None, alias="as")
    full: str | None = None
    short_override: str | None = None
    beta: str | None = None


class Reusable(_Record):
    # None is read as true.
    top_level: bool | None = None
    expected: list[Expected | str] = Field(default_factory=list)


class ReusedHere(_Record):
    full: str
    schema_name: str | None = None
    short: str | None = None
    beta: str | None = None


class SchemaField(_Record):
    """A field set or a field of the taxonomy.

    Field sets are the top-level entries of a document; their `fields`
    are keyed by full dotted path.
    """

    name: str | None = None
    level: str | None = None
    title: str | None = None
    description: str | None = None
    fields: dict[str, SchemaField] = Field(default_factory=dict)
    short: str | None = None
    root: bool | None = None
    group: int | None = None
    type: str | None = None
    reusable: Reusable | None = None
    beta: str | None = None

    allowed_values: list[AllowedValue] = Field(default_factory=list)
    example: Any = None
    format: str | None = None
    index: bool | None = None
    multi_fields: list[MultiField] = Field(default_factory=list)
    normalize: list[str] = Field(default_factory=list)

    required: bool | None = None
    ignore_above: int | None = None
    doc_values: bool | None = None
    footnote: str | None = None
    nestings: list[str] = Field(default_factory=list)
    original_fieldset: str | None = None
    flat_name: str | None = None
    prefix: str | None = None
    input_format: str | None = None
    output_format: str | None = None
    output_precision: int | None = None
    dashed_name: str | None = None
    reused_here: list[ReusedHere] = Field(default_factory=list)
    object_type: str | None = None
    scaling_factor: int | None = None
    pattern: str | None = None
    expected_values: list[Any] = Field(default_factory=list)


SchemaDocument = dict[str, SchemaField]
