"""Records of integration package field definitions (fields.yml)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..taxonomy.models import MultiField


class ObjectTypeParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    object_type: str | None = None
    object_type_mapping_type: str | None = None
    scaling_factor: int | None = None


class PackageField(BaseModel):
    """A field, or group of fields, declared by a package.

    `name` is relative to the enclosing group and may itself be dotted.
    `external` names the schema a field was imported from, "ecs" for
    fields that reference the taxonomy.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    type: str | None = None
    description: str | None = None
    format: str | None = None
    fields: list[PackageField] = Field(default_factory=list)
    multi_fields: list[MultiField] = Field(default_factory=list)
    external: str | None = None

    enabled: bool | None = None
    analyzer: str | None = None
    search_analyzer: str | None = None
    norms: bool | None = None
    dynamic: Any = None
    index: bool | None = None
    doc_values: bool | None = None
    copy_to: str | None = None
    ignore_above: int | None = None
    path: str | None = None
    migration: bool | None = None
    dimension: bool | None = None
    dynamic_template: bool | None = None
    unit: str | None = None
    metric_type: str | None = None

    object_type: str | None = None
    object_type_mapping_type: str | None = None
    scaling_factor: int | None = None
    object_type_params: list[ObjectTypeParams] = Field(default_factory=list)

    # Kibana index pattern settings.
    analyzed: bool | None = None
    count: int | None = None
    searchable: bool | None = None
    aggregatable: bool | None = None
    script: str | None = None
    pattern: str | None = None
    input_format: str | None = None
    output_format: str | None = None
    output_precision: int | None = None
    label_template: str | None = None
    url_template: list[Any] = Field(default_factory=list)
    open_link_in_current_tab: bool | None = None

    overwrite: bool | None = None
    default_field: bool | None = None
    level: str | None = None
    example: Any = None
    title: str | None = None
    group: int | None = None
    value: str | None = None
    footnote: str | None = None
    release: str | None = None
    required: bool | None = None
    possible_values: list[str] = Field(default_factory=list)
    deprecated: str | None = None
    prefix: str | None = None


PackageDocument = list[PackageField]
