"""Shared fixtures for the schema-graft test suite.

Provides a small ECS-like taxonomy, package field documents, and helpers
to build graphs from them.
"""

from __future__ import annotations

from typing import Any

import pytest

from schema_graft.packages.models import PackageField
from schema_graft.pipeline import GraphBuilder
from schema_graft.rdf.graph import Graph
from schema_graft.taxonomy.models import SchemaField

TAXONOMY: dict[str, Any] = {
    "base": {
        "name": "base",
        "type": "group",
        "root": True,
        "fields": {
            "@timestamp": {"name": "@timestamp", "type": "date"},
            "message": {"name": "message", "type": "match_only_text"},
        },
    },
    "file": {
        "name": "file",
        "type": "group",
        "fields": {
            "file.name": {"name": "name", "type": "keyword"},
            "file.path": {
                "name": "path",
                "type": "keyword",
                "multi_fields": [
                    {"name": "text", "type": "match_only_text", "flat_name": "file.path.text"},
                ],
            },
        },
    },
    "registry": {
        "name": "registry",
        "type": "group",
        "fields": {
            "registry.data.strings": {"name": "data.strings", "type": "wildcard"},
            "registry.hive": {"name": "hive", "type": "keyword"},
            "registry.path": {"name": "path", "type": "keyword"},
        },
    },
}


def schema_doc(data: dict[str, Any]) -> dict[str, SchemaField]:
    return {k: SchemaField.model_validate(v) for k, v in data.items()}


def package_doc(data: list[dict[str, Any]]) -> list[PackageField]:
    return [PackageField.model_validate(v) for v in data]


def build_graph(taxonomy: dict[str, Any] | None = None, *packages: list[dict[str, Any]]) -> Graph:
    b = GraphBuilder()
    b.add_schema(schema_doc(TAXONOMY if taxonomy is None else taxonomy))
    for p in packages:
        b.add_package(package_doc(p))
    return b.build()


@pytest.fixture
def taxonomy() -> dict[str, SchemaField]:
    return schema_doc(TAXONOMY)


@pytest.fixture
def taxonomy_graph() -> Graph:
    return build_graph()


@pytest.fixture
def registry_package() -> list[dict[str, Any]]:
    return [
        {
            "name": "registry",
            "type": "group",
            "fields": [{"name": "path", "type": "keyword"}],
        }
    ]


@pytest.fixture
def foo_package() -> list[dict[str, Any]]:
    return [
        {
            "name": "foo_package",
            "type": "group",
            "fields": [
                {
                    "name": "registry",
                    "type": "group",
                    "fields": [
                        {"name": "path", "type": "keyword"},
                        {"name": "size", "type": "long"},
                    ],
                },
                {"name": "file.name", "type": "keyword", "external": "ecs"},
            ],
        }
    ]


@pytest.fixture
def make_graph():
    """Factory building a graph from the taxonomy and package documents."""
    return build_graph
