"""Taxonomy (ECS) side of the graph.

- models.py: pydantic records of the nested schema document
- statements.py: flattens a schema document into statements
"""

from .models import MultiField, SchemaDocument, SchemaField

__all__ = ["MultiField", "SchemaDocument", "SchemaField"]
