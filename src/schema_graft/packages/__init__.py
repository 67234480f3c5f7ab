"""Integration package side of the graph.

- models.py: pydantic records of package field definitions
- statements.py: flattens package fields into statements
"""

from .models import PackageDocument, PackageField

__all__ = ["PackageDocument", "PackageField"]
