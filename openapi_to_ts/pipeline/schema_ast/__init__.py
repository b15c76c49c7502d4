"""
Schema model module.

Contains the node definitions and parser for OpenAPI documents.
"""

from __future__ import annotations

from .nodes import (
    API,
    APIInfo,
    ArrayValue,
    Definition,
    GroupVersionKind,
    MapValue,
    Property,
    RefValue,
    ScalarValue,
    Value,
)
from .parser import SchemaParser

__all__ = [
    "API",
    "APIInfo",
    "Definition",
    "GroupVersionKind",
    "Property",
    "Value",
    "RefValue",
    "ScalarValue",
    "ArrayValue",
    "MapValue",
    "SchemaParser",
]
