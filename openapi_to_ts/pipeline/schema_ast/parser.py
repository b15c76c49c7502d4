"""
OpenAPI parser that builds the schema model.

Phase 1 of the pipeline: turn the raw swagger dictionary into typed nodes
without resolving references or doing TypeScript-specific processing.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from ..errors import SchemaError
from .nodes import (
    SCALAR_TYPES,
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

GVK_EXTENSION = "x-kubernetes-group-version-kind"


class SchemaParser:
    """Parses an OpenAPI document into an API node."""

    def parse(self, schema: dict[str, Any], include: Callable[[str], bool] | None = None) -> API:
        """
        Parse an OpenAPI document.

        Args:
            schema: The swagger dictionary (``info`` and ``definitions``)
            include: Optional predicate on qualified names. Definitions it
                rejects keep their description, type tag, required list and
                GVK but their property values are not parsed.

        Returns:
            API with every definition parsed

        Raises:
            SchemaError: If an included definition or value has an unsupported shape
        """
        if not isinstance(schema, dict) or not isinstance(schema.get("definitions"), dict):
            raise SchemaError("Schema has no definitions mapping")

        raw_info = schema.get("info") or {}
        info = APIInfo(
            title=raw_info.get("title", ""),
            version=raw_info.get("version", ""),
        )

        definitions = {}
        for name, raw_def in schema["definitions"].items():
            shallow = include is not None and not include(name)
            definitions[name] = self._parse_definition(raw_def, f"#/definitions/{name}", shallow=shallow)

        return API(info=info, definitions=definitions)

    def _parse_definition(self, raw: dict[str, Any], path: str, shallow: bool = False) -> Definition:
        if not isinstance(raw, dict):
            raise SchemaError(f"{path}: definition must be an object, got {json.dumps(raw)}")

        properties = None
        if raw.get("properties") is not None and not shallow:
            properties = {name: self._parse_property(prop, f"{path}/properties/{name}") for name, prop in raw["properties"].items()}

        gvk = tuple(
            GroupVersionKind(
                group=entry.get("group", ""),
                version=entry.get("version", ""),
                kind=entry.get("kind", ""),
            )
            for entry in raw.get(GVK_EXTENSION) or []
        )

        return Definition(
            description=raw.get("description"),
            type=raw.get("type"),
            required=tuple(raw.get("required") or ()),
            properties=properties,
            gvk=gvk,
        )

    def _parse_property(self, raw: dict[str, Any], path: str) -> Property:
        return Property(
            value=self.parse_value(raw, path),
            description=raw.get("description"),
        )

    def parse_value(self, raw: Any, path: str = "#") -> Value:
        """
        Parse a value schema into exactly one Value variant.

        Args:
            raw: The value schema dictionary
            path: Current path in the document (for error messages)

        Raises:
            SchemaError: If the value matches none of the variants
        """
        if not isinstance(raw, dict):
            raise SchemaError(f"{path}: unsupported value {json.dumps(raw)}")

        if "$ref" in raw:
            return RefValue(ref=raw["$ref"])

        value_type = raw.get("type")
        if value_type in SCALAR_TYPES:
            return ScalarValue(type=value_type)

        if value_type == "array":
            if "items" not in raw:
                raise SchemaError(f"{path}: array without items")
            return ArrayValue(items=self.parse_value(raw["items"], f"{path}/items"))

        if value_type == "object":
            if "additionalProperties" not in raw:
                raise SchemaError(f"{path}: object without additionalProperties")
            return MapValue(values=self.parse_value(raw["additionalProperties"], f"{path}/additionalProperties"))

        raise SchemaError(f"{path}: unsupported value type {json.dumps(value_type)}")
