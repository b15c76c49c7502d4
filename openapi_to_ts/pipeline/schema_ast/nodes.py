"""
Node definitions for an OpenAPI (swagger 2.0) document.

These nodes describe the parsed ``definitions`` section before any
reference resolution or TypeScript-specific processing. They are never
mutated after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SCALAR_TYPES = frozenset({"string", "integer", "number", "boolean"})


@dataclass(frozen=True)
class RefValue:
    """A reference to another definition (``$ref``)."""

    ref: str = ""  # e.g., "#/definitions/io.k8s.api.core.v1.Pod"


@dataclass(frozen=True)
class ScalarValue:
    """A primitive value: string, integer, number or boolean."""

    type: str = "string"


@dataclass(frozen=True)
class ArrayValue:
    """An array of values of a single type."""

    items: Value


@dataclass(frozen=True)
class MapValue:
    """An object with string keys and values of a single type."""

    values: Value


Value = RefValue | ScalarValue | ArrayValue | MapValue


@dataclass(frozen=True)
class Property:
    """A named property of an object definition."""

    value: Value
    description: str | None = None


@dataclass(frozen=True)
class GroupVersionKind:
    """An ``x-kubernetes-group-version-kind`` entry."""

    group: str = ""
    version: str = ""
    kind: str = ""


@dataclass(frozen=True)
class Definition:
    """A named type definition."""

    description: str | None = None
    type: str | None = None  # "object", a scalar tag, "array", or None
    required: tuple[str, ...] = ()
    properties: dict[str, Property] | None = None  # None when the schema has no "properties"
    gvk: tuple[GroupVersionKind, ...] = ()

    @property
    def is_object(self) -> bool:
        return self.type == "object"


@dataclass(frozen=True)
class APIInfo:
    title: str = ""
    version: str = ""


@dataclass(frozen=True)
class API:
    """Root of the parsed OpenAPI document."""

    info: APIInfo = field(default_factory=APIInfo)
    definitions: dict[str, Definition] = field(default_factory=dict)
