"""
Type mapper translating schema values into TypeScript type expressions.

Referenced types declared in another module are registered as imports on
the file being generated.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import NoReturn

from ..ast_backends.ts_ast_nodes import File
from ..config import REPLACED_TYPES
from ..errors import ExcludedReferenceError, UnreachableCodeError
from ..schema_ast.nodes import API, ArrayValue, MapValue, RefValue, ScalarValue, Value
from .name_resolver import NameResolver
from .reference_resolver import resolve

# Schema scalar type -> TypeScript type
TYPE_MAP = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "integer": "number",
}


def assert_never(value: object) -> NoReturn:
    raise UnreachableCodeError(f'"unreachable" code was reached: {value!r}')


class TypeMapper:
    """Maps Values to TypeScript type expressions."""

    def __init__(
        self,
        api: API,
        names: NameResolver | None = None,
        replaced_types: Mapping[str, str] = REPLACED_TYPES,
    ):
        self.api = api
        self.names = names or NameResolver()
        self.replaced_types = replaced_types

    def value_type(self, file: File, value: Value) -> str:
        """
        Translate a value into a type expression for use inside ``file``.

        Raises:
            UnresolvableReferenceError: If a $ref cannot be resolved
            ExcludedReferenceError: If a $ref targets a definition with no location
            UnreachableCodeError: If the value is not a known variant
        """
        if isinstance(value, RefValue):
            return self._reference_type(file, value)
        elif isinstance(value, ScalarValue):
            if value.type not in TYPE_MAP:
                assert_never(value)
            return TYPE_MAP[value.type]
        elif isinstance(value, MapValue):
            return f"{{[name: string]: {self.value_type(file, value.values)}}}"
        elif isinstance(value, ArrayValue):
            return f"Array<{self.value_type(file, value.items)}>"
        else:
            assert_never(value)

    def _reference_type(self, file: File, value: RefValue) -> str:
        loc = self.names.location(resolve(self.api, value).name)

        if loc is None:
            raise ExcludedReferenceError(f"Value references excluded type: {json.dumps({'$ref': value.ref})}")
        elif loc.name in self.replaced_types:
            return self.replaced_types[loc.name]

        file.import_(loc.path, loc.name)
        return loc.name
