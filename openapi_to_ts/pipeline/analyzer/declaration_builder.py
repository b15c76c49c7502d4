"""
Declaration builder turning definitions into TypeScript declarations.

Object definitions become interfaces; everything else becomes a type
alias over a list of types.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from ...logging_config import get_logger
from ..ast_backends.ts_ast_nodes import Declaration, Field, File, Interface, Union
from ..config import REDEFINED_TYPES
from ..errors import UnknownTypeError
from ..schema_ast.nodes import Definition, GroupVersionKind
from .type_mapper import TYPE_MAP, TypeMapper

logger = get_logger(__name__)


def literal_api_type(gvk_list: Sequence[GroupVersionKind], prop_name: str) -> str | None:
    """
    Return the literal type of ``apiVersion`` or ``kind`` for a single-GVK definition.

    Examples:
        ([batch/v1 Job], "apiVersion") -> '"batch/v1"'
        ([/v1 Pod], "apiVersion") -> '"v1"'
        ([batch/v1 Job], "kind") -> '"Job"'
        ([], "kind") -> None
    """
    if len(gvk_list) != 1:
        return None

    gvk = gvk_list[0]
    if prop_name == "apiVersion":
        return json.dumps("/".join(part for part in (gvk.group, gvk.version) if part), ensure_ascii=False)
    elif prop_name == "kind":
        return json.dumps(gvk.kind, ensure_ascii=False)
    return None


class DeclarationBuilder:
    """Builds one declaration per definition."""

    def __init__(self, mapper: TypeMapper, redefined_types: Mapping[str, Sequence[str]] = REDEFINED_TYPES):
        self.mapper = mapper
        self.redefined_types = redefined_types

    def build(self, file: File, name: str, definition: Definition) -> Declaration:
        """
        Build the declaration for ``definition`` inside ``file``.

        Args:
            file: The file the declaration will be added to (receives imports)
            name: Local type name
            definition: The parsed definition

        Raises:
            UnknownTypeError: If a non-object definition has no type to alias
        """
        if definition.is_object:
            return self.build_interface(file, name, definition)
        return self.build_union(file, name, definition)

    def build_interface(self, file: File, name: str, definition: Definition) -> Interface:
        interface = Interface(name=name, description=definition.description)

        if definition.properties is None:
            logger.warning("%s: interface %s has no properties", file.path, name)
            return interface

        for prop_name, prop in definition.properties.items():
            type_expr = literal_api_type(definition.gvk, prop_name) or self.mapper.value_type(file, prop.value)
            interface.add(
                Field(
                    name=prop_name,
                    description=prop.description,
                    type=type_expr,
                    optional=prop_name not in definition.required,
                )
            )

        return interface

    def build_union(self, file: File, name: str, definition: Definition) -> Union:
        if name in self.redefined_types:
            types = list(self.redefined_types[name])
        else:
            types = [TYPE_MAP.get(definition.type, definition.type)] if definition.type else []

        if not types:
            raise UnknownTypeError(f"{file.path}: Unknown type for {name} {json.dumps(definition.type)}")

        return Union(name=name, description=definition.description, types=types)
