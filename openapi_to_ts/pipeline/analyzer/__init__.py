"""
Analyzer module.

Contains reference resolution, name resolution, type mapping and
declaration building.
"""

from __future__ import annotations

from .declaration_builder import DeclarationBuilder, literal_api_type
from .name_resolver import Location, NameResolver, name_to_location, simplify_name
from .reference_resolver import ResolvedRef, resolve
from .type_mapper import TypeMapper

__all__ = [
    "DeclarationBuilder",
    "literal_api_type",
    "Location",
    "NameResolver",
    "name_to_location",
    "simplify_name",
    "ResolvedRef",
    "resolve",
    "TypeMapper",
]
