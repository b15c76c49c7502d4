"""
TypeScript AST backend.

AST nodes for the generated project and the serializer that renders them.
"""

from __future__ import annotations

from .ts_ast_nodes import Declaration, Field, File, Interface, Project, Union
from .ts_serializer import TypeScriptSerializer, relative_path

__all__ = [
    "Declaration",
    "Field",
    "File",
    "Interface",
    "Project",
    "Union",
    "TypeScriptSerializer",
    "relative_path",
]
