"""
TypeScript AST Serializer.

Converts TypeScript AST nodes to source lines. Output is a pure function
of the AST content:
- Imports sorted by relative module path, names sorted within each import
- Declarations sorted by name
- Blank line before every multi-line member except the first
- Two-space indentation inside interfaces
"""

from __future__ import annotations

import json
import posixpath
import re
from pathlib import Path

import jinja2

from ..errors import UnreachableCodeError
from .ts_ast_nodes import Declaration, Field, File, Interface, Union

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "typescript"

_IDENTIFIER = re.compile(r"^[a-z_]\w*$", re.IGNORECASE | re.ASCII)
_REQUIRED_MARKER = re.compile(r"\s+Required\.?\s*$")


def quote(text: str) -> str:
    """Quote a string the way JSON (and TypeScript) string literals are written."""
    return json.dumps(text, ensure_ascii=False)


def relative_path(from_path: str, to_path: str) -> str:
    """
    Compute the import specifier for ``to_path`` as seen from ``from_path``.

    Examples:
        ("core/v1.ts", "core/v1beta1.ts") -> "./v1beta1.ts"
        ("batch/v1.ts", "meta/v1.ts") -> "../meta/v1.ts"
        ("runtime.ts", "meta/v1.ts") -> "./meta/v1.ts"
    """
    from_dir = posixpath.dirname(from_path)
    if from_dir == posixpath.dirname(to_path):
        return f"./{posixpath.basename(to_path)}"
    if not from_dir:
        return f"./{to_path}"

    prefix = "/".join(".." for _ in from_dir.split("/"))
    return f"{prefix}/{to_path}"


class TypeScriptSerializer:
    """Serializes TypeScript AST nodes to source lines."""

    INDENT = "  "  # 2 spaces

    def __init__(self):
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["quote"] = quote
        self.file_template = self.jinja_env.get_template("file.ts.jinja2")

    def render(self, file: File) -> list[str]:
        """Serialize a complete file to source lines."""
        modules = sorted((relative_path(file.path, path), sorted(names)) for path, names in file.imports.items())
        imports = [{"path": path, "names": names} for path, names in modules]

        declarations = sorted((declaration.name, self.render_declaration(declaration)) for declaration in file.declarations)
        body = self._join_members([lines for _, lines in declarations])

        text = self.file_template.render(imports=imports, body=body)
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def render_text(self, file: File) -> str:
        """Serialize a file to text ending with a newline."""
        return "\n".join([*self.render(file), ""])

    def render_declaration(self, declaration: Declaration | Field) -> list[str]:
        if isinstance(declaration, Interface):
            return self._serialize_interface(declaration)
        elif isinstance(declaration, Union):
            return self._serialize_union(declaration)
        elif isinstance(declaration, Field):
            return self._serialize_field(declaration)
        raise UnreachableCodeError(f'"unreachable" code was reached: {declaration!r}')

    def _serialize_interface(self, interface: Interface) -> list[str]:
        return [
            *self._serialize_description(interface.description),
            f"export interface {interface.name} {{",
            *self._join_members([self._serialize_field(f) for f in interface.fields], indent=1),
            "}",
        ]

    def _serialize_field(self, field: Field) -> list[str]:
        name = field.name if _IDENTIFIER.match(field.name) else quote(field.name)
        marker = "?" if field.optional else ""
        return [*self._serialize_description(field.description), f"{name}{marker}: {field.type}"]

    def _serialize_union(self, union: Union) -> list[str]:
        return [*self._serialize_description(union.description), f"export type {union.name} = {' | '.join(union.types)}"]

    def _serialize_description(self, description: str | None) -> list[str]:
        """Reflow a description into a doc comment block."""
        if not description:
            return []

        lines = [line.rstrip() for line in _REQUIRED_MARKER.sub("", description).split("\n")]
        return ["/**", *(f" * {line}" for line in lines), " */"]

    def _join_members(self, members: list[list[str]], indent: int = 0) -> list[str]:
        prefix = self.INDENT * indent
        lines: list[str] = []
        for i, member_lines in enumerate(members):
            if len(member_lines) > 1 and i > 0:
                lines.append("")
            lines.extend(f"{prefix}{line}" for line in member_lines)
        return lines
