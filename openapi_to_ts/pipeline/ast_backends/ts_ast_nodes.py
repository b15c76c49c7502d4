"""
TypeScript AST node definitions.

These nodes represent the structure of the generated TypeScript files.
A Project owns its Files; a File owns its imports and declarations.
They are serialized to source code by TypeScriptSerializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Field:
    """Represents an interface field (``name?: type``)."""

    name: str = ""
    description: str | None = None
    type: str = ""
    optional: bool = False


@dataclass
class Interface:
    """Represents an exported interface."""

    name: str = ""
    description: str | None = None
    fields: list[Field] = field(default_factory=list)

    def add(self, member: Field) -> Interface:
        self.fields.append(member)
        return self


@dataclass
class Union:
    """Represents an exported type alias over one or more types."""

    name: str = ""
    description: str | None = None
    types: list[str] = field(default_factory=list)


Declaration = Interface | Union


@dataclass
class File:
    """Represents one generated module."""

    path: str = ""
    imports: dict[str, set[str]] = field(default_factory=dict)  # module path -> imported names
    declarations: list[Declaration] = field(default_factory=list)

    def add(self, declaration: Declaration) -> File:
        self.declarations.append(declaration)
        return self

    def import_(self, path: str, name: str) -> File:
        """Register an import of ``name`` from ``path``; no-op for this file's own path."""
        if path == self.path:
            return self
        self.imports.setdefault(path, set()).add(name)
        return self

    def render(self) -> list[str]:
        from .ts_serializer import TypeScriptSerializer

        return TypeScriptSerializer().render(self)


class Project:
    """The set of generated files, keyed by module path."""

    def __init__(self):
        self._files: dict[str, File] = {}

    def file(self, path: str) -> File:
        """Return the file for ``path``, creating it on first use."""
        if path not in self._files:
            self._files[path] = File(path=path)
        return self._files[path]

    def all(self) -> list[File]:
        """All files, ordered by path."""
        return [self._files[path] for path in sorted(self._files)]

    def __len__(self) -> int:
        return len(self._files)
