"""
Name resolver mapping qualified definition names to output locations.

``io.k8s.api.batch.v1.Job`` becomes ``Job`` declared in ``batch/v1.ts``.
Names without a known namespace prefix have no location and are not
generated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..config import NAMESPACE_PREFIXES


@dataclass(frozen=True)
class Location:
    """Where a definition is declared in the generated output."""

    path: str  # Module path, e.g. "batch/v1.ts"
    name: str  # Type name, e.g. "Job"


def simplify_name(name: str, prefixes: Mapping[str, str] = NAMESPACE_PREFIXES) -> str | None:
    """Replace the first matching namespace prefix, or return None."""
    for prefix, replacement in prefixes.items():
        if name.startswith(prefix):
            return f"{replacement}{name[len(prefix) :]}"
    return None


def name_to_location(
    name: str,
    prefixes: Mapping[str, str] = NAMESPACE_PREFIXES,
    extension: str = ".ts",
) -> Location | None:
    """
    Map a qualified definition name to its Location.

    Args:
        name: Fully qualified definition name
        prefixes: Ordered namespace prefixes and their replacements
        extension: Extension appended to the module path

    Returns:
        The Location, or None if the name has no known prefix
    """
    simplified = simplify_name(name, prefixes)
    if simplified is None:
        return None

    parts = simplified.split(".")
    return Location(path="/".join(parts[:-1]) + extension, name=parts[-1])


class NameResolver:
    """Resolves locations using the prefixes and extension of a config."""

    def __init__(self, prefixes: Mapping[str, str] = NAMESPACE_PREFIXES, extension: str = ".ts"):
        self.prefixes = prefixes
        self.extension = extension

    def location(self, name: str) -> Location | None:
        return name_to_location(name, self.prefixes, self.extension)
