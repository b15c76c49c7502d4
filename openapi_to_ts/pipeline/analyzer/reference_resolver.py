"""
Reference resolver for $ref resolution.

Resolves $ref paths to their definitions in the document.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ..errors import UnresolvableReferenceError
from ..schema_ast.nodes import API, Definition, RefValue

REF_PREFIX = "#/definitions/"


@dataclass(frozen=True)
class ResolvedRef:
    """A resolved $ref."""

    name: str  # Fully qualified definition name
    definition: Definition


def resolve(api: API, ref: RefValue) -> ResolvedRef:
    """
    Resolve a $ref to its definition.

    Raises:
        UnresolvableReferenceError: If the ref is not a local definitions
            ref or names a definition that does not exist
    """
    if not ref.ref.startswith(REF_PREFIX):
        raise UnresolvableReferenceError(f"Invalid or unsupported $ref: {json.dumps(ref.ref)}")

    name = ref.ref[len(REF_PREFIX) :]
    definition = api.definitions.get(name)
    if definition is None:
        raise UnresolvableReferenceError(f"Failed to resolve {name} in {api.info.title}/{api.info.version}.")

    return ResolvedRef(name=name, definition=definition)
