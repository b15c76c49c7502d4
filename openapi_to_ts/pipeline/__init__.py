"""
Pipeline - OpenAPI to TypeScript declaration generator.

This module provides a multi-phase architecture for generating
TypeScript type declarations from an OpenAPI document:

1. Phase 1 (Parser): Parse the swagger definitions into the schema model
2. Phase 2 (Analyzer): Resolve names and references, map value types
3. Phase 3 (AST Backend): Build declarations into per-module files
4. Phase 4 (Serializer): Render each file to source lines
5. Phase 5 (Output): Optionally write rendered files atomically
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    ExcludedReferenceError,
    GenerationError,
    OutputError,
    SchemaError,
    UnknownTypeError,
    UnreachableCodeError,
    UnresolvableReferenceError,
)
from .generator import PipelineGenerator, generate
from .output import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "generate",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "GenerationError",
    "SchemaError",
    "UnresolvableReferenceError",
    "ExcludedReferenceError",
    "UnknownTypeError",
    "UnreachableCodeError",
    "OutputError",
]
