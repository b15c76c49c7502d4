"""OpenAPI to TypeScript Generator

A Python package for generating TypeScript type declarations from the
Kubernetes OpenAPI (swagger) definitions, one module per API group
and version.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputError,
    OutputMode,
    PipelineGenerator,
    generate,
)

__all__ = [
    "PipelineGenerator",
    "generate",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "OutputError",
    "AtomicWriter",
]
