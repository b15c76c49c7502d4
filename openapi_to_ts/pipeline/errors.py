"""
Errors raised by the generation pipeline.

Every fatal condition aborts the whole run; nothing is written when one
of these escapes ``PipelineGenerator.generate()``.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for fatal code generation errors."""

    pass


class SchemaError(GenerationError):
    """Raised when the input does not have the expected OpenAPI shape."""

    pass


class UnresolvableReferenceError(GenerationError):
    """Raised when a $ref is malformed or names a missing definition."""

    pass


class ExcludedReferenceError(GenerationError):
    """Raised when a value references a definition that is not generated."""

    pass


class UnknownTypeError(GenerationError):
    """Raised when a non-object definition has no type to alias."""

    pass


class UnreachableCodeError(GenerationError):
    """Raised when a value variant is not handled by the type mapper."""

    pass


class OutputError(Exception):
    """Raised when rendered files cannot be written.

    This can happen when:
    - The target file exists and the output mode forbids overwriting
    - The rendered text fails validation
    """

    pass
