"""
Configuration for the code generator pipeline.

The lookup tables below are read-only; each config instance gets its own
mutable copy so that overrides never leak between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

# Namespace prefix -> replacement, tried in order
NAMESPACE_PREFIXES = MappingProxyType(
    {
        "io.k8s.api.": "",
        "io.k8s.apimachinery.pkg.apis.": "",
        "io.k8s.apimachinery.pkg.": "",
        "io.k8s.apiextensions-apiserver.pkg.apis.": "",
    }
)

# Type names inlined at every use site instead of being imported
REPLACED_TYPES = MappingProxyType(
    {
        "IntOrString": "number | string",
    }
)

# Non-object definitions aliased to an explicit list of types
REDEFINED_TYPES = MappingProxyType(
    {
        "JSON": ("any",),
        "JSONSchemaPropsOrArray": ("JSONSchemaProps", "JSONSchemaProps[]"),
        "JSONSchemaPropsOrBool": ("JSONSchemaProps", "boolean"),
        "JSONSchemaPropsOrStringArray": ("JSONSchemaProps", "string[]"),
    }
)

DEFAULT_SCHEMA_URL = "https://raw.githubusercontent.com/kubernetes/kubernetes/{version}/api/openapi-spec/swagger.json"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Default: overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate rendered text before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Known namespace prefixes stripped from qualified definition names
    namespace_prefixes: dict[str, str] = field(default_factory=lambda: dict(NAMESPACE_PREFIXES))

    # Type names replaced by an inline type expression
    replaced_types: dict[str, str] = field(default_factory=lambda: dict(REPLACED_TYPES))

    # Non-object definitions rendered as a union of the listed types
    redefined_types: dict[str, list[str]] = field(default_factory=lambda: {k: list(v) for k, v in REDEFINED_TYPES.items()})

    # Extension appended to every module path
    file_extension: str = ".ts"

    # Root directory for generated files (the CLI adds the version)
    output_dir: str = "types"

    # Where to fetch the schema from, formatted with the release tag
    schema_url: str = DEFAULT_SCHEMA_URL

    # Timeout in seconds for fetching the schema
    request_timeout: int = 30

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace_prefixes": dict(self.namespace_prefixes),
            "replaced_types": dict(self.replaced_types),
            "redefined_types": {k: list(v) for k, v in self.redefined_types.items()},
            "file_extension": self.file_extension,
            "output_dir": self.output_dir,
            "schema_url": self.schema_url,
            "request_timeout": self.request_timeout,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
