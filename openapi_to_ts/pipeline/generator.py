"""
Pipeline generator.

Drives a single pass over the definitions of an OpenAPI document:

1. Parse the document into the schema model
2. Map every generated definition to its Location
3. Build one declaration per definition into the file at that Location
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..logging_config import get_logger
from .analyzer import DeclarationBuilder, NameResolver, TypeMapper
from .ast_backends import Project, TypeScriptSerializer
from .config import GeneratorConfig
from .schema_ast import API, Definition, SchemaParser

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedDefinition:
    """A definition together with where it is declared."""

    qualified_name: str
    path: str
    name: str
    definition: Definition


class PipelineGenerator:
    """Generates a TypeScript project from an OpenAPI document."""

    def __init__(self, schema: dict[str, Any] | API, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema: The raw swagger dictionary or an already parsed API
            config: Generation configuration (defaults used if omitted)
        """
        self.config = config or GeneratorConfig()
        self.names = NameResolver(self.config.namespace_prefixes, self.config.file_extension)
        # Definitions without a location are never generated, so their values are not checked
        self.api = schema if isinstance(schema, API) else SchemaParser().parse(schema, include=self._has_location)
        self.mapper = TypeMapper(self.api, self.names, self.config.replaced_types)
        self.builder = DeclarationBuilder(self.mapper, self.config.redefined_types)

    def _has_location(self, qualified_name: str) -> bool:
        return self.names.location(qualified_name) is not None

    def definitions(self) -> list[ResolvedDefinition]:
        """Definitions to generate, in qualified-name order."""
        defs = []
        for qualified_name in sorted(self.api.definitions):
            loc = self.names.location(qualified_name)
            if loc is None:
                logger.debug("Skipping %s: no known namespace prefix", qualified_name)
                continue
            if loc.name in self.config.replaced_types:
                logger.debug("Skipping %s: replaced by %s", qualified_name, self.config.replaced_types[loc.name])
                continue

            defs.append(ResolvedDefinition(qualified_name, loc.path, loc.name, self.api.definitions[qualified_name]))
        return defs

    def generate(self) -> Project:
        """
        Build the project.

        Returns:
            Project with one file per module path

        Raises:
            GenerationError: On any fatal condition; no partial project is returned
        """
        project = Project()
        for resolved in self.definitions():
            file = project.file(resolved.path)
            file.add(self.builder.build(file, resolved.name, resolved.definition))

        logger.debug("Generated %d declarations in %d files", sum(len(f.declarations) for f in project.all()), len(project))
        return project

    def render(self) -> dict[str, str]:
        """Generate the project and render every file to text, keyed by module path."""
        serializer = TypeScriptSerializer()
        return {file.path: serializer.render_text(file) for file in self.generate().all()}


def generate(schema: dict[str, Any] | API, config: GeneratorConfig | None = None) -> Project:
    """Generate a TypeScript project from an OpenAPI document."""
    return PipelineGenerator(schema, config).generate()
