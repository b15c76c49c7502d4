import json
from pathlib import Path

import click

from .logging_config import configure_logging
from .pipeline import AtomicWriter, GenerationError, GeneratorConfig, OutputError, OutputMode, PipelineGenerator
from .utils import SchemaLoadError, load_schema_from_file, load_schema_from_url, normalize_version, schema_url


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--schema",
    "-s",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="Read the OpenAPI document from a local file instead of fetching it",
)
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Root directory for generated files")
@click.option("--force/--no-force", default=None, help="Overwrite existing files (default) or fail if one exists")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("version", type=str)
def openapi_to_ts(config, schema, output, force, verbose, version):
    configure_logging(verbose=verbose)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flag overrides the config file
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS

    version = normalize_version(version)
    root = Path(output or config.output_dir) / version

    try:
        if schema is not None:
            document = load_schema_from_file(schema)
        else:
            document = load_schema_from_url(schema_url(config.schema_url, version), config.request_timeout)

        files = PipelineGenerator(document, config).render()
        AtomicWriter(config.output).write_all(root, files)
    except (GenerationError, OutputError, SchemaLoadError) as e:
        raise click.ClickException(str(e)) from e

    for module_path in sorted(files):
        click.echo(module_path, err=True)
