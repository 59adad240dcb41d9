"""Generate command - write metadata files for every module in a catalog.

Thin adapter between Click and ``MetadataGenerationUseCase``: it loads the
configuration and catalog, runs the use case, and maps failures to a
non-zero exit code.
"""

from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console

from ...application.models import GenerateMetadataRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import MetadataGenerationError

console = Console()


@click.command()
@click.argument("catalog", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a checkstyle_meta.toml config file (default: ./checkstyle_meta.toml)",
)
@click.option(
    "--resources-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root directory for metadata files (default: src/main/resources)",
)
@click.option(
    "--os-name",
    help="Platform name used to pick the path separator (default: detected)",
)
@click.option(
    "--fail-fast/--no-fail-fast",
    default=None,
    help="Stop at the first module that fails",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def generate_command(
    catalog: Path,
    config_file: Path | None,
    resources_dir: Path | None,
    os_name: str | None,
    fail_fast: bool | None,
    verbose: int,
) -> None:
    """Write Checkstyle metadata XML files for the modules in CATALOG.

    CATALOG is a JSON file listing module descriptors. Modules without a
    description are skipped.

    Examples:

    \b
        checkstyle-meta generate modules.json
        checkstyle-meta generate modules.json --resources-dir build/meta -v
    """
    config = ConfigLoader.load(config_file=config_file)
    if resources_dir is not None:
        config = replace(config, resources_dir=resources_dir)
    if os_name:
        config = replace(config, os_name=os_name)
    if fail_fast is not None:
        config = replace(config, fail_fast=fail_fast)

    container = DependencyContainer(config=config, verbose=verbose, console=console)
    try:
        modules = container.get_module_catalog().load(catalog)
    except MetadataGenerationError as exc:
        raise click.ClickException(str(exc)) from exc

    use_case = container.create_metadata_generation_use_case()
    try:
        summary = use_case.execute(
            GenerateMetadataRequest(modules=modules, fail_fast=config.fail_fast)
        )
    except MetadataGenerationError as exc:
        raise click.ClickException(str(exc)) from exc

    if not summary.success:
        raise click.ClickException(
            f"Metadata generation failed for {len(summary.failed)} module(s)"
        )
