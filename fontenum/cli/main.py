"""
Main CLI entry points for fontenum.
"""

import logging
import sys
from pathlib import Path

import click

from fontenum import __version__
from fontenum.config.paths import GENERATOR_TOOL_NAME
from fontenum.core.exceptions import FontEnumError
from fontenum.core.serializers import SERIALIZERS
from fontenum.utils.logging import logger


def _fail(error: FontEnumError) -> None:
    logger.error(str(error))
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Font enum generator and build plugin."""
    if verbose:
        logger.setLevel(logging.DEBUG)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(SERIALIZERS)),
    default=None,
    help="Output format. Defaults to the output file extension.",
)
@click.argument("output", type=click.UNPROCESSED, required=False)
@click.argument("inputs", nargs=-1, type=click.UNPROCESSED)
def generate(fmt, output, inputs):
    """Write the font enum for INPUTS to OUTPUT."""
    from fontenum.operations.generate import generate_from_args

    args = [output, *inputs] if output is not None else []
    try:
        generate_from_args(args, fmt)
    except FontEnumError as e:
        _fail(e)


@cli.group()
def build():
    """Run the plugin for a build target."""
    pass


def _build_options(func):
    func = click.option(
        "--work-dir",
        type=click.Path(file_okay=False, path_type=Path),
        required=True,
        help="Plugin work directory for generated files.",
    )(func)
    func = click.option(
        "--generator",
        "generator_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=f"Path to {GENERATOR_TOOL_NAME}. Defaults to the one on PATH.",
    )(func)
    func = click.option(
        "--format",
        "fmt",
        type=click.Choice(sorted(SERIALIZERS)),
        default="swift",
        show_default=True,
        help="Output format.",
    )(func)
    func = click.option(
        "--ignore-case",
        is_flag=True,
        help="Also accept upper-case extensions such as .TTF.",
    )(func)
    func = click.option(
        "--force", is_flag=True, help="Regenerate even if outputs are up to date."
    )(func)
    return func


def _run(commands_factory, work_dir, generator_path, fmt, ignore_case, force):
    from fontenum.pipeline.runner import run_build_commands
    from fontenum.plugin.discovery import PluginContext

    tools = {GENERATOR_TOOL_NAME: generator_path} if generator_path else {}
    context = PluginContext(work_dir, tools)
    try:
        commands = commands_factory(context, fmt=fmt, case_sensitive=not ignore_case)
        run_build_commands(commands, force=force)
    except FontEnumError as e:
        _fail(e)


@build.command()
@click.argument("name")
@click.option(
    "--source-dir",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Directory holding the target's source files.",
)
@_build_options
def package(name, source_dir, work_dir, generator_path, fmt, ignore_case, force):
    """Generate fonts for package target NAME."""
    from fontenum.core.font_io import iter_files
    from fontenum.plugin.discovery import (
        PackageTarget,
        SourceModule,
        create_package_build_commands,
    )

    module = SourceModule(list(iter_files(source_dir))) if source_dir.is_dir() else None
    target = PackageTarget(name, module)

    _run(
        lambda context, **options: create_package_build_commands(
            context, target, **options
        ),
        work_dir,
        generator_path,
        fmt,
        ignore_case,
        force,
    )


@build.command()
@click.argument("name")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@_build_options
def project(name, files, work_dir, generator_path, fmt, ignore_case, force):
    """Generate fonts for project target NAME from FILES."""
    from fontenum.plugin.discovery import ProjectTarget, create_project_build_commands

    target = ProjectTarget(name, list(files))

    _run(
        lambda context, **options: create_project_build_commands(
            context, target, **options
        ),
        work_dir,
        generator_path,
        fmt,
        ignore_case,
        force,
    )


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []}
)
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
def generator(arguments):
    """fontenum-generator <outputPath> <inputPath>..."""
    from fontenum.operations.generate import generate_from_args

    try:
        generate_from_args(arguments)
    except FontEnumError as e:
        _fail(e)


if __name__ == "__main__":
    cli()
