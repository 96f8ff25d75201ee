"""
Build-system integration.

Discovers font files on a build target and describes the generator
invocation that produces its font enum. Package targets and project targets
only differ in how their file list and name are obtained.
"""

import json
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from fontenum.config.paths import (
    DISPLAY_NAME_TEMPLATE,
    FONT_EXTENSIONS,
    GENERATED_DIR_NAME,
    GENERATOR_TOOL_NAME,
    OUTPUT_FILE_SUFFIX,
    STAMP_FILE_SUFFIX,
)
from fontenum.core.exceptions import (
    MissingInputFilesError,
    MissingSourceModuleError,
    ToolNotFoundError,
)
from fontenum.core.font_io import filter_fonts, write_text_atomic
from fontenum.core.serializers import DEFAULT_FORMAT, get_serializer
from fontenum.utils.logging import logger


@dataclass(frozen=True)
class Tool:
    """Executable made available to the plugin."""

    name: str
    path: Path


class Diagnostics:
    """Collects user-visible build diagnostics."""

    def __init__(self):
        self.errors: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)
        logger.error(message)


@dataclass
class PluginContext:
    """What the host build system provides to the plugin."""

    work_directory: Path
    tools: dict[str, Path] = field(default_factory=dict)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def tool(self, name: str) -> Tool:
        """
        Locate a companion tool by name.

        Explicitly registered tools win over executables on PATH and must
        point at an existing file.

        Raises:
            ToolNotFoundError: If the tool cannot be found
        """
        if name in self.tools:
            path = Path(self.tools[name])
            if not path.is_file():
                raise ToolNotFoundError(
                    f"Tool '{name}' not found at {path}",
                    details={"tool": name, "path": str(path)},
                )
            return Tool(name, path)

        found = shutil.which(name)
        if found is None:
            raise ToolNotFoundError(f"Tool '{name}' not found", details={"tool": name})
        return Tool(name, Path(found))


@dataclass
class SourceModule:
    """Source files owned by a package target."""

    source_files: list[Path]


@dataclass
class PackageTarget:
    """Target of a package build."""

    name: str
    source_module: SourceModule | None = None


@dataclass
class ProjectTarget:
    """Target of an IDE project build."""

    display_name: str
    input_files: list[Path] = field(default_factory=list)


@dataclass
class BuildCommand:
    """A generator invocation plus its declared inputs and outputs."""

    display_name: str
    executable: Path
    arguments: list[str]
    environment: dict[str, str] = field(default_factory=dict)
    input_files: list[Path] = field(default_factory=list)
    output_files: list[Path] = field(default_factory=list)

    @property
    def command_line(self) -> list[str]:
        return [str(self.executable), *self.arguments]

    @property
    def stamp_file(self) -> Path | None:
        """Hidden file beside the first output holding the last command line."""
        if not self.output_files:
            return None
        output = self.output_files[0]
        return output.parent / f".{output.name}{STAMP_FILE_SUFFIX}"

    def record_command_line(self) -> None:
        """Store the command line after a successful run."""
        if self.stamp_file is not None:
            write_text_atomic(self.stamp_file, json.dumps(self.command_line) + "\n")

    def recorded_command_line(self) -> list[str] | None:
        """Command line stored by the last successful run, if any."""
        if self.stamp_file is None or not self.stamp_file.is_file():
            return None
        try:
            return json.loads(self.stamp_file.read_text(encoding="utf-8"))
        except ValueError:
            return None

    def is_up_to_date(self) -> bool:
        """
        True when the last run used the same command line and every output
        exists and is newer than every input.

        A changed command line covers renamed, added and removed fonts, which
        keep or lose their own modification times.
        """
        if not self.output_files:
            return False
        if not all(p.exists() for p in self.output_files):
            return False
        if not all(p.exists() for p in self.input_files):
            return False
        if self.recorded_command_line() != self.command_line:
            return False

        oldest_output = min(p.stat().st_mtime for p in self.output_files)
        newest_input = max((p.stat().st_mtime for p in self.input_files), default=0.0)
        return newest_input < oldest_output


def output_file_path(
    work_directory: Path, target_name: str, fmt: str = DEFAULT_FORMAT
) -> Path:
    """<workdir>/<target>/Generated/<target>GeneratedFonts.<ext>"""
    extension = get_serializer(fmt).extension
    return (
        work_directory
        / target_name
        / GENERATED_DIR_NAME
        / f"{target_name}{OUTPUT_FILE_SUFFIX}.{extension}"
    )


def font_build_command(
    context: PluginContext,
    target_name: str,
    candidate_files: list[Path],
    *,
    fmt: str = DEFAULT_FORMAT,
    case_sensitive: bool = True,
) -> BuildCommand:
    """
    Describe the generator invocation for one target.

    Creates the output directory as a side effect.

    Args:
        context: Plugin context supplied by the host
        target_name: Target name used for paths and messages
        candidate_files: All files declared by the target
        fmt: Output serializer name
        case_sensitive: Extension matching policy

    Returns:
        Build command for the host to run

    Raises:
        ToolNotFoundError: If the generator tool is unavailable
        MissingInputFilesError: If the target has no font files
    """
    generator = context.tool(GENERATOR_TOOL_NAME)

    input_files = filter_fonts(candidate_files, case_sensitive=case_sensitive)
    if not input_files:
        supported = ", ".join(FONT_EXTENSIONS)
        context.diagnostics.error(
            f"The target {target_name} does not contain any custom fonts in a "
            f"supported format. Supported formats are: {supported}."
        )
        raise MissingInputFilesError(
            f"No font files found in target {target_name}",
            details={"target": target_name},
        )

    output_file = output_file_path(context.work_directory, target_name, fmt)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    arguments = [str(output_file), *(str(p) for p in input_files)]

    logger.debug(f"{target_name}: {len(input_files)} font files -> {output_file}")

    return BuildCommand(
        display_name=DISPLAY_NAME_TEMPLATE.format(target=target_name),
        executable=generator.path,
        arguments=arguments,
        environment={},
        input_files=input_files,
        output_files=[output_file],
    )


def create_package_build_commands(
    context: PluginContext,
    target: PackageTarget,
    **options,
) -> list[BuildCommand]:
    """
    Build commands for a package target.

    Raises:
        MissingSourceModuleError: If the target has no source module
    """
    if target.source_module is None:
        context.diagnostics.error(
            f"The target {target.name} does not expose any source files."
        )
        raise MissingSourceModuleError(
            f"Target {target.name} has no source module",
            details={"target": target.name},
        )
    return [
        font_build_command(
            context, target.name, target.source_module.source_files, **options
        )
    ]


def create_project_build_commands(
    context: PluginContext,
    target: ProjectTarget,
    **options,
) -> list[BuildCommand]:
    """Build commands for an IDE project target."""
    return [
        font_build_command(context, target.display_name, target.input_files, **options)
    ]
