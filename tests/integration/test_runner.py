"""Tests for running build commands as the host build system."""

import pytest

from fontenum.core.exceptions import GeneratorFailedError
from fontenum.pipeline.runner import run_build_command, run_build_commands
from fontenum.plugin.discovery import (
    BuildCommand,
    ProjectTarget,
    create_project_build_commands,
)


def test_run_build_commands(plugin_context, font_dir):
    """Test commands run and produce their declared outputs."""
    target = ProjectTarget("App", sorted(font_dir.iterdir()))
    commands = create_project_build_commands(plugin_context, target)

    assert run_build_commands(commands) == 1
    assert commands[0].output_files[0].exists()


def test_run_build_command_force(plugin_context, font_dir):
    """Test force reruns an up-to-date command."""
    target = ProjectTarget("App", sorted(font_dir.iterdir()))
    [command] = create_project_build_commands(plugin_context, target)

    assert run_build_command(command)
    assert run_build_command(command, force=True)


def test_run_build_command_failure(plugin_context, tmp_path):
    """Test a failing generator raises GeneratorFailedError."""
    command = BuildCommand(
        "Generating Font Definitions For App",
        plugin_context.tool("fontenum-generator").path,
        [str(tmp_path / "out.swift")],
        output_files=[tmp_path / "out.swift"],
    )
    with pytest.raises(GeneratorFailedError):
        run_build_command(command)
    assert not (tmp_path / "out.swift").exists()


def test_run_build_command_records_command_line(plugin_context, font_dir):
    """Test a successful run stores its command line beside the output."""
    target = ProjectTarget("App", sorted(font_dir.iterdir()))
    [command] = create_project_build_commands(plugin_context, target)

    run_build_command(command)

    assert command.stamp_file.parent == command.output_files[0].parent
    assert command.recorded_command_line() == command.command_line


def test_run_build_command_unstartable_executable(tmp_path):
    """Test an executable that cannot be started raises GeneratorFailedError."""
    command = BuildCommand(
        "Generating Font Definitions For App",
        tmp_path / "missing-generator",
        [str(tmp_path / "out.swift"), "Roboto.ttf"],
        output_files=[tmp_path / "out.swift"],
    )
    with pytest.raises(GeneratorFailedError):
        run_build_command(command)
    assert command.recorded_command_line() is None
