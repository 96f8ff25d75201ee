"""
Build command execution.

Plays the host build system's part when the plugin is driven from the CLI:
skips commands whose declared outputs are current and runs the rest in order.
"""

import subprocess

from fontenum.core.exceptions import GeneratorFailedError
from fontenum.plugin.discovery import BuildCommand
from fontenum.utils.logging import logger
from fontenum.utils.subprocess import run_command


def run_build_command(command: BuildCommand, *, force: bool = False) -> bool:
    """
    Run one build command unless its outputs are up to date.

    Args:
        command: Command produced by the plugin
        force: Run even when outputs are newer than inputs

    Returns:
        True if the generator ran, False if it was skipped

    Raises:
        GeneratorFailedError: If the generator exits with a nonzero status
    """
    if not force and command.is_up_to_date():
        logger.info(f"{command.display_name}: up to date")
        return False

    try:
        run_command(
            command.command_line,
            command.display_name,
            exit_on_error=False,
            env=command.environment,
        )
    except subprocess.CalledProcessError as e:
        raise GeneratorFailedError(
            f"{command.display_name} failed with exit status {e.returncode}",
            details={"stderr": e.stderr},
        ) from e
    except OSError as e:
        raise GeneratorFailedError(
            f"{command.display_name} could not start {command.executable}: {e}",
            details={"executable": str(command.executable)},
        ) from e

    command.record_command_line()
    for output in command.output_files:
        logger.info(f"Generated {output}")
    return True


def run_build_commands(commands: list[BuildCommand], *, force: bool = False) -> int:
    """
    Run build commands in order, stopping at the first failure.

    Returns:
        Number of commands that ran
    """
    ran = 0
    for i, command in enumerate(commands, 1):
        logger.info(f"[{i}/{len(commands)}] {command.display_name}")
        if run_build_command(command, force=force):
            ran += 1

    logger.info(f"{ran} of {len(commands)} commands ran, {len(commands) - ran} up to date")
    return ran
