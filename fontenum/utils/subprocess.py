"""
Subprocess execution utilities with consistent error handling.
"""

import os
import subprocess
import sys
from collections.abc import Mapping

from fontenum.utils.logging import logger


def run_command(
    cmd: list[str],
    description: str | None = None,
    exit_on_error: bool = True,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess:
    """
    Run a subprocess command with consistent logging and error handling.

    Args:
        cmd: Command and arguments to run
        description: Optional description for logging
        exit_on_error: Whether to exit on failure (default True)
        env: Environment overrides applied on top of the current environment

    Returns:
        CompletedProcess result

    Raises:
        SystemExit: If exit_on_error is True and command fails
        CalledProcessError: If exit_on_error is False and command fails
    """
    if description:
        logger.info(description)

    full_env = {**os.environ, **env} if env else None

    try:
        result = subprocess.run(
            cmd, check=True, capture_output=True, text=True, env=full_env
        )
        if result.stdout:
            logger.debug(result.stdout)
        if result.stderr:
            logger.debug(result.stderr)
        return result
    except subprocess.CalledProcessError as e:
        logger.error(f"Command failed: {' '.join(cmd)}")
        if e.stderr:
            logger.error(e.stderr)
        if exit_on_error:
            sys.exit(1)
        raise
