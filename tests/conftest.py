"""Shared pytest fixtures."""

import sys
from pathlib import Path

import pytest

from fontenum.plugin.discovery import PluginContext


@pytest.fixture
def font_dir(tmp_path):
    """Create a directory of mixed asset files."""
    directory = tmp_path / "Resources"
    directory.mkdir()
    for name in ("Roboto-Bold.ttf", "Open Sans.otf", "logo.png", "README.md"):
        (directory / name).write_bytes(b"")
    return directory


@pytest.fixture
def generator_script(tmp_path) -> Path:
    """Executable that runs fontenum-generator with the current interpreter."""
    if sys.platform == "win32":
        pytest.skip("shell script generator requires a POSIX shell")

    script = tmp_path / "bin" / "fontenum-generator"
    script.parent.mkdir()
    script.write_text(
        "#!/bin/sh\n"
        f'exec "{sys.executable}" -c '
        '"from fontenum.cli.main import generator; generator()" "$@"\n'
    )
    script.chmod(0o755)
    return script


@pytest.fixture
def plugin_context(tmp_path, generator_script) -> PluginContext:
    """Plugin context with a registered generator tool."""
    return PluginContext(
        tmp_path / "work", {"fontenum-generator": generator_script}
    )
