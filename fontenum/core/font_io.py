"""
Font file I/O utilities for filtering inputs and writing generated output.
"""

import os
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from fontenum.config.paths import FONT_EXTENSIONS


def has_font_extension(path: str | Path, *, case_sensitive: bool = True) -> bool:
    """
    Check whether a filename ends in a supported font extension.

    Args:
        path: File path; only the last component is inspected
        case_sensitive: Match ".TTF" as well when False

    Returns:
        True for .ttf and .otf files
    """
    name = Path(path).name
    if case_sensitive:
        return name.endswith(FONT_EXTENSIONS)
    return name.lower().endswith(FONT_EXTENSIONS)


def filter_fonts(
    paths: Iterable[Path],
    *,
    case_sensitive: bool = True,
) -> list[Path]:
    """
    Keep font files, preserving input order.

    Args:
        paths: Candidate file paths
        case_sensitive: Extension matching policy

    Returns:
        Paths with a supported font extension
    """
    return [p for p in paths if has_font_extension(p, case_sensitive=case_sensitive)]


def iter_files(directory: Path) -> Iterator[Path]:
    """Iterate over all regular files below directory, sorted by path."""
    return iter(sorted(p for p in directory.rglob("*") if p.is_file()))


@contextmanager
def atomic_output(path: Path) -> Iterator[Path]:
    """
    Context manager yielding a temporary path that replaces path on success.

    The temporary file lives next to the destination so the final rename stays
    on one filesystem. On error it is removed and path is left untouched.

    Args:
        path: Final output path

    Yields:
        Temporary file path to write to
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    os.close(fd)
    # mkstemp creates 0600 files
    os.chmod(tmp_name, 0o644)
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def write_text_atomic(path: Path, text: str) -> None:
    """Write UTF-8 text (no BOM) to path in a single atomic replace."""
    with atomic_output(path) as tmp_path:
        tmp_path.write_bytes(text.encode("utf-8"))
