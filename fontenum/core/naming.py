"""
Filename to identifier naming utilities.
"""

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from fontenum.core.exceptions import (
    DuplicateIdentifierError,
    EmptyIdentifierError,
    InvalidArgumentsError,
)

# Characters dropped when turning a filename into an identifier
STRIPPED_CHARACTERS = ("-", " ")


@dataclass(frozen=True)
class FontCase:
    """One enum case derived from a font file."""

    identifier_name: str  # e.g., "robotoBold"
    raw_value: str  # e.g., "Roboto-Bold"
    source: Path | None = None


def base_name(path: str | Path) -> str:
    """
    Filename with its final extension removed.

    Args:
        path: Font file path

    Returns:
        Base filename, directories discarded

    Raises:
        InvalidArgumentsError: If the path has no filename component
    """
    raw = str(path)
    if not raw or raw.endswith(("/", "\\")):
        raise InvalidArgumentsError(f"Cannot parse a filename from {raw!r}")

    name = Path(raw).name
    if not name or name in (".", ".."):
        raise InvalidArgumentsError(f"Cannot parse a filename from {raw!r}")

    # ".ttf" has an empty base name
    dot = name.rfind(".")
    return name[:dot] if dot >= 0 else name


def identifier_name(name: str) -> str:
    """
    Identifier for a base filename.

    Hyphens and spaces are removed, then the first character is lowercased.
    """
    for char in STRIPPED_CHARACTERS:
        name = name.replace(char, "")
    return name[:1].lower() + name[1:]


def font_case(path: str | Path) -> FontCase:
    """
    Build the enum case for a font file.

    Raises:
        InvalidArgumentsError: If the path has no filename component
        EmptyIdentifierError: If the filename leaves no identifier characters
    """
    raw_value = base_name(path)
    identifier = identifier_name(raw_value)
    if not identifier:
        raise EmptyIdentifierError(
            f"Font file {str(path)!r} does not produce a valid identifier",
            details={"path": str(path)},
        )
    return FontCase(identifier, raw_value, Path(path))


def find_duplicates(cases: list[FontCase]) -> dict[str, list[Path | None]]:
    """Map each identifier used more than once to its source files."""
    sources: dict[str, list[Path | None]] = defaultdict(list)
    for case in cases:
        sources[case.identifier_name].append(case.source)
    return {name: paths for name, paths in sources.items() if len(paths) > 1}


def check_unique(cases: list[FontCase]) -> None:
    """
    Fail when several font files map to the same identifier.

    Raises:
        DuplicateIdentifierError: Listing every colliding identifier
    """
    duplicates = find_duplicates(cases)
    if not duplicates:
        return

    lines = [
        f"{name}: {', '.join(str(p) for p in paths)}"
        for name, paths in duplicates.items()
    ]
    raise DuplicateIdentifierError(
        "Font files produce duplicate identifiers:\n  " + "\n  ".join(lines),
        details=duplicates,
    )
