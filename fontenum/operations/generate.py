"""
Generator operation.

Turns a list of font file paths into one enum source file.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fontenum.core.exceptions import InvalidArgumentsError
from fontenum.core.font_io import write_text_atomic
from fontenum.core.models import FontEnum
from fontenum.core.serializers import get_serializer, serializer_for_path
from fontenum.utils.logging import logger


@dataclass(frozen=True)
class GeneratorArguments:
    """Validated generator command-line arguments."""

    output_path: Path
    input_paths: list[Path]

    @classmethod
    def parse(cls, args: Sequence[str]) -> "GeneratorArguments":
        """
        Parse arguments after the program name.

        Args:
            args: Output path followed by one or more input paths

        Raises:
            InvalidArgumentsError: If no input path is given
        """
        if len(args) < 2:
            raise InvalidArgumentsError(
                "Usage: fontenum-generator <outputPath> <inputPath>...",
                details={"arguments": list(args)},
            )
        if not args[0]:
            raise InvalidArgumentsError("Output path must not be empty")
        return cls(Path(args[0]), [Path(a) for a in args[1:]])


def generate(
    output_path: Path,
    input_paths: Sequence[str | Path],
    fmt: str | None = None,
) -> FontEnum:
    """
    Generate the font enum file.

    All cases are derived before anything is written; a single bad input
    leaves no output behind.

    Args:
        output_path: Destination file
        input_paths: Font files, in case order
        fmt: Serializer name ("swift" or "json"), by default chosen from
            the output file extension

    Returns:
        The generated enum

    Raises:
        InvalidArgumentsError: If there are no inputs or a path has no filename
        ConfigurationError: On empty or duplicate identifiers
    """
    if not input_paths:
        raise InvalidArgumentsError("At least one input font file is required")

    serializer = get_serializer(fmt) if fmt else serializer_for_path(output_path)
    font_enum = FontEnum.from_paths(input_paths)
    text = serializer.render(font_enum)

    write_text_atomic(Path(output_path), text)
    logger.info(f"Wrote {len(font_enum)} cases to {output_path}")
    return font_enum


def generate_from_args(args: Sequence[str], fmt: str | None = None) -> FontEnum:
    """Generate from raw generator arguments (output path first)."""
    parsed = GeneratorArguments.parse(args)
    return generate(parsed.output_path, parsed.input_paths, fmt)
