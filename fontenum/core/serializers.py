"""
Text serializers for generated font enums.

Each serializer turns a FontEnum into the source text of one target consumer.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from fontenum.core.models import FontEnum

INDENT = "    "

# Characters that must be escaped inside a Swift string literal
SWIFT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def swift_string(value: str) -> str:
    """Quote value as a Swift string literal."""
    return '"' + "".join(SWIFT_ESCAPES.get(c, c) for c in value) + '"'


def to_swift(font_enum: FontEnum) -> str:
    """Swift enum with String raw values."""
    lines = [f"enum {font_enum.name}: String {{"]
    lines.extend(
        f"{INDENT}case {case.identifier_name} = {swift_string(case.raw_value)}"
        for case in font_enum.cases
    )
    lines.append("}")
    return "\n".join(lines)


def to_json(font_enum: FontEnum) -> str:
    """JSON object of identifier to raw value, in case order."""
    return json.dumps(font_enum.mapping, indent=2, ensure_ascii=False) + "\n"


@dataclass(frozen=True)
class Serializer:
    """Output format registration."""

    name: str
    extension: str
    render: Callable[[FontEnum], str]


SERIALIZERS = {
    "swift": Serializer("swift", "swift", to_swift),
    "json": Serializer("json", "json", to_json),
}
DEFAULT_FORMAT = "swift"


def get_serializer(name: str = DEFAULT_FORMAT) -> Serializer:
    """Look up a serializer by format name."""
    try:
        return SERIALIZERS[name]
    except KeyError:
        supported = ", ".join(sorted(SERIALIZERS))
        raise ValueError(
            f"Unknown format {name!r}. Supported formats are: {supported}"
        ) from None


def serializer_for_path(path: str | Path) -> Serializer:
    """Serializer matching the output file extension, Swift when unknown."""
    extension = Path(path).suffix.lstrip(".")
    for serializer in SERIALIZERS.values():
        if serializer.extension == extension:
            return serializer
    return SERIALIZERS[DEFAULT_FORMAT]
