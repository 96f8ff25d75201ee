"""
Generated enum data model.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fontenum.config.paths import ENUM_NAME
from fontenum.core.naming import FontCase, check_unique, font_case


@dataclass
class FontEnum:
    """Ordered font cases under a single enum name."""

    cases: list[FontCase] = field(default_factory=list)
    name: str = ENUM_NAME

    @classmethod
    def from_paths(cls, paths: Iterable[str | Path], name: str = ENUM_NAME) -> "FontEnum":
        """
        Build an enum from font file paths, keeping input order.

        Every case is derived before uniqueness is checked, so a bad path or a
        collision fails the whole set.
        """
        cases = [font_case(path) for path in paths]
        check_unique(cases)
        return cls(cases, name)

    @property
    def mapping(self) -> dict[str, str]:
        """Identifier to raw value, in case order."""
        return {case.identifier_name: case.raw_value for case in self.cases}

    def __len__(self) -> int:
        return len(self.cases)
