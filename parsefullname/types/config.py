"""
Configuration for full name parsing.

Holds the user-selectable options (case fixing, list size, word-list
directory) together with the precompiled regex patterns shared by the
parsing services.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from parsefullname.types.results import InvalidInputError

# A nickname is a quoted or bracketed span with whitespace on both sides,
# optionally followed by a comma. The closing whitespace is a lookahead so
# adjacent nicknames can share it.
NICKNAME_REGEX = (
    r"\s"
    r"(?:[‘’'](?P<single>[^‘’']+)[‘’']"
    r"|[“”\"](?P<double>[^“”\"]+)[“”\"]"
    r"|\[(?P<square>[^\]]+)\]"
    r"|\((?P<paren>[^)]+)\))"
    r",?(?=\s)"
)


class CaseFixMode(str, Enum):
    """When to normalize the capitalization of parsed fields."""

    ALWAYS = "always"
    NEVER = "never"
    SMART = "smart"

    @classmethod
    def coerce(cls, value: CaseFixMode | str) -> CaseFixMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(mode.value for mode in cls)
            raise InvalidInputError(f"invalid fix_case_mode {value!r}: expected one of {valid}") from None


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable parser configuration."""

    fix_case_mode: CaseFixMode = CaseFixMode.SMART
    use_long_lists: bool = False
    # None means the word lists bundled with the package
    data_dir: Path | None = None

    nickname_pattern: re.Pattern[str] = field(default=re.compile(NICKNAME_REGEX), repr=False, compare=False)
    whitespace_pattern: re.Pattern[str] = field(default=re.compile(r"\s+"), repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "fix_case_mode", CaseFixMode.coerce(self.fix_case_mode))
        if self.data_dir is not None:
            object.__setattr__(self, "data_dir", Path(self.data_dir))

    @classmethod
    def create_default(cls) -> NameParserConfig:
        return cls()

    def with_options(self, **changes) -> NameParserConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
