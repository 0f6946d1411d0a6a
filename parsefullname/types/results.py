"""
Result types for full name parsing.

This module contains the immutable result record produced by the parser and
the exceptions raised for rejected input.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar


class InvalidInputError(ValueError):
    """Raised when a parse is requested with a blank name or an unknown option."""


class WordListError(ValueError):
    """Raised when a word-list source is missing or malformed."""


@dataclass(frozen=True)
class NameResult:
    """Parsed name components - every field is always a string, possibly empty."""

    FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "first_name",
        "middle_name",
        "last_name",
        "suffix",
        "nickname",
    )

    title: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    suffix: str = ""
    nickname: str = ""

    def transform(self, f: Callable[[str, str], str]) -> NameResult:
        """
        Build a new result by applying ``f(field, value)`` to every field.

        The original result is left untouched:

            >>> name = NameResult(first_name="Pete", last_name="Mitchell", nickname="Maverick")
            >>> name.transform(lambda field, value: value if field == "nickname" else value.upper())
            NameResult(title='', first_name='PETE', middle_name='', last_name='MITCHELL', suffix='', nickname='Maverick')
        """
        return NameResult(**{field: f(field, getattr(self, field)) for field in self.FIELDS})

    def to_dict(self) -> dict[str, str]:
        return {field: getattr(self, field) for field in self.FIELDS}

    @property
    def full_name(self) -> str:
        """Title, given names, last name and suffix joined back together (nickname excluded)."""
        parts = (self.title, self.first_name, self.middle_name, self.last_name, self.suffix)
        return " ".join(part for part in parts if part)
