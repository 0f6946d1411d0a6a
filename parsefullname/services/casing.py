"""
Case fixing service for full name parsing.

Names typed in all capitals or all lower case ("JOHN SMITHE, JR.") are
recapitalized word by word. Mixed-case input is trusted as typed unless the
caller asks for fixing unconditionally.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from parsefullname.types import CaseFixMode

if TYPE_CHECKING:
    from parsefullname.services.word_lists import WordLists
    from parsefullname.types import NameResult


class CaseFixingService:
    """Service for normalizing the capitalization of parsed name fields."""

    def __init__(self, config, word_lists: WordLists):
        self._config = config
        self._word_lists = word_lists
        self._forced = {word.lower(): word for word in word_lists.force_case_words}

    def should_fix(self, raw_name: str) -> bool:
        mode = self._config.fix_case_mode
        if mode is CaseFixMode.ALWAYS:
            return True
        if mode is CaseFixMode.SMART:
            return raw_name == raw_name.upper() or raw_name == raw_name.lower()
        return False

    def apply(self, parsed: NameResult, raw_name: str) -> NameResult:
        if not self.should_fix(raw_name):
            return parsed
        return parsed.transform(self.fix_field)

    def fix_field(self, field: str, value: str) -> str:
        return " ".join(self.fix_word(word, is_suffix=field == "suffix") for word in value.split())

    def fix_word(self, word: str, is_suffix: bool = False) -> str:
        # Suffix lists are joined with ", "
        if len(word) > 1 and word.endswith(","):
            return self.fix_word(word[:-1], is_suffix) + ","

        forced = self._forced.get(word.lower())
        if forced is not None:
            return forced

        # Initials
        if len(word) == 1:
            return word.upper()

        # McCASE -> McCase
        if self.is_mc_case(word):
            return word[:3] + word[3:].lower()

        if is_suffix and not word.endswith(".") and word.lower() not in self._word_lists.suffixes:
            # Unlisted suffixes are usually abbreviations ("clu" -> "CLU")
            return word.upper() if word == word.lower() else word

        return word[0].upper() + word[1:].lower()

    @staticmethod
    def is_mc_case(word: str) -> bool:
        return (
            len(word) > 2
            and word[0] == word[0].upper()
            and word[1] == word[1].lower()
            and word[2:] == word[2:].upper()
        )
