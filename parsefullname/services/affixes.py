"""
Affix extraction service for full name parsing.

This module recognizes titles ("Mr.", "Dr.") and suffixes ("Jr.", "III")
from the word lists, and applies the comma heuristic that picks up runs of
unlisted suffixes such as "Smithe, CLU, CFP, LC".
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsefullname.services.tokenization import NameTokens
    from parsefullname.services.word_lists import WordLists

AFFIX_KINDS = ("suffix", "title")


class AffixService:
    """Service for removing known and comma-delimited affixes from name tokens."""

    def __init__(self, config, word_lists: WordLists):
        self._config = config
        self._word_lists = word_lists

    def extract(self, tokens: NameTokens, kind: str) -> str:
        """
        Remove every token found in the suffix or title list and return them joined by ", ".

        Tokens are scanned from the end. Suffixes never consume the first
        token, which must stay available as a first name.
        """
        if kind == "suffix":
            start_index, known = 1, self._word_lists.suffixes
        elif kind == "title":
            start_index, known = 0, self._word_lists.titles
        else:
            raise ValueError(f"invalid affix kind {kind!r}: expected one of {', '.join(AFFIX_KINDS)}")

        found = []
        for i in range(len(tokens) - 1, start_index - 1, -1):
            if not self.is_listed(tokens.parts[i], known):
                continue

            found.insert(0, tokens.parts.pop(i))
            if tokens.commas[i]:
                # The comma before the affix now separates its neighbours
                del tokens.commas[i + 1]
            else:
                del tokens.commas[i]

        # Nothing can precede the first token, e.g. after "Dr., John Smith"
        tokens.commas[0] = False
        return ", ".join(found)

    def extract_extra_suffixes(self, tokens: NameTokens) -> tuple[str, int]:
        """
        Remove trailing comma-separated tokens that are not in any list.

        Returns the removed suffixes joined by ", " and the number of commas
        still present, which decides how the last name is found.
        """
        tokens.drop_trailing_comma()
        first_comma = tokens.first_comma_index()
        remaining_commas = tokens.comma_count()

        found = []
        if first_comma > 1 or remaining_commas > 1:
            for i in range(len(tokens) - 1, 1, -1):
                if not tokens.commas[i]:
                    break
                found.insert(0, tokens.remove(i))
                remaining_commas -= 1

        return ", ".join(found), remaining_commas

    @staticmethod
    def is_listed(word: str, known: frozenset[str]) -> bool:
        """Match with or without one trailing period, ignoring case."""
        part = word[:-1].lower() if word.endswith(".") else word.lower()
        return part in known or f"{part}." in known
