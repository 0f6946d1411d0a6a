"""
Token joining service for full name parsing.

Compound last names are rebuilt here: prefixes ("van", "de") are glued to
the following word and conjunctions ("y", "and") glue their neighbours
together, so "de Lorenzo y Gutierez" ends up as a single token.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsefullname.services.tokenization import NameTokens
    from parsefullname.services.word_lists import WordLists


class JoiningService:
    """Service for merging prefixes and conjunctions into compound tokens."""

    def __init__(self, config, word_lists: WordLists):
        self._config = config
        self._word_lists = word_lists

    def join_prefixes(self, tokens: NameTokens) -> None:
        if len(tokens) <= 1:
            return

        # Walk backwards so "van der Berg" collapses right to left
        for i in range(len(tokens) - 2, -1, -1):
            if tokens.parts[i].lower() in self._word_lists.prefixes:
                tokens.merge(i, 2)

    def join_conjunctions(self, tokens: NameTokens) -> None:
        if len(tokens) <= 2:
            return

        i = len(tokens) - 3
        while i >= 0:
            if tokens.parts[i + 1].lower() in self._word_lists.conjunctions:
                tokens.merge(i, 3)
                i -= 1  # skip the word that was just absorbed
            i -= 1
