"""
Name assignment service for full name parsing.

Once affixes are gone and compounds are joined, the remaining tokens are
handed out: the last name first (its position depends on whether a comma
remains), then the first name, then everything else as the middle name.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsefullname.services.tokenization import NameTokens


class AssignmentService:
    """Service for assigning remaining tokens to last, first and middle names."""

    def __init__(self, config):
        self._config = config

    def extract_last_name(self, tokens: NameTokens, remaining_commas: int) -> str:
        """
        Remove and return the last name.

        Without commas the last token is the last name ("John Smith").
        With a comma, everything before it is ("Van Gogh, Vincent").
        """
        if not tokens:
            return ""

        if remaining_commas == 0:
            return tokens.remove(len(tokens) - 1)

        comma_index = tokens.first_comma_index()
        if comma_index <= 0:
            return ""

        last_name = " ".join(tokens.parts[:comma_index])
        del tokens.parts[:comma_index]
        del tokens.commas[:comma_index]
        return last_name

    def assign_given_names(self, tokens: NameTokens) -> tuple[str, str]:
        """Return ``(first_name, middle_name)`` from whatever tokens remain."""
        if not tokens:
            return "", ""

        first_name = tokens.remove(0)
        middle_name = " ".join(tokens.parts)
        tokens.parts.clear()
        tokens.commas.clear()
        return first_name, middle_name
