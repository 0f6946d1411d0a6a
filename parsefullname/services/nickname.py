"""
Nickname extraction service for full name parsing.
"""
from __future__ import annotations


class NicknameService:
    """Finds quoted or bracketed nicknames and removes them from the name."""

    def __init__(self, config):
        self._config = config

    def extract(self, name: str) -> tuple[str, str]:
        """
        Return ``(nickname, remaining_name)``.

        Every span such as ``"Slash"``, ``'Bud'``, ``[Al]`` or ``(Johnny)``
        surrounded by whitespace is collected and replaced by a single space.
        Several nicknames are joined with ", " in the order they appear.
        """
        nicknames = []

        def _collect(match) -> str:
            body = next(group for group in match.groups() if group is not None)
            nickname = body.strip().removesuffix(",").strip()
            if nickname:
                nicknames.append(nickname)
            return " "

        remaining = self._config.nickname_pattern.sub(_collect, f" {name} ")
        return ", ".join(nicknames), remaining.strip()
