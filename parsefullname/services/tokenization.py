"""
Tokenization service for full name parsing.

Splits a name into word tokens while remembering where the commas were.
Comma positions drive several later decisions (suffix lists, "Last, First"
ordering), so they are tracked in a list that moves in lock-step with the
tokens.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NameTokens:
    """
    Mutable working state for one parse call.

    ``commas[i]`` is True when a comma separates ``parts[i - 1]`` from
    ``parts[i]``; ``commas[0]`` is always False and the final slot
    ``commas[len(parts)]`` records a comma after the last token. Until the
    trailing slot is dropped, ``len(commas) == len(parts) + 1``.
    """

    parts: list[str] = field(default_factory=list)
    commas: list[bool] = field(default_factory=lambda: [False])

    def __len__(self) -> int:
        return len(self.parts)

    def __bool__(self) -> bool:
        return bool(self.parts)

    def remove(self, index: int) -> str:
        """Remove the token at ``index`` and the comma slot in front of it."""
        del self.commas[index]
        return self.parts.pop(index)

    def merge(self, index: int, count: int) -> None:
        """Space-join ``count`` tokens starting at ``index`` into one token."""
        self.parts[index] = " ".join(self.parts[index : index + count])
        del self.parts[index + 1 : index + count]
        del self.commas[index + 1 : index + count]

    def drop_trailing_comma(self) -> None:
        if len(self.commas) > len(self.parts):
            self.commas.pop()

    def first_comma_index(self) -> int:
        return self.commas.index(True) if True in self.commas else -1

    def comma_count(self) -> int:
        return sum(self.commas)


class TokenizationService:
    """Service for splitting names into tokens with comma tracking."""

    def __init__(self, config):
        self._config = config

    def split_with_commas(self, name: str) -> NameTokens:
        tokens = NameTokens()
        for raw in self._config.whitespace_pattern.split(name.strip()):
            if not raw:
                continue
            if raw == ",":
                # A detached comma belongs to the token before it
                if tokens.parts:
                    tokens.commas[-1] = True
                continue

            has_comma = raw.endswith(",")
            tokens.parts.append(raw[:-1] if has_comma else raw)
            tokens.commas.append(has_comma)
        return tokens
