"""
Services package for full name parsing.

This package contains the service classes used by the name parser,
one per pipeline stage, plus the word-list provider.
"""

from parsefullname.services.affixes import AffixService
from parsefullname.services.assignment import AssignmentService
from parsefullname.services.casing import CaseFixingService
from parsefullname.services.joining import JoiningService
from parsefullname.services.nickname import NicknameService
from parsefullname.services.tokenization import NameTokens, TokenizationService
from parsefullname.services.word_lists import WordLists, WordListService
from parsefullname.types import CaseFixMode, InvalidInputError, NameParserConfig, NameResult, WordListError

__all__ = [
    # Services
    "AffixService",
    "AssignmentService",
    "CaseFixingService",
    "JoiningService",
    "NicknameService",
    "TokenizationService",
    "WordListService",
    # Data structures
    "NameTokens",
    "WordLists",
    # Types (re-exported for compatibility)
    "CaseFixMode",
    "InvalidInputError",
    "NameParserConfig",
    "NameResult",
    "WordListError",
]
