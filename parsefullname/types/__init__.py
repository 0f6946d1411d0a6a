"""
Types package for full name parsing.

This package contains the result record, configuration classes and
exceptions used throughout the parser.
"""

from parsefullname.types.config import CaseFixMode, NameParserConfig
from parsefullname.types.results import InvalidInputError, NameResult, WordListError

__all__ = [
    "CaseFixMode",
    "InvalidInputError",
    "NameParserConfig",
    "NameResult",
    "WordListError",
]
