"""
parsefullname: Full Name Parsing Library

Splits free-text personal names such as "Mr. John E. (Johnny) Smithe, Jr."
into title, first, middle and last names, suffix and nickname.
"""

__version__ = "0.1.0"

__all__ = ["CaseFixMode", "InvalidInputError", "NameParser", "NameParserConfig", "NameResult", "parse"]


def parse(name, fix_case_mode="smart", use_long_lists=False, word_lists=None):
    """
    Parse a full name in a variety of formats.

    Args:
        name: Name to be parsed
        fix_case_mode: "always", "never" or "smart"
        use_long_lists: Use the longer lists for prefixes, suffixes and titles
        word_lists: Optional WordListService supplying all word lists

    Returns:
        NameResult with all six fields set
    """
    from parsefullname.parser import NameParser
    from parsefullname.types import NameParserConfig

    config = NameParserConfig(fix_case_mode=fix_case_mode, use_long_lists=use_long_lists)
    return NameParser(config, word_list_service=word_lists).parse(name)


def __getattr__(name):
    """Lazy import to keep `import parsefullname` cheap."""
    if name == "NameParser":
        from parsefullname.parser import NameParser
        return NameParser
    if name in ("CaseFixMode", "InvalidInputError", "NameParserConfig", "NameResult"):
        from parsefullname import types
        return getattr(types, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
