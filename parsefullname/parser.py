"""
Full Name Parsing Module

This module splits a free-text personal name into its title, first, middle
and last names, suffix and nickname.

## Overview

The core functionality is provided by the `NameParser` class, which runs a
fixed sequence of rule-based stages over the tokenized name:

1. **Nickname Extraction**: Quoted or bracketed spans (`"Slash"`, `(Johnny)`)
2. **Tokenization**: Whitespace split, remembering which tokens ended in a comma
3. **Suffix Extraction**: Known suffixes such as `Jr.` or `III`
4. **Title Extraction**: Known titles such as `Mr.` or `Dr.`
5. **Prefix Joining**: `Van Gogh`, `de la Cruz`
6. **Conjunction Joining**: `Lorenzo y Gutierez`
7. **Extra Suffixes**: Comma-separated runs of unlisted suffixes (`CLU, CFP`)
8. **Last Name**: Final token, or everything before the comma in `Last, First`
9. **First/Middle Names**: Whatever is left, in order
10. **Case Fixing**: Recapitalize all-upper or all-lower input

Whenever a stage consumes the last remaining token, the parser skips straight
to case fixing.

## Usage Examples

```python
parser = NameParser()
parser.parse("Mr. John E. (Johnny) Smithe, Jr.")
# Returns: NameResult(title="Mr.", first_name="John", middle_name="E.",
#                     last_name="Smithe", suffix="Jr.", nickname="Johnny")

parser.parse("Van Gogh, Vincent").last_name
# Returns: "Van Gogh"

# Never touch capitalization
config = NameParserConfig(fix_case_mode="never")
NameParser(config).parse("JOHN SMITHE").first_name
# Returns: "JOHN"
```

## Error Handling

Only two inputs are rejected, both with `InvalidInputError`:
- a blank name
- an unknown case-fix mode

Every other input produces a best-effort `NameResult`; there is no
confidence score.

## Thread Safety

Word lists are frozen sets shared read-only. Each `parse` call builds its
own token state, so one parser can be used from several threads.
"""
from __future__ import annotations

from functools import cache

from parsefullname.paths import logger
from parsefullname.services import (
    AffixService,
    AssignmentService,
    CaseFixingService,
    InvalidInputError,
    JoiningService,
    NameParserConfig,
    NameResult,
    NicknameService,
    TokenizationService,
    WordLists,
    WordListService,
)


@cache  # one provider per data directory
def default_word_list_service(data_dir=None) -> WordListService:
    return WordListService(data_dir)


# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME PARSER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class NameParser:
    """Main full name parsing service."""

    def __init__(
        self,
        config: NameParserConfig | None = None,
        word_list_service: WordListService | None = None,
    ):
        self._config = config or NameParserConfig.create_default()
        self._word_list_service = word_list_service or default_word_list_service(self._config.data_dir)
        self._word_lists: WordLists = self._word_list_service.word_lists(self._config.use_long_lists)

        self._nickname_service = NicknameService(self._config)
        self._tokenization_service = TokenizationService(self._config)
        self._affix_service = AffixService(self._config, self._word_lists)
        self._joining_service = JoiningService(self._config, self._word_lists)
        self._assignment_service = AssignmentService(self._config)
        self._casing_service = CaseFixingService(self._config, self._word_lists)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    @property
    def word_lists(self) -> WordLists:
        return self._word_lists

    def parse(self, raw_name: str) -> NameResult:
        """
        Main API method: split a full name into its parts.

        Raises InvalidInputError for a blank name; otherwise always returns a
        NameResult with all six fields set (possibly to "").
        """
        if raw_name is None or not str(raw_name).strip():
            raise InvalidInputError("name is required")
        raw_name = str(raw_name)

        fields = self._parse_fields(raw_name)
        logger.debug(f"Parsed {raw_name!r} into {fields}")
        return self._casing_service.apply(NameResult(**fields), raw_name)

    def _parse_fields(self, raw_name: str) -> dict[str, str]:
        fields: dict[str, str] = {}

        nickname, name = self._nickname_service.extract(raw_name)
        fields["nickname"] = nickname
        if not name:
            return fields

        tokens = self._tokenization_service.split_with_commas(name)

        fields["suffix"] = self._affix_service.extract(tokens, "suffix")
        if not tokens:
            return fields

        fields["title"] = self._affix_service.extract(tokens, "title")
        if not tokens:
            return fields

        self._joining_service.join_prefixes(tokens)
        self._joining_service.join_conjunctions(tokens)
        logger.debug(f"Joined tokens: {tokens.parts}")

        extra_suffix, remaining_commas = self._affix_service.extract_extra_suffixes(tokens)
        fields["suffix"] = ", ".join(part for part in (fields["suffix"], extra_suffix) if part)

        fields["last_name"] = self._assignment_service.extract_last_name(tokens, remaining_commas)
        if not tokens:
            return fields

        fields["first_name"], fields["middle_name"] = self._assignment_service.assign_given_names(tokens)
        return fields
