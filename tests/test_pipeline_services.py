"""
Pipeline Services Test Suite

Unit tests for the individual parsing stages:
- Nickname extraction
- Tokenization with comma tracking
- Suffix and title extraction
- Prefix and conjunction joining
- Last, first and middle name assignment
"""

import pytest

from parsefullname import NameParserConfig
from parsefullname.services import (
    AffixService,
    AssignmentService,
    JoiningService,
    NameTokens,
    NicknameService,
    TokenizationService,
)

CONFIG = NameParserConfig()


def _split(name: str) -> NameTokens:
    return TokenizationService(CONFIG).split_with_commas(name)


def _assert_aligned(tokens: NameTokens) -> None:
    assert len(tokens.commas) == len(tokens.parts) + 1
    assert tokens.commas[0] is False


# ---------- nickname ----------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('Saul "Slash" Hudson', ("Slash", "Saul  Hudson")),
        ("(Johnny)", ("Johnny", "")),
        ("Saul Hudson", ("", "Saul Hudson")),
        ('A "B" (C) [D] Z', ("B, C, D", "A    Z")),
        ("Conan O'Brien", ("", "Conan O'Brien")),
        ("John (Jack,) Smith", ("Jack", "John  Smith")),
        ("John () Smith", ("", "John () Smith")),
    ],
)
def test_nickname_extraction(raw, expected):
    assert NicknameService(CONFIG).extract(raw) == expected


# ---------- tokenization ----------


def test_split_tracks_commas():
    tokens = _split("Smithe, John, CLU")
    assert tokens.parts == ["Smithe", "John", "CLU"]
    assert tokens.commas == [False, True, True, False]


def test_split_detached_and_trailing_commas():
    assert _split("Smith , John").commas == [False, True, False]
    assert _split("Smith,").commas == [False, True]
    assert _split(", Smith").parts == ["Smith"]


def test_split_collapses_whitespace():
    tokens = _split("  a \t  b\n")
    assert tokens.parts == ["a", "b"]
    _assert_aligned(tokens)


def test_name_tokens_helpers():
    tokens = _split("Smithe, John, CLU")
    assert tokens.first_comma_index() == 1
    assert tokens.comma_count() == 2
    tokens.drop_trailing_comma()
    assert len(tokens.commas) == len(tokens.parts)
    tokens.drop_trailing_comma()
    assert len(tokens.commas) == len(tokens.parts)
    assert NameTokens().first_comma_index() == -1


# ---------- affixes ----------


def test_suffix_extraction_keeps_commas_aligned(word_lists):
    tokens = _split("Sammy Davis, Jr.")
    assert AffixService(CONFIG, word_lists).extract(tokens, "suffix") == "Jr."
    assert tokens.parts == ["Sammy", "Davis"]
    assert tokens.commas == [False, False, True]
    _assert_aligned(tokens)


def test_suffix_before_comma_moves_the_comma(word_lists):
    tokens = _split("Davis Jr., Sammy")
    assert AffixService(CONFIG, word_lists).extract(tokens, "suffix") == "Jr."
    assert tokens.parts == ["Davis", "Sammy"]
    assert tokens.commas == [False, True, False]


def test_suffix_never_takes_first_token(word_lists):
    tokens = _split("Jr.")
    assert AffixService(CONFIG, word_lists).extract(tokens, "suffix") == ""
    assert tokens.parts == ["Jr."]


def test_multiple_affixes_keep_their_order(word_lists):
    service = AffixService(CONFIG, word_lists)
    tokens = _split("Prof. Dr. Hans Schmidt Jr. III")
    assert service.extract(tokens, "suffix") == "Jr., III"
    assert service.extract(tokens, "title") == "Prof., Dr."
    assert tokens.parts == ["Hans", "Schmidt"]
    _assert_aligned(tokens)


def test_title_followed_by_comma(word_lists):
    tokens = _split("Dr., John Smith")
    assert AffixService(CONFIG, word_lists).extract(tokens, "title") == "Dr."
    assert tokens.parts == ["John", "Smith"]
    assert tokens.commas == [False, False, False]


def test_title_can_consume_every_token(word_lists):
    tokens = _split("Dr.")
    assert AffixService(CONFIG, word_lists).extract(tokens, "title") == "Dr."
    assert not tokens


def test_invalid_affix_kind(word_lists):
    with pytest.raises(ValueError, match="invalid affix kind"):
        AffixService(CONFIG, word_lists).extract(_split("John Smith"), "prefix")


@pytest.mark.parametrize(
    ("word", "known", "expected"),
    [
        ("JR.", {"jr"}, True),
        ("Jr", {"jr."}, True),
        ("Ph.D", {"ph.d."}, True),
        ("Junior", {"jr"}, False),
    ],
)
def test_is_listed(word, known, expected):
    assert AffixService.is_listed(word, frozenset(known)) is expected


@pytest.mark.parametrize(
    ("raw", "expected_suffix", "expected_commas", "expected_parts"),
    [
        ("John Smithe, CLU, CFP, LC", "CLU, CFP, LC", 0, ["John", "Smithe"]),
        ("Smithe, John, CLU, CFP, LC", "CLU, CFP, LC", 1, ["Smithe", "John"]),
        ("John Smithe, CPA", "CPA", 0, ["John", "Smithe"]),
        ("Smithe, John", "", 1, ["Smithe", "John"]),
        ("John Smithe", "", 0, ["John", "Smithe"]),
        ("Smithe, John Paul, CPA", "CPA", 1, ["Smithe", "John", "Paul"]),
    ],
)
def test_extra_suffixes(word_lists, raw, expected_suffix, expected_commas, expected_parts):
    tokens = _split(raw)
    suffix, remaining_commas = AffixService(CONFIG, word_lists).extract_extra_suffixes(tokens)
    assert suffix == expected_suffix
    assert remaining_commas == expected_commas
    assert tokens.parts == expected_parts
    assert len(tokens.commas) == len(tokens.parts)


# ---------- joining ----------


def test_join_prefixes_chain(word_lists):
    tokens = _split("Ludwig van der Rohe")
    JoiningService(CONFIG, word_lists).join_prefixes(tokens)
    assert tokens.parts == ["Ludwig", "van der Rohe"]
    _assert_aligned(tokens)


def test_join_prefixes_keeps_following_comma(word_lists):
    tokens = _split("Van Gogh, Vincent")
    JoiningService(CONFIG, word_lists).join_prefixes(tokens)
    assert tokens.parts == ["Van Gogh", "Vincent"]
    assert tokens.commas == [False, True, False]


def test_join_prefixes_needs_two_tokens(word_lists):
    tokens = _split("van")
    JoiningService(CONFIG, word_lists).join_prefixes(tokens)
    assert tokens.parts == ["van"]


def test_join_conjunctions_chain(word_lists):
    tokens = _split("Maria Lopez y Garcia y Perez")
    JoiningService(CONFIG, word_lists).join_conjunctions(tokens)
    assert tokens.parts == ["Maria", "Lopez y Garcia y Perez"]
    _assert_aligned(tokens)


def test_join_prefixes_then_conjunctions(word_lists):
    tokens = _split("de Lorenzo y Gutierez, Juan Martinez")
    service = JoiningService(CONFIG, word_lists)
    service.join_prefixes(tokens)
    service.join_conjunctions(tokens)
    assert tokens.parts == ["de Lorenzo y Gutierez", "Juan", "Martinez"]
    assert tokens.commas == [False, True, False, False]


def test_join_conjunctions_needs_three_tokens(word_lists):
    tokens = _split("and Smith")
    JoiningService(CONFIG, word_lists).join_conjunctions(tokens)
    assert tokens.parts == ["and", "Smith"]


# ---------- assignment ----------


def test_last_name_without_comma():
    tokens = _split("John Smith")
    tokens.drop_trailing_comma()
    assert AssignmentService(CONFIG).extract_last_name(tokens, 0) == "Smith"
    assert tokens.parts == ["John"]


def test_last_name_before_comma():
    tokens = _split("Van Gogh, Vincent")
    tokens.drop_trailing_comma()
    assert AssignmentService(CONFIG).extract_last_name(tokens, 1) == "Van Gogh"
    assert tokens.parts == ["Vincent"]


def test_last_name_without_comma_slot():
    tokens = _split("John Smith")
    tokens.drop_trailing_comma()
    assert AssignmentService(CONFIG).extract_last_name(tokens, 1) == ""
    assert tokens.parts == ["John", "Smith"]


def test_given_names():
    service = AssignmentService(CONFIG)
    assert service.assign_given_names(_split("John Ronald Reuel")) == ("John", "Ronald Reuel")
    assert service.assign_given_names(_split("John")) == ("John", "")
    assert service.assign_given_names(NameTokens()) == ("", "")
