import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import parsefullname
sys.path.insert(0, str(Path(__file__).parent.parent))

from parsefullname import NameParser, NameParserConfig
from parsefullname.services import WordLists


@pytest.fixture(scope="session")
def parser():
    return NameParser()


@pytest.fixture(scope="session")
def long_list_parser():
    return NameParser(NameParserConfig(use_long_lists=True))


@pytest.fixture
def word_lists():
    """Small hand-written lists so service tests do not depend on the bundled data."""
    return WordLists(
        conjunctions=frozenset({"y", "and"}),
        force_case_words=frozenset({"van", "der", "III", "Ph.D."}),
        prefixes=frozenset({"van", "der", "de"}),
        suffixes=frozenset({"jr", "sr", "iii"}),
        titles=frozenset({"mr", "dr", "prof"}),
    )
