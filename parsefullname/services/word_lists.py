"""
Word-list service for full name parsing.

This module loads the lookup lists that drive the parser (conjunctions,
force-case words, prefixes, suffixes and titles) from the CSV files bundled
in ``parsefullname/data``, from a directory laid out the same way, or from a
YAML document, and hands them out as immutable sets.
"""
from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

import yaml

from parsefullname.paths import DATA_PATH, logger
from parsefullname.types import WordListError

LIST_SIZES = ("short", "long")
AFFIX_LISTS = ("prefixes", "suffixes", "titles")
PLAIN_LISTS = ("conjunctions", "force_case")


@dataclass(frozen=True)
class WordLists:
    """Immutable bundle of the five lookup sets for one list size."""

    conjunctions: frozenset[str]
    force_case_words: frozenset[str]
    prefixes: frozenset[str]
    suffixes: frozenset[str]
    titles: frozenset[str]


class WordListService:
    """Loads word lists once and serves frozen snapshots of them."""

    def __init__(
        self,
        data_dir: str | Path | None = None,
        *,
        lists: tuple[dict[str, frozenset[str]], dict[str, dict[str, frozenset[str]]]] | None = None,
        source: str | None = None,
    ):
        # Injected lists (plain lists, per-size affix lists) skip the CSV directory
        if lists is None:
            data_dir = Path(data_dir) if data_dir is not None else DATA_PATH
            lists = self._load_csv_directory(data_dir)
            source = source or str(data_dir)
        self._source = source or "<mapping>"
        self._plain, self._affixes = lists
        self._bundles: dict[str, WordLists] = {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> WordListService:
        """
        Load word lists from a YAML document.

        The document holds ``conjunctions`` and ``force_case`` as plain lists,
        and ``prefixes``, ``suffixes`` and ``titles`` as mappings with a
        ``short`` and a ``long`` list. Keys may carry a leading colon.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as e:
            raise WordListError(f"{path}: cannot read word lists: {e}") from e
        except yaml.YAMLError as e:
            raise WordListError(f"{path}: invalid YAML: {e}") from e
        return cls.from_mapping(data, source=str(path))

    @classmethod
    def from_mapping(cls, data, source: str = "<mapping>") -> WordListService:
        """Build a service from an already-parsed mapping (same layout as the YAML document)."""
        if not isinstance(data, dict):
            raise WordListError(f"{source}: expected a mapping, got {type(data).__name__}")

        data = {str(key).lstrip(":"): value for key, value in data.items()}
        plain = {
            name: cls._freeze(data.get(name) or [], source, name, lower=name != "force_case")
            for name in PLAIN_LISTS
        }

        affixes = {}
        for name in AFFIX_LISTS:
            sized = data.get(name) or {}
            if not isinstance(sized, dict):
                raise WordListError(f"{source}: '{name}' must map list sizes to word lists")
            sized = {str(key).lstrip(":"): value for key, value in sized.items()}
            affixes[name] = {size: cls._freeze(sized.get(size) or [], source, f"{name}.{size}") for size in LIST_SIZES}

        return cls(lists=(plain, affixes), source=source)

    # Public API methods
    @property
    def source(self) -> str:
        return self._source

    def conjunctions(self) -> frozenset[str]:
        return self._plain["conjunctions"]

    def force_case_words(self) -> frozenset[str]:
        return self._plain["force_case"]

    def prefixes(self, size: str = "short") -> frozenset[str]:
        return self._affix("prefixes", size)

    def suffixes(self, size: str = "short") -> frozenset[str]:
        return self._affix("suffixes", size)

    def titles(self, size: str = "short") -> frozenset[str]:
        return self._affix("titles", size)

    def word_lists(self, use_long_lists: bool = False) -> WordLists:
        """Bundle the five lookup sets for the selected list size."""
        size = "long" if use_long_lists else "short"
        if size not in self._bundles:
            self._bundles[size] = WordLists(
                conjunctions=self.conjunctions(),
                force_case_words=self.force_case_words(),
                prefixes=self.prefixes(size),
                suffixes=self.suffixes(size),
                titles=self.titles(size),
            )
        return self._bundles[size]

    # ---------- internal ----------
    def _affix(self, name: str, size: str) -> frozenset[str]:
        if size not in LIST_SIZES:
            raise WordListError(f"unknown list size {size!r}: expected 'short' or 'long'")
        return self._affixes[name][size]

    @staticmethod
    def _freeze(words, source: str, name: str, lower: bool = True) -> frozenset[str]:
        if isinstance(words, str) or not isinstance(words, (list, tuple, set, frozenset)):
            raise WordListError(f"{source}: '{name}' must be a list of words")
        cleaned = {str(word).strip() for word in words if word is not None and str(word).strip()}
        return frozenset(word.lower() for word in cleaned) if lower else frozenset(cleaned)

    def _load_csv_directory(
        self,
        data_dir: Path,
    ) -> tuple[dict[str, frozenset[str]], dict[str, dict[str, frozenset[str]]]]:
        """Read the five CSV files; the long affix lists include the short entries."""
        plain = {}
        for name in PLAIN_LISTS:
            rows = self._read_csv(data_dir / f"{name}.csv", ("word",))
            words = [row["word"] for row in rows]
            plain[name] = frozenset(words) if name == "force_case" else frozenset(w.lower() for w in words)
            logger.debug(f"Loaded {len(plain[name])} {name} words from {data_dir}")

        affixes = {}
        for name in AFFIX_LISTS:
            short, long_only = set(), set()
            for row in self._read_csv(data_dir / f"{name}.csv", ("word", "list")):
                size = row["list"].lower()
                if size == "short":
                    short.add(row["word"].lower())
                elif size == "long":
                    long_only.add(row["word"].lower())
                else:
                    raise WordListError(f"{data_dir / name}.csv: unknown list size {row['list']!r}")
            affixes[name] = {"short": frozenset(short), "long": frozenset(short | long_only)}
            logger.debug(f"Loaded {len(short)} short and {len(short | long_only)} long {name} from {data_dir}")

        return plain, affixes

    def _read_csv(self, path: Path, columns: tuple[str, ...]) -> list[dict[str, str]]:
        if not path.exists():
            raise WordListError(f"{path}: word-list file not found")

        rows = []
        with path.open(encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            missing = set(columns) - set(reader.fieldnames or ())
            if missing:
                raise WordListError(f"{path}: missing columns: {sorted(missing)}")

            for line_no, row in enumerate(reader, start=2):
                values = {column: (row.get(column) or "").strip() for column in columns}
                if not all(values.values()):
                    logger.warning(f"Skipping incomplete row {line_no} in {path}")
                    continue
                rows.append(values)
        return rows
