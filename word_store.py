"""
word_store.py — Local Wordle answer store
=========================================
Loads and saves the JSON document

    {"words": [{"date": "YYYY-MM-DD", "solution": "cigar"}, ...]}

The file is the only state kept between runs. It is read at the start of
every update pass and rewritten whole at the end of it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Set

from logging_config import get_logger

logger = get_logger("store")


class StoreLoadError(Exception):
    """The store file is missing or does not hold a valid word document."""


@dataclass(frozen=True)
class WordEntry:
    date: str
    solution: str

    def to_dict(self) -> dict:
        return {"date": self.date, "solution": self.solution}


@dataclass
class WordStore:
    words: List[WordEntry] = field(default_factory=list)

    def dates(self) -> Set[str]:
        return {w.date for w in self.words}

    def has(self, date: str) -> bool:
        return any(w.date == date for w in self.words)

    def merge(self, entries: Iterable[WordEntry]) -> int:
        """Add entries for dates not yet stored, keep the list sorted by date. Returns how many were added."""
        known = self.dates()
        added = 0
        for entry in entries:
            if entry.date in known:
                continue
            self.words.append(entry)
            known.add(entry.date)
            added += 1
        self.words.sort(key=lambda w: w.date)
        return added

    def latest(self) -> Optional[WordEntry]:
        return max(self.words, key=lambda w: w.date, default=None)

    def to_dict(self) -> dict:
        return {"words": [w.to_dict() for w in self.words]}

    @classmethod
    def from_dict(cls, data) -> "WordStore":
        if not isinstance(data, dict) or not isinstance(data.get("words"), list):
            raise StoreLoadError("document has no 'words' list")

        words = []
        for item in data["words"]:
            date = item.get("date") if isinstance(item, dict) else None
            solution = item.get("solution") if isinstance(item, dict) else None
            if not isinstance(date, str) or not isinstance(solution, str):
                # dropped, so the backfill refetches that day
                logger.warning(f"⚠️ Skipping malformed store entry: {item!r}")
                continue
            words.append(WordEntry(date=date, solution=solution))
        return cls(words=words)


def _read(path: Path) -> WordStore:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StoreLoadError(str(e)) from e
    return WordStore.from_dict(data)


def load(path) -> WordStore:
    """Load the store, or an empty one if the file is missing or unreadable."""
    path = Path(path)
    try:
        return _read(path)
    except StoreLoadError as e:
        logger.debug(f"Starting from an empty store ({path}: {e})")
        return WordStore()


def save(store: WordStore, path) -> None:
    """Overwrite the store file with pretty-printed JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(store.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
