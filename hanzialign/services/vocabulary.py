"""
Vocabulary snapshot loading.

Reads vocabulary and example-sentence CSV files into typed rows. The files
need a header row; ``hanzi`` and ``pinyin`` columns are required for
vocabulary, ``hanzi`` for examples. Extra columns are ignored.
"""
from __future__ import annotations

import csv
from pathlib import Path

from hanzialign.paths import DATA_PATH, SEED_VOCABULARY_FILE
from hanzialign.types import ExampleSentence, VocabularyEntry


def _read_rows(path: Path, required: tuple[str, ...]) -> list[dict[str, str]]:
    with path.open(encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        missing = [column for column in required if column not in (reader.fieldnames or ())]
        if missing:
            raise ValueError(f"{path.name}: missing column(s) {', '.join(missing)}")
        return list(reader)


def load_vocabulary_csv(path: str | Path) -> list[VocabularyEntry]:
    """Load ``hanzi,pinyin[,english]`` rows in file order."""
    rows = _read_rows(Path(path), ("hanzi", "pinyin"))
    return [VocabularyEntry(row["hanzi"], row["pinyin"] or None, row.get("english") or "") for row in rows]


def load_examples_csv(path: str | Path) -> list[ExampleSentence]:
    """Load ``hanzi[,pinyin][,english]`` rows; an empty pinyin cell means no transcription."""
    rows = _read_rows(Path(path), ("hanzi",))
    return [ExampleSentence(row["hanzi"], row.get("pinyin") or None, row.get("english") or "") for row in rows]


def load_seed_vocabulary(data_dir: str | Path | None = None) -> list[VocabularyEntry]:
    """The small HSK seed list bundled with the package."""
    return load_vocabulary_csv(Path(data_dir or DATA_PATH) / SEED_VOCABULARY_FILE)
