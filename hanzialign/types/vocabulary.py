"""
Typed views of the rows supplied by the vocabulary provider.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class VocabularyEntry:
    """A dictionary word and its transcription."""

    hanzi: str
    pinyin: str | None
    english: str = ""

    @classmethod
    def from_row(cls, row) -> VocabularyEntry:
        """Accept an entry, a mapping with ``hanzi``/``pinyin`` keys, or a ``(hanzi, pinyin[, english])`` sequence."""
        if isinstance(row, VocabularyEntry):
            return row
        if isinstance(row, Mapping):
            return cls(row.get("hanzi") or "", row.get("pinyin"), row.get("english") or "")
        if isinstance(row, (tuple, list)) and len(row) >= 2:
            english = row[2] if len(row) > 2 and row[2] is not None else ""
            return cls(row[0] or "", row[1], english)
        raise TypeError(f"cannot read a vocabulary entry from {type(row).__name__}")


@dataclass(frozen=True)
class ExampleSentence:
    """An example sentence; ``pinyin`` is None when the source carries no transcription."""

    hanzi: str
    pinyin: str | None = None
    english: str = ""

    @classmethod
    def from_row(cls, row) -> ExampleSentence:
        if isinstance(row, ExampleSentence):
            return row
        if isinstance(row, Mapping):
            return cls(row.get("hanzi") or "", row.get("pinyin"), row.get("english") or "")
        if isinstance(row, str):
            return cls(row)
        if isinstance(row, (tuple, list)) and row:
            pinyin = row[1] if len(row) > 1 else None
            english = row[2] if len(row) > 2 and row[2] is not None else ""
            return cls(row[0] or "", pinyin, english)
        raise TypeError(f"cannot read an example sentence from {type(row).__name__}")
