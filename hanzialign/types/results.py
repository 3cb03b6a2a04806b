"""
Result types for pinyin alignment.

All values are frozen so a built index and the annotations derived from it can
be shared between threads.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class PinyinWord:
    """One glyph and the reading shown for it; ``pinyin`` is empty when unknown."""

    char: str
    pinyin: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"char": self.char, "pinyin": self.pinyin}


@dataclass(frozen=True)
class WordAlignment:
    """Per-character syllables for one dictionary word."""

    hanzi: str
    syllables: tuple[str, ...]
    # True when the repetition or padding fallback produced the syllables
    degraded: bool = False


@dataclass(frozen=True)
class WordIndex:
    """
    Immutable lookup from hanzi word to its aligned syllables.

    Built once per vocabulary snapshot; a changed vocabulary needs a new index.
    """

    words: Mapping[str, tuple[str, ...]]
    max_word_length: int = 0
    degraded_words: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.words, MappingProxyType):
            frozen = {hanzi: tuple(syllables) for hanzi, syllables in self.words.items()}
            object.__setattr__(self, "words", MappingProxyType(frozen))
        # the segmenter never looks further ahead than max_word_length
        longest = max((len(hanzi) for hanzi in self.words), default=0)
        if self.max_word_length < longest:
            object.__setattr__(self, "max_word_length", longest)
        if not isinstance(self.degraded_words, frozenset):
            object.__setattr__(self, "degraded_words", frozenset(self.degraded_words))

    @classmethod
    def empty(cls) -> WordIndex:
        return cls(MappingProxyType({}), 0, frozenset())

    def get(self, hanzi: str) -> tuple[str, ...] | None:
        return self.words.get(hanzi)

    def __contains__(self, hanzi: object) -> bool:
        return hanzi in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __reduce__(self):
        # mappingproxy objects cannot be pickled; rebuild from a plain dict
        return (WordIndex, (dict(self.words), self.max_word_length, self.degraded_words))


@dataclass(frozen=True)
class ExampleAnnotation:
    """Per-character readings for one example sentence."""

    chinese: str
    pinyin_words: tuple[PinyinWord, ...]
    english: str = ""
    # "transcription" when the row's own pinyin was used, "segmenter" otherwise
    source: str = "segmenter"

    @property
    def from_transcription(self) -> bool:
        return self.source == "transcription"

    def to_dict(self) -> dict:
        return {
            "chinese": self.chinese,
            "pinyinWords": [word.to_dict() for word in self.pinyin_words],
            "english": self.english,
        }
