"""
Sentence segmentation service.

Tokenizes arbitrary sentences against a ``WordIndex`` with greedy longest
match (maximal munch) and emits one ``PinyinWord`` per character. The scan is
non-backtracking: at each cursor position the longest indexed word wins, even
where a shorter match would be the linguistically correct reading.
"""
from __future__ import annotations

from collections.abc import Iterable

from hanzialign.services.cache import ReadingFallbackService
from hanzialign.text_processing.text_preprocessor import TextPreprocessor
from hanzialign.types import AlignerConfig, PinyinWord, WordIndex


class SentenceSegmentationService:
    """Greedy longest-match segmenter; pure, reads the index only."""

    def __init__(
        self,
        config: AlignerConfig,
        preprocessor: TextPreprocessor,
        reading_fallback: ReadingFallbackService | None = None,
    ):
        self._config = config
        self._preprocessor = preprocessor
        self._reading_fallback = reading_fallback

    def segment(self, index: WordIndex, sentence: str | None) -> list[PinyinWord]:
        """
        Cover every character of ``sentence`` exactly once, in order.

        Punctuation gets an empty reading; an unindexed character gets an empty
        reading too unless the dictionary fallback is enabled.
        """
        if not sentence:
            return []

        out: list[PinyinWord] = []
        length = len(sentence)
        i = 0

        while i < length:
            ch = sentence[i]

            if self._preprocessor.is_punctuation(ch):
                out.append(PinyinWord(ch, ""))
                i += 1
                continue

            match = self._longest_match(index, sentence, i)
            if match is not None:
                word, syllables = match
                out.extend(self._label_word(word, syllables))
                i += len(word)
                continue

            out.append(PinyinWord(ch, self._unknown_reading(ch)))
            i += 1

        return out

    def segment_many(self, index: WordIndex, sentences: Iterable[str]) -> list[list[PinyinWord]]:
        """Segment each sentence independently; output order follows input order."""
        return [self.segment(index, sentence) for sentence in sentences]

    def _longest_match(self, index: WordIndex, sentence: str, start: int) -> tuple[str, tuple[str, ...]] | None:
        window = min(index.max_word_length, len(sentence) - start)
        for size in range(window, 0, -1):
            word = sentence[start : start + size]
            syllables = index.get(word)
            if syllables is not None:
                return word, syllables
        return None

    def _label_word(self, word: str, syllables: tuple[str, ...]) -> list[PinyinWord]:
        # Hand-built indices may carry short syllable tuples or punctuation inside a key
        labelled = []
        for offset, char in enumerate(word):
            if offset >= len(syllables) or self._preprocessor.is_punctuation(char):
                labelled.append(PinyinWord(char, ""))
            else:
                labelled.append(PinyinWord(char, syllables[offset]))
        return labelled

    def _unknown_reading(self, ch: str) -> str:
        if self._reading_fallback is None:
            return ""
        return self._reading_fallback.reading_for(ch)
