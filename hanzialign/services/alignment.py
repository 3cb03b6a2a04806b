"""
Character alignment service.

Maps the syllables of one dictionary word onto its characters one-to-one. The
output always has exactly one syllable per character; when the transcription
does not split into the right number of syllables the result degrades in
accuracy, never in length.
"""
from __future__ import annotations

import logging

from hanzialign.services.syllables import SyllableSplittingService
from hanzialign.text_processing.text_preprocessor import TextPreprocessor
from hanzialign.types import AlignerConfig, PinyinWord, WordAlignment

logger = logging.getLogger(__name__)


class CharacterAlignmentService:
    """Service for aligning word-level pinyin to individual hanzi."""

    def __init__(
        self,
        config: AlignerConfig,
        splitter: SyllableSplittingService,
        preprocessor: TextPreprocessor | None = None,
    ):
        self._config = config
        self._splitter = splitter
        self._preprocessor = preprocessor or TextPreprocessor(config)

    def align(self, hanzi: str | None, pinyin: str | None) -> WordAlignment:
        """
        Align ``pinyin`` to the characters of ``hanzi``.

        Rules, first match wins:
        1. one character: the whole transcription, unchanged
        2. syllable count equals character count: the split as-is
        3. no boundary found: the single token repeated for every character
        4. any other mismatch: syllable i for character i, reusing the last one
        """
        hanzi = hanzi or ""
        pinyin = pinyin or ""
        char_count = len(hanzi)

        if char_count == 0:
            return WordAlignment(hanzi, ())
        if char_count == 1:
            return WordAlignment(hanzi, (pinyin,))

        syllables = self._splitter.split(pinyin)
        if len(syllables) == char_count:
            return WordAlignment(hanzi, tuple(syllables))

        if len(syllables) <= 1:
            token = syllables[0] if syllables else pinyin.strip()
            logger.debug("Repeating %r across %d characters of %r", token, char_count, hanzi)
            return WordAlignment(hanzi, (token,) * char_count, degraded=True)

        padded = tuple(syllables[i] if i < len(syllables) else syllables[-1] for i in range(char_count))
        logger.debug("Padded %d syllables onto %d characters of %r: %s", len(syllables), char_count, hanzi, padded)
        return WordAlignment(hanzi, padded, degraded=True)

    def align_syllables(self, hanzi: str | None, pinyin: str | None) -> list[str]:
        return list(self.align(hanzi, pinyin).syllables)

    def align_word(self, hanzi: str | None, pinyin: str | None) -> list[PinyinWord]:
        """Per-character pairs for rendering a single dictionary word."""
        alignment = self.align(hanzi, pinyin)
        return [
            PinyinWord(char, "" if self._preprocessor.is_punctuation(char) else syllable)
            for char, syllable in zip(alignment.hanzi, alignment.syllables)
        ]
