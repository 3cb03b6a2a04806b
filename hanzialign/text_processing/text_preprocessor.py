"""
Text preprocessing utilities for pinyin alignment.

RESPONSIBILITIES:
- Character classification: punctuation, pinyin vowels, tone digits
- Unicode normalization of transcriptions (NFC) so decomposed diacritics
  behave like precomposed ones
- NO dictionary-dependent operations (those belong in the segmentation service)

Hanzi text is never normalized: sentence output has to reproduce the input
glyphs exactly.
"""

from __future__ import annotations

import string
import unicodedata
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hanzialign.types import AlignerConfig, PinyinWord

_ASCII_MARKS = frozenset(string.punctuation + string.whitespace)


@lru_cache(maxsize=8192)
def _base_letter(ch: str) -> str:
    return unicodedata.normalize("NFD", ch)[0].lower()


class TextPreprocessor:
    """Character classification shared by the splitter, aligner and segmenter."""

    def __init__(self, config: AlignerConfig):
        self._config = config

    def normalize_pinyin(self, pinyin: str | None) -> str:
        """Strip and NFC-normalize a transcription; None becomes an empty string."""
        if not pinyin:
            return ""
        return unicodedata.normalize("NFC", pinyin.strip())

    def is_punctuation(self, ch: str) -> bool:
        """
        CJK and ASCII punctuation, quotation marks and whitespace.

        Unicode general categories P* (punctuation) and Z* (separators) cover the
        full-width forms, CJK brackets and curly quotes.
        """
        if not ch:
            return False
        if ch in _ASCII_MARKS or ch in self._config.extra_punctuation or ch.isspace():
            return True
        return unicodedata.category(ch)[0] in ("P", "Z")

    def is_revealable(self, word: PinyinWord) -> bool:
        """Whether the rendering layer may offer a reading for this glyph."""
        return not self.is_punctuation(word.char)

    def strip_punctuation(self, token: str) -> str:
        """Remove punctuation clinging to either end of a transcription token ("hǎo!" -> "hǎo")."""
        start, end = 0, len(token)
        while start < end and self.is_punctuation(token[start]):
            start += 1
        while end > start and self.is_punctuation(token[end - 1]):
            end -= 1
        return token[start:end]

    def is_vowel(self, ch: str) -> bool:
        """a e i o u ü in any case, with or without a tone diacritic."""
        return bool(ch) and _base_letter(ch) in self._config.vowel_bases

    def is_tone_digit(self, ch: str) -> bool:
        return ch in self._config.tone_digits
