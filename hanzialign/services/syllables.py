"""
Syllable splitting service for pinyin transcriptions.

This module splits a word-level pinyin string into per-character syllables.
Whitespace-delimited input is authoritative; concatenated input ("xuéxí",
"Hànyǔ") goes through a vowel/initial boundary scan with nasal and erhua coda
handling.
"""
from __future__ import annotations

from functools import lru_cache

from hanzialign.text_processing.text_preprocessor import TextPreprocessor
from hanzialign.types import AlignerConfig


class SyllableSplittingService:
    """
    Pure syllable splitter.

    * never raises; ``[]`` for empty input, ``[input]`` when no boundary is found
    * the joined output equals the input minus removed separators
    * memoised per transcription string
    """

    def __init__(self, config: AlignerConfig, preprocessor: TextPreprocessor | None = None):
        self._config = config
        self._preprocessor = preprocessor or TextPreprocessor(config)
        self._split_cached = lru_cache(maxsize=config.split_cache_size)(self._split_uncached)

    # ---------- public API ----------
    def split(self, pinyin: str | None) -> list[str]:
        """Split one transcription into syllables."""
        text = self._preprocessor.normalize_pinyin(pinyin)
        if not text:
            return []
        return list(self._split_cached(text))

    @property
    def cache_size(self) -> int:
        return self._split_cached.cache_info().currsize

    def clear_cache(self) -> None:
        self._split_cached.cache_clear()

    # ---------- internal ----------
    def _split_uncached(self, text: str) -> tuple[str, ...]:
        if self._config.whitespace_pattern.search(text):
            # whitespace tokens are never scanned, but apostrophes inside them still split
            return tuple(
                piece
                for token in self._config.whitespace_pattern.split(text)
                for piece in self._config.separator_pattern.split(token)
                if piece
            )

        syllables: list[str] = []
        for piece in self._config.separator_pattern.split(text):
            if piece:
                syllables.extend(self._scan(piece))
        return tuple(syllables) if syllables else (text,)

    def _scan(self, text: str) -> list[str]:
        """Heuristic left-to-right boundary scan over one unseparated run."""
        syllables: list[str] = []
        current: list[str] = []
        length = len(text)
        i = 0

        while i < length:
            ch = text[i]
            current.append(ch)
            i += 1
            if i >= length:
                break

            # Numbered pinyin: a tone digit always closes its syllable
            if self._preprocessor.is_tone_digit(ch):
                syllables.append("".join(current))
                current = []
                continue

            if not self._preprocessor.is_vowel(ch) or self._preprocessor.is_vowel(text[i]):
                continue

            coda = self._coda_length(text, i)
            if coda:
                current.append(text[i : i + coda])
                i += coda

            if i < length and self._starts_with_initial(text, i):
                syllables.append("".join(current))
                current = []

        if current:
            syllables.append("".join(current))
        return syllables

    def _coda_length(self, text: str, pos: int) -> int:
        """
        Length of the coda starting at ``pos`` (the consonant after a vowel).

        n/ng belong to the preceding syllable unless a vowel follows them, in
        which case the nasal opens the next syllable. A following -r is erhua
        under the same condition.
        """
        ch = text[pos].lower()
        if ch == "n":
            if pos + 1 < len(text) and text[pos + 1].lower() == "g" and self._closes_at(text, pos + 2):
                length = 2
            elif self._closes_at(text, pos + 1):
                length = 1
            else:
                return 0
            # Erhua after a nasal: "wánr", "yàngr"
            if self._is_erhua_at(text, pos + length):
                length += 1
            return length
        if ch == "r" and self._closes_at(text, pos + 1):
            return 1
        return 0

    def _closes_at(self, text: str, pos: int) -> bool:
        """True at the end of the run or before a non-vowel."""
        return pos >= len(text) or not self._preprocessor.is_vowel(text[pos])

    def _is_erhua_at(self, text: str, pos: int) -> bool:
        return pos < len(text) and text[pos].lower() == "r" and self._closes_at(text, pos + 1)

    def _starts_with_initial(self, text: str, pos: int) -> bool:
        return self._config.initial_pattern.match(text, pos) is not None
