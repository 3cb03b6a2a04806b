"""
Word index construction service.

This module turns an ordered vocabulary snapshot into the immutable
``WordIndex`` consumed by sentence segmentation: hanzi word to aligned
syllables, the longest word length, and the words whose alignment degraded.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from hanzialign.services.alignment import CharacterAlignmentService
from hanzialign.types import AlignerConfig, VocabularyEntry, WordIndex

logger = logging.getLogger(__name__)


class WordIndexService:
    """Service to build word indices from vocabulary rows."""

    def __init__(self, config: AlignerConfig, aligner: CharacterAlignmentService):
        self._config = config
        self._aligner = aligner

    def build(self, entries: Iterable) -> WordIndex:
        """
        Build an index from ``entries`` in order; a later duplicate replaces an earlier one.

        Entries may be ``VocabularyEntry`` objects, mappings with ``hanzi`` and
        ``pinyin`` keys, or ``(hanzi, pinyin)`` pairs. Rows without hanzi and rows
        of any other shape are skipped.
        """
        words: dict[str, tuple[str, ...]] = {}
        degraded: set[str] = set()
        max_word_length = 0
        skipped = 0

        for row in entries:
            try:
                entry = VocabularyEntry.from_row(row)
            except TypeError as e:
                logger.debug("Skipping vocabulary row: %s", e)
                skipped += 1
                continue
            hanzi = entry.hanzi.strip() if isinstance(entry.hanzi, str) else ""
            if not hanzi:
                skipped += 1
                continue

            alignment = self._aligner.align(hanzi, entry.pinyin)
            words[hanzi] = alignment.syllables
            if alignment.degraded:
                degraded.add(hanzi)
            else:
                degraded.discard(hanzi)
            max_word_length = max(max_word_length, len(hanzi))

        if skipped:
            logger.debug("Skipped %d vocabulary rows without hanzi or of an unsupported shape", skipped)
        logger.info(
            "Built word index: %d words, max length %d, %d degraded alignments",
            len(words),
            max_word_length,
            len(degraded),
        )
        return WordIndex(words, max_word_length, frozenset(degraded))
