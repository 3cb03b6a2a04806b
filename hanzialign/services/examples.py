"""
Example sentence annotation service.

Example rows arrive with or without their own transcription. A transcription
is trusted only when its syllables line up exactly with the non-punctuation
characters of the sentence; everything else is segmented against the word
index.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from hanzialign.services.segmentation import SentenceSegmentationService
from hanzialign.services.syllables import SyllableSplittingService
from hanzialign.text_processing.text_preprocessor import TextPreprocessor
from hanzialign.types import AlignerConfig, ExampleAnnotation, ExampleSentence, PinyinWord, WordIndex

logger = logging.getLogger(__name__)

SOURCE_TRANSCRIPTION = "transcription"
SOURCE_SEGMENTER = "segmenter"


class ExampleAnnotationService:
    """Service for turning example-sentence rows into per-character readings."""

    def __init__(
        self,
        config: AlignerConfig,
        preprocessor: TextPreprocessor,
        splitter: SyllableSplittingService,
        segmenter: SentenceSegmentationService,
    ):
        self._config = config
        self._preprocessor = preprocessor
        self._splitter = splitter
        self._segmenter = segmenter

    def annotate(self, example, index: WordIndex) -> ExampleAnnotation:
        """Annotate one example row (``ExampleSentence``, mapping, tuple, or bare sentence string)."""
        example = ExampleSentence.from_row(example)

        if example.pinyin:
            words = self._from_transcription(example.hanzi, example.pinyin)
            if words is not None:
                return ExampleAnnotation(example.hanzi, tuple(words), example.english, SOURCE_TRANSCRIPTION)
            logger.debug("Transcription of %r does not line up; segmenting instead", example.hanzi)

        words = self._segmenter.segment(index, example.hanzi)
        return ExampleAnnotation(example.hanzi, tuple(words), example.english, SOURCE_SEGMENTER)

    def annotate_many(self, examples: Iterable, index: WordIndex) -> list[ExampleAnnotation]:
        return [self.annotate(example, index) for example in examples]

    def _from_transcription(self, hanzi: str, pinyin: str) -> list[PinyinWord] | None:
        """
        Assign transcription syllables to the readable characters in order.

        Tokens are stripped of clinging punctuation ("hǎo!") and split into
        syllables, so both "Wǒ zài xuéxí Hànyǔ." and "Wǒ zài xué xí Hàn yǔ ."
        line up with 我在学习汉语。. Returns None when the counts differ.
        """
        syllables: list[str] = []
        for token in self._config.whitespace_pattern.split(self._preprocessor.normalize_pinyin(pinyin)):
            token = self._preprocessor.strip_punctuation(token)
            if token:
                syllables.extend(self._splitter.split(token))

        readable = sum(1 for ch in hanzi if not self._preprocessor.is_punctuation(ch))
        if readable == 0 or len(syllables) != readable:
            return None

        remaining = iter(syllables)
        return [
            PinyinWord(ch, "" if self._preprocessor.is_punctuation(ch) else next(remaining))
            for ch in hanzi
        ]
