"""
Functional interface over the default-configured services.

`split_syllables`, `align_word_syllables`, `build_word_index` and
`segment_sentence` are the four engine operations; the word index is always
passed in explicitly, never held here.
"""
from __future__ import annotations

from collections.abc import Iterable
from functools import cache

from hanzialign.services import (
    AlignerConfig,
    CharacterAlignmentService,
    ExampleAnnotation,
    ExampleAnnotationService,
    ExampleGenerationService,
    PinyinWord,
    SentenceSegmentationService,
    SyllableSplittingService,
    WordIndex,
    WordIndexService,
)
from hanzialign.text_processing.text_preprocessor import TextPreprocessor


class _DefaultServices:
    def __init__(self):
        config = AlignerConfig.create_default()
        self.preprocessor = TextPreprocessor(config)
        self.splitter = SyllableSplittingService(config, self.preprocessor)
        self.aligner = CharacterAlignmentService(config, self.splitter, self.preprocessor)
        self.index_builder = WordIndexService(config, self.aligner)
        self.segmenter = SentenceSegmentationService(config, self.preprocessor)
        self.examples = ExampleAnnotationService(config, self.preprocessor, self.splitter, self.segmenter)
        self.generator = ExampleGenerationService(config, self.segmenter)


@cache
def _services() -> _DefaultServices:
    return _DefaultServices()


def split_syllables(pinyin: str | None) -> list[str]:
    """Split one pinyin transcription into syllables."""
    return _services().splitter.split(pinyin)


def align_word_syllables(hanzi: str | None, pinyin: str | None) -> list[str]:
    """Exactly one syllable per character of ``hanzi``."""
    return _services().aligner.align_syllables(hanzi, pinyin)


def align_word(hanzi: str | None, pinyin: str | None) -> list[PinyinWord]:
    return _services().aligner.align_word(hanzi, pinyin)


def build_word_index(entries: Iterable) -> WordIndex:
    """Immutable index over an ordered vocabulary snapshot (last duplicate wins)."""
    return _services().index_builder.build(entries)


def segment_sentence(index: WordIndex, sentence: str | None) -> list[PinyinWord]:
    """Greedy longest-match segmentation; one ``PinyinWord`` per character."""
    return _services().segmenter.segment(index, sentence)


def segment_sentences(index: WordIndex, sentences: Iterable[str]) -> list[list[PinyinWord]]:
    return _services().segmenter.segment_many(index, sentences)


def annotate_example(index: WordIndex, example) -> ExampleAnnotation:
    return _services().examples.annotate(example, index)


def generate_examples_for_word(word, index: WordIndex) -> list[ExampleAnnotation]:
    """Up to three template sentences for a vocabulary word."""
    return _services().generator.generate(word, index)


def is_punctuation(ch: str) -> bool:
    return _services().preprocessor.is_punctuation(ch)


def is_revealable(word: PinyinWord) -> bool:
    return _services().preprocessor.is_revealable(word)
