"""
Pinyin Alignment Engine

This module aligns word-level pinyin transcriptions to individual hanzi and
segments example sentences against a vocabulary so that every character can be
shown with its own reading.

## Overview

The core functionality is provided by the `PinyinAligner` class, which wires a
small pipeline of pure services:

1. **Syllable Splitting**: whitespace-delimited or heuristic boundary detection
2. **Character Alignment**: one syllable per character, degrading gracefully on mismatch
3. **Word Index**: immutable hanzi → syllables map built once per vocabulary snapshot
4. **Sentence Segmentation**: greedy longest-match over the index, punctuation passthrough
5. **Example Annotation**: trusts a sentence's own transcription when it lines up
6. **Example Generation**: template sentences per vocabulary word

## Architecture

- **SyllableSplittingService**: memoised splitter with nasal/erhua coda handling
- **CharacterAlignmentService**: the four alignment rules
- **WordIndexService**: vocabulary rows → `WordIndex`
- **SentenceSegmentationService**: maximal munch over a `WordIndex`
- **ExampleAnnotationService**: example rows → `ExampleAnnotation`
- **ExampleGenerationService**: vocabulary word → template `ExampleAnnotation`s
- **ReadingFallbackService**: optional pypinyin readings for unindexed characters

The word index is an explicit value. The aligner keeps one for convenience, but
every segmentation call accepts another index, so several vocabulary sets can
be served side by side.

## Usage Examples

```python
from hanzialign import PinyinAligner

aligner = PinyinAligner(vocabulary=[{"hanzi": "学习", "pinyin": "xuéxí"}, {"hanzi": "汉语", "pinyin": "Hànyǔ"}])
aligner.segment_sentence("我在学习汉语。")
# [PinyinWord('我', ''), PinyinWord('在', ''), PinyinWord('学', 'xué'), PinyinWord('习', 'xí'),
#  PinyinWord('汉', 'Hàn'), PinyinWord('语', 'yǔ'), PinyinWord('。', '')]

aligner.align_word_syllables("你们", "nǐ")
# ['nǐ', 'nǐ']

aligner.index.degraded_words
# words whose transcription did not split into one syllable per character
```

## Error Handling

No alignment or segmentation call raises on bad data. Missing transcriptions,
wrong syllable counts and unknown characters all produce output of the right
length with empty or repeated readings. Only invalid configuration and unreadable
or malformed vocabulary files raise.

## Thread Safety

All services are stateless apart from memoisation caches, and `WordIndex` is
immutable, so one aligner can be used from multiple threads.
"""

import logging
from collections.abc import Iterable

from hanzialign.services import (
    AlignerConfig,
    CharacterAlignmentService,
    ExampleAnnotation,
    ExampleAnnotationService,
    ExampleGenerationService,
    PinyinWord,
    ReadingFallbackService,
    SentenceSegmentationService,
    SyllableSplittingService,
    WordIndex,
    WordIndexService,
    load_seed_vocabulary,
)
from hanzialign.text_processing.text_preprocessor import TextPreprocessor

# ════════════════════════════════════════════════════════════════════════════════
# MAIN PINYIN ALIGNER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class PinyinAligner:
    """Main pinyin alignment and sentence segmentation service."""

    def __init__(self, config: AlignerConfig | None = None, vocabulary: Iterable | None = None):
        self._config = config or AlignerConfig.create_default()
        self._preprocessor = TextPreprocessor(self._config)
        self._splitter = SyllableSplittingService(self._config, self._preprocessor)
        self._aligner = CharacterAlignmentService(self._config, self._splitter, self._preprocessor)
        self._index_service = WordIndexService(self._config, self._aligner)
        self._reading_fallback = ReadingFallbackService(self._config) if self._config.fill_unknown_readings else None
        self._segmenter = SentenceSegmentationService(self._config, self._preprocessor, self._reading_fallback)
        self._examples = ExampleAnnotationService(self._config, self._preprocessor, self._splitter, self._segmenter)
        self._generator = ExampleGenerationService(self._config, self._segmenter)

        self._vocabulary = list(vocabulary) if vocabulary is not None else None
        self._index: WordIndex | None = None

        self._initialize()

    def _initialize(self) -> None:
        """Build the word index for the configured vocabulary snapshot."""
        try:
            self._index = self._index_service.build(self._load_vocabulary())
        except (OSError, ValueError) as e:
            logging.warning(f"Failed to build word index at construction: {e}. Will build lazily.")

    def _ensure_initialized(self) -> WordIndex:
        """Ensure the index is built (lazy initialization)."""
        if self._index is None:
            self._index = self._index_service.build(self._load_vocabulary())
        return self._index

    def _load_vocabulary(self) -> list:
        if self._vocabulary is not None:
            return self._vocabulary
        return load_seed_vocabulary(self._config.data_dir)

    # Public API methods
    @property
    def config(self) -> AlignerConfig:
        return self._config

    @property
    def index(self) -> WordIndex:
        """The word index of the current vocabulary snapshot."""
        return self._ensure_initialized()

    def rebuild_index(self, vocabulary: Iterable) -> WordIndex:
        """Replace the vocabulary snapshot; the previous index is left untouched for existing holders."""
        self._vocabulary = list(vocabulary)
        self._index = self._index_service.build(self._vocabulary)
        return self._index

    def build_word_index(self, entries: Iterable) -> WordIndex:
        """Build a standalone index without changing this aligner's snapshot."""
        return self._index_service.build(entries)

    def split_syllables(self, pinyin: str | None) -> list[str]:
        return self._splitter.split(pinyin)

    def align_word_syllables(self, hanzi: str | None, pinyin: str | None) -> list[str]:
        return self._aligner.align_syllables(hanzi, pinyin)

    def align_word(self, hanzi: str | None, pinyin: str | None) -> list[PinyinWord]:
        return self._aligner.align_word(hanzi, pinyin)

    def segment_sentence(self, sentence: str | None, index: WordIndex | None = None) -> list[PinyinWord]:
        """
        Main API method: per-character readings for an arbitrary sentence.

        Uses this aligner's index unless another one is passed.
        """
        return self._segmenter.segment(index if index is not None else self.index, sentence)

    def segment_sentences(self, sentences: Iterable[str], index: WordIndex | None = None) -> list[list[PinyinWord]]:
        return self._segmenter.segment_many(index if index is not None else self.index, sentences)

    def annotate_example(self, example, index: WordIndex | None = None) -> ExampleAnnotation:
        return self._examples.annotate(example, index if index is not None else self.index)

    def annotate_examples(self, examples: Iterable, index: WordIndex | None = None) -> list[ExampleAnnotation]:
        return self._examples.annotate_many(examples, index if index is not None else self.index)

    def is_punctuation(self, ch: str) -> bool:
        return self._preprocessor.is_punctuation(ch)

    def is_revealable(self, word: PinyinWord) -> bool:
        return self._preprocessor.is_revealable(word)

    def generate_examples_for_word(self, word, index: WordIndex | None = None) -> list[ExampleAnnotation]:
        """Up to three template sentences for a vocabulary word, segmented against the index."""
        return self._generator.generate(word, index if index is not None else self.index)

    def clear_syllable_cache(self) -> None:
        self._splitter.clear_cache()
