"""
Services package for pinyin alignment.

This package contains all service classes used by the alignment engine,
organized by domain responsibility.
"""

from hanzialign.services.alignment import CharacterAlignmentService
from hanzialign.services.cache import ReadingFallbackService
from hanzialign.services.examples import ExampleAnnotationService
from hanzialign.services.generation import ExampleGenerationService
from hanzialign.services.indexing import WordIndexService
from hanzialign.services.segmentation import SentenceSegmentationService
from hanzialign.services.syllables import SyllableSplittingService
from hanzialign.services.vocabulary import load_examples_csv, load_seed_vocabulary, load_vocabulary_csv
from hanzialign.types import (
    AlignerConfig,
    ExampleAnnotation,
    ExampleSentence,
    PinyinWord,
    VocabularyEntry,
    WordAlignment,
    WordIndex,
)

__all__ = [
    # Types (re-exported for convenience)
    "AlignerConfig",
    "ExampleAnnotation",
    "ExampleSentence",
    "PinyinWord",
    "VocabularyEntry",
    "WordAlignment",
    "WordIndex",
    # Services
    "CharacterAlignmentService",
    "ExampleAnnotationService",
    "ExampleGenerationService",
    "ReadingFallbackService",
    "SentenceSegmentationService",
    "SyllableSplittingService",
    "WordIndexService",
    # Loading
    "load_examples_csv",
    "load_seed_vocabulary",
    "load_vocabulary_csv",
]
