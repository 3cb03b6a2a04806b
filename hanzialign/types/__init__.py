"""
Types package for pinyin alignment.

This package contains result types, configuration classes, and the typed
vocabulary rows used throughout the alignment engine.
"""

from hanzialign.types.config import AlignerConfig
from hanzialign.types.results import ExampleAnnotation, PinyinWord, WordAlignment, WordIndex
from hanzialign.types.vocabulary import ExampleSentence, VocabularyEntry

__all__ = [
    "AlignerConfig",
    "ExampleAnnotation",
    "ExampleSentence",
    "PinyinWord",
    "VocabularyEntry",
    "WordAlignment",
    "WordIndex",
]
