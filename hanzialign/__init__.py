"""
hanzialign: Pinyin Segmentation and Per-Character Alignment

Splits pinyin transcriptions into syllables, aligns them to individual hanzi,
and segments example sentences against a vocabulary so every character carries
its own reading.
"""

__version__ = "0.1.0"

__all__ = [
    "AlignerConfig",
    "PinyinAligner",
    "PinyinWord",
    "WordIndex",
    "align_word",
    "align_word_syllables",
    "annotate_example",
    "build_word_index",
    "generate_examples_for_word",
    "is_punctuation",
    "is_revealable",
    "segment_sentence",
    "segment_sentences",
    "split_syllables",
]

_CORE_FUNCTIONS = frozenset(
    {
        "align_word",
        "align_word_syllables",
        "annotate_example",
        "build_word_index",
        "generate_examples_for_word",
        "is_punctuation",
        "is_revealable",
        "segment_sentence",
        "segment_sentences",
        "split_syllables",
    },
)


def __getattr__(name):
    """Lazy import to keep `import hanzialign` free of service construction."""
    if name == "PinyinAligner":
        from .aligner import PinyinAligner
        return PinyinAligner
    if name in ("AlignerConfig", "PinyinWord", "WordIndex"):
        from . import types
        return getattr(types, name)
    if name in _CORE_FUNCTIONS:
        from . import core
        return getattr(core, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
