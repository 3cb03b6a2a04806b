"""
Tests for character classification and engine configuration.
"""

import dataclasses
import unicodedata

import pytest

from hanzialign import AlignerConfig, PinyinWord, is_punctuation, is_revealable
from hanzialign.text_processing.text_preprocessor import TextPreprocessor

PUNCTUATION = "。，！？、；：“”‘’（）《》【】「」…—.!?,;:'\"()-/ \t\n　·～"
NOT_PUNCTUATION = "我你好學习AzZ09０１😀𠀀ǚ"


def test_punctuation_classification():
    for ch in PUNCTUATION:
        assert is_punctuation(ch), f"{ch!r} should be punctuation"
    for ch in NOT_PUNCTUATION:
        assert not is_punctuation(ch), f"{ch!r} should not be punctuation"
    assert not is_punctuation("")


def test_revealable_words():
    assert is_revealable(PinyinWord("好", "hǎo"))
    assert is_revealable(PinyinWord("吗", ""))
    assert not is_revealable(PinyinWord("！", ""))


def test_extra_punctuation_is_configurable():
    preprocessor = TextPreprocessor(AlignerConfig.create_default(extra_punctuation="〇"))
    assert preprocessor.is_punctuation("〇")
    assert not TextPreprocessor(AlignerConfig.create_default()).is_punctuation("〇")


def test_vowels_with_and_without_tone_marks():
    preprocessor = TextPreprocessor(AlignerConfig.create_default())
    for ch in "aeiouAEIOUāáǎàēéěèīíǐìōóǒòūúǔùüǖǘǚǜĀÉǏÒÜ":
        assert preprocessor.is_vowel(ch), ch
    for ch in "bnrvyzY3'":
        assert not preprocessor.is_vowel(ch), ch


def test_normalize_pinyin():
    preprocessor = TextPreprocessor(AlignerConfig.create_default())
    decomposed = unicodedata.normalize("NFD", " nǚ ")
    assert preprocessor.normalize_pinyin(decomposed) == "nǚ"
    assert preprocessor.normalize_pinyin(None) == ""


def test_strip_punctuation():
    preprocessor = TextPreprocessor(AlignerConfig.create_default())
    assert preprocessor.strip_punctuation("“Hǎo!”") == "Hǎo"
    assert preprocessor.strip_punctuation("Xī'ān,") == "Xī'ān"
    assert preprocessor.strip_punctuation("...") == ""


def test_config_is_frozen():
    config = AlignerConfig.create_default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.fill_unknown_readings = True


def test_config_defaults_and_validation():
    config = AlignerConfig.create_default(reading_style="tone3")
    assert config.reading_style == "TONE3"
    assert config.fill_unknown_readings is False
    assert config.syllable_initials[:3] == ("zh", "ch", "sh")
    with pytest.raises(ValueError):
        AlignerConfig.create_default(split_cache_size=-1)
