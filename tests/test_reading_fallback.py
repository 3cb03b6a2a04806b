"""
Tests for the optional dictionary reading of unindexed characters.
"""

import pytest

from hanzialign import AlignerConfig, PinyinAligner
from hanzialign.services import ReadingFallbackService


@pytest.fixture(scope="module")
def filling_aligner():
    config = AlignerConfig.create_default(fill_unknown_readings=True)
    return PinyinAligner(config, vocabulary=[("学习", "xuéxí")])


def test_unindexed_characters_get_dictionary_reading(filling_aligner):
    result = filling_aligner.segment_sentence("我学习。")
    assert [(word.char, word.pinyin) for word in result] == [("我", "wǒ"), ("学", "xué"), ("习", "xí"), ("。", "")]


def test_index_still_takes_priority(filling_aligner):
    index = filling_aligner.build_word_index([("好", "hào")])
    assert filling_aligner.segment_sentence("好", index)[0].pinyin == "hào"


def test_characters_without_reading_stay_blank(filling_aligner):
    assert [word.pinyin for word in filling_aligner.segment_sentence("A😀")] == ["", ""]


def test_fallback_disabled_by_default():
    aligner = PinyinAligner(vocabulary=[])
    assert aligner.segment_sentence("我")[0].pinyin == ""


def test_numbered_reading_style():
    service = ReadingFallbackService(AlignerConfig.create_default(reading_style="tone3"))
    assert service.reading_for("我") == "wo3"


def test_unknown_reading_style_is_rejected():
    with pytest.raises(ValueError, match="style"):
        ReadingFallbackService(AlignerConfig.create_default(reading_style="klingon"))
    with pytest.raises(ValueError):
        PinyinAligner(AlignerConfig.create_default(fill_unknown_readings=True, reading_style="klingon"), vocabulary=[])
