"""
Word Index Test Suite

This module contains tests for building the immutable word index:
- Aligned syllables per word and the longest word length
- Last-write-wins for duplicate keys
- Accepted row shapes and skipped rows
- Immutability and pickling
- Degraded alignment bookkeeping
"""

import pickle
import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import hanzialign
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanzialign import PinyinAligner, WordIndex, build_word_index, segment_sentence
from hanzialign.services import VocabularyEntry


def test_index_maps_words_to_aligned_syllables():
    index = build_word_index([{"hanzi": "学习", "pinyin": "xuéxí"}, {"hanzi": "汉语", "pinyin": "Hànyǔ"}])

    assert index.get("学习") == ("xué", "xí")
    assert index.get("汉语") == ("Hàn", "yǔ")
    assert index.max_word_length == 2
    assert len(index) == 2
    assert "学习" in index
    assert "我" not in index


def test_max_word_length_tracks_longest_entry():
    index = build_word_index([("我", "wǒ"), ("中华人民共和国", "Zhōnghuá Rénmín Gònghéguó"), ("你好", "nǐ hǎo")])
    assert index.max_word_length == 7


def test_duplicates_last_write_wins():
    index = build_word_index([("好", "hǎo"), ("好", "hào")])
    assert index.get("好") == ("hào",)
    assert len(index) == 1


def test_accepts_entries_mappings_and_pairs():
    index = build_word_index(
        [
            VocabularyEntry("我们", "wǒmen"),
            {"hanzi": "你好", "pinyin": "nǐ hǎo", "english": "hello"},
            ("谢谢", "xièxie", "thank you"),
        ],
    )
    assert index.get("我们") == ("wǒ", "men")
    assert index.get("你好") == ("nǐ", "hǎo")
    assert index.get("谢谢") == ("xiè", "xie")


def test_rows_without_hanzi_are_skipped():
    index = build_word_index([{"hanzi": "", "pinyin": "a"}, {"pinyin": "b"}, ("  ", "c"), ("吃", "chī")])
    assert list(index) == ["吃"]


def test_hanzi_keys_are_stripped():
    index = build_word_index([(" 老师 ", "lǎoshī")])
    assert index.get("老师") == ("lǎo", "shī")
    assert index.max_word_length == 2


def test_empty_vocabulary():
    index = build_word_index([])
    assert len(index) == 0
    assert index.max_word_length == 0
    assert index == WordIndex.empty()


def test_index_is_read_only():
    index = build_word_index([("我", "wǒ")])
    with pytest.raises(TypeError):
        index.words["你"] = ("nǐ",)
    with pytest.raises(AttributeError):
        index.max_word_length = 3


def test_degraded_words_follow_last_write():
    index = build_word_index([("你们", "nǐ"), ("学习", "xuéxí"), ("不客气", "bú kèqi")])
    assert index.degraded_words == frozenset({"你们", "不客气"})

    repaired = build_word_index([("你们", "nǐ"), ("你们", "nǐmen")])
    assert repaired.degraded_words == frozenset()
    assert repaired.get("你们") == ("nǐ", "men")


def test_seed_index_reports_erhua_word_as_degraded(seed_index):
    assert "哪儿" in seed_index.degraded_words
    assert seed_index.get("哪儿") == ("nǎr", "nǎr")
    assert seed_index.get("中国人") == ("Zhōng", "guó", "rén")


def test_index_survives_pickling():
    index = build_word_index([("你好", "nǐ hǎo"), ("你们", "nǐ")])
    restored = pickle.loads(pickle.dumps(index))

    assert dict(restored.words) == dict(index.words)
    assert restored.max_word_length == index.max_word_length
    assert restored.degraded_words == index.degraded_words


def test_rebuild_does_not_mutate_previous_index(aligner):
    before = aligner.build_word_index([("我", "wǒ")])
    after = aligner.build_word_index([("我", "wǒ"), ("你", "nǐ")])
    assert len(before) == 1
    assert len(after) == 2


def test_rebuild_index_swaps_snapshot():
    aligner = PinyinAligner(vocabulary=[("我", "wǒ")])
    previous = aligner.index
    rebuilt = aligner.rebuild_index([("你", "nǐ")])

    assert aligner.index is rebuilt
    assert list(previous) == ["我"]
    assert list(rebuilt) == ["你"]
    assert aligner.segment_sentence("你")[0].pinyin == "nǐ"


def test_hand_built_index_derives_longest_word_length():
    index = WordIndex({"中国": ("Zhōng", "guó"), "中华人民共和国": ("Zhōng",) * 7})
    assert index.max_word_length == 7
    assert WordIndex({"中国": ("Zhōng", "guó")}, 1).max_word_length == 2
    assert WordIndex({"中": ("zhōng",)}, 4).max_word_length == 4
    assert WordIndex({}).max_word_length == 0

    result = segment_sentence(WordIndex({"中国": ("Zhōng", "guó")}), "中国")
    assert [(word.char, word.pinyin) for word in result] == [("中", "Zhōng"), ("国", "guó")]


def test_rows_of_unsupported_shape_are_skipped():
    index = build_word_index([42, None, ("好",), (7, "qī"), ("好", "hǎo")])
    assert list(index) == ["好"]
    assert index.get("好") == ("hǎo",)
