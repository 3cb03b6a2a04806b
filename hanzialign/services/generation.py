"""
Template-based example sentences for vocabulary words.

Each word gets up to three short sentences chosen by category: pronouns,
particles, a few high-frequency words with hand-written sentences, numbers,
time words, places, adjectives, verbs (English gloss starting with "to") and a
noun fallback. Every generated sentence is segmented against the word index,
so the word itself and whatever else the vocabulary covers carry readings.
"""
from __future__ import annotations

import logging
import re

from hanzialign.services.segmentation import SentenceSegmentationService
from hanzialign.types import AlignerConfig, ExampleAnnotation, VocabularyEntry, WordIndex

logger = logging.getLogger(__name__)

MAX_EXAMPLES_PER_WORD = 3

PERSON_WORDS = frozenset({"我", "你", "他", "她", "我们", "他们", "她们", "您"})
NUMBER_WORDS = frozenset("一二三四五六七八九十")
TIME_WORDS = frozenset({"今天", "明天", "昨天", "上午", "下午", "中午"})
PLACE_WORDS = frozenset({"学校", "医院", "商店", "饭馆", "图书馆"})
ADJECTIVE_WORDS = frozenset({"冷", "热", "漂亮", "高兴", "忙"})
PARENT_WORDS = frozenset({"爸爸", "妈妈"})

# (chinese, english) pairs; templates are filled with str.format
PERSON_TEMPLATES = (
    ("我是学生。", "I am a student."),
    ("他是老师。", "He is a teacher."),
    ("我们学习汉语。", "We study Chinese."),
)

FIXED_TEMPLATES: dict[str, tuple[tuple[str, str], ...]] = {
    "吗": (
        ("你好吗？", "How are you?"),
        ("你喜欢茶吗？", "Do you like tea?"),
        ("他是老师吗？", "Is he a teacher?"),
    ),
    "的": (
        ("这是我的书。", "This is my book."),
        ("那是他的电脑。", "That is his computer."),
        ("这是你的杯子吗？", "Is this your cup?"),
    ),
    "了": (
        ("我吃饭了。", "I ate."),
        ("下雨了。", "It’s raining."),
        ("我们到了。", "We arrived."),
    ),
    "呢": (
        ("你呢？", "And you?"),
        ("他在哪儿呢？", "Where is he?"),
        ("我很好，你呢？", "I’m fine, how about you?"),
    ),
    "北京": (
        ("我去北京。", "I’m going to Beijing."),
        ("北京很大。", "Beijing is big."),
        ("明天去北京。", "I’ll go to Beijing tomorrow."),
    ),
    "老师": (
        ("他是老师。", "He is a teacher."),
        ("老师很忙。", "The teacher is busy."),
        ("我认识老师。", "I know the teacher."),
    ),
    "学生": (
        ("我是学生。", "I am a student."),
        ("他是学生。", "He is a student."),
        ("学生在学校。", "Students are at school."),
    ),
    "医生": (
        ("他是医生。", "He is a doctor."),
        ("我去医院找医生。", "I go to the hospital to see a doctor."),
        ("医生很忙。", "Doctors are busy."),
    ),
    "苹果": (
        ("我吃苹果。", "I eat apples."),
        ("这个苹果很好。", "This apple is very good."),
        ("我想买苹果。", "I want to buy apples."),
    ),
}

PARENT_TEMPLATES = (
    ("我爱{word}。", "I love my {parent}."),
    ("{word}很忙。", "My {parent} is busy."),
    ("我和{word}去商店。", "I go to the shop with my {parent}."),
)
NUMBER_TEMPLATES = (
    ("我有{word}个朋友。", "I have {english_lower} friends."),
    ("我买{word}本书。", "I buy {english_lower} books."),
    ("这儿有{word}个苹果。", "There are {english_lower} apples here."),
)
TIME_TEMPLATES = (
    ("{word}我很忙。", "{english} I’m very busy."),
    ("{word}去学校。", "{english} I go to school."),
    ("{word}下雨了。", "{english} it rained."),
)
PLACE_TEMPLATES = (
    ("我去{word}。", "I go to the {english}."),
    ("{word}在哪儿？", "Where is the {english}?"),
    ("我们在{word}。", "We are at the {english}."),
)
ADJECTIVE_TEMPLATES = (
    ("今天天气很{word}。", "Today’s weather is very {english}."),
    ("我很{word}。", "I am very {english}."),
    ("他不{word}。", "He is not {english}."),
)
VERB_TEMPLATES = (
    ("我想{word}。", "I want to {verb}."),
    ("我会{word}。", "I can {verb}."),
    ("我们一起{word}。", "We {verb} together."),
)
NOUN_TEMPLATES = (
    ("这是{word}。", "This is {english}."),
    ("我有{word}。", "I have {english}."),
    ("我想买{word}。", "I want to buy {english}."),
)

_LEADING_TO = re.compile(r"^to\s+", re.IGNORECASE)


def is_verb_gloss(english: str) -> bool:
    """True for glosses such as "to eat", "can; to be able to" or "able (to do)"."""
    gloss = english.lower().strip()
    return gloss.startswith("to ") or " to " in gloss or "(to " in gloss


def templates_for_word(hanzi: str, english: str) -> list[tuple[str, str]]:
    """Filled (chinese, english) sentence pairs for one word, most specific category first."""
    english = english.strip()
    english_lower = english.lower()

    if hanzi in PERSON_WORDS:
        return list(PERSON_TEMPLATES)
    if hanzi in FIXED_TEMPLATES:
        return list(FIXED_TEMPLATES[hanzi])

    if hanzi in PARENT_WORDS:
        templates = PARENT_TEMPLATES
    elif hanzi in NUMBER_WORDS:
        templates = NUMBER_TEMPLATES
    elif hanzi in TIME_WORDS:
        templates = TIME_TEMPLATES
    elif hanzi in PLACE_WORDS:
        templates = PLACE_TEMPLATES
    elif hanzi in ADJECTIVE_WORDS:
        templates = ADJECTIVE_TEMPLATES
    elif is_verb_gloss(english):
        templates = VERB_TEMPLATES
    else:
        templates = NOUN_TEMPLATES

    values = {
        "word": hanzi,
        "english": english,
        "english_lower": english_lower,
        "parent": "dad" if "dad" in english_lower else "mom",
        "verb": _LEADING_TO.sub("", english),
    }
    return [(zh.format(**values), en.format(**values)) for zh, en in templates]


class ExampleGenerationService:
    """Service for generating segmented example sentences for vocabulary words."""

    def __init__(self, config: AlignerConfig, segmenter: SentenceSegmentationService):
        self._config = config
        self._segmenter = segmenter

    def generate(self, word, index: WordIndex) -> list[ExampleAnnotation]:
        """
        Up to three annotated sentences for ``word`` (an entry, mapping, tuple row or bare hanzi).

        Returns an empty list for a row without hanzi or of an unsupported shape.
        """
        if isinstance(word, str):
            word = VocabularyEntry(word, None)
        try:
            entry = VocabularyEntry.from_row(word)
        except TypeError as e:
            logger.debug("No examples generated: %s", e)
            return []
        hanzi = entry.hanzi.strip() if isinstance(entry.hanzi, str) else ""
        if not hanzi:
            logger.debug("No examples generated for a row without hanzi")
            return []

        return [
            ExampleAnnotation(chinese, tuple(self._segmenter.segment(index, chinese)), english)
            for chinese, english in templates_for_word(hanzi, entry.english or "")[:MAX_EXAMPLES_PER_WORD]
        ]
