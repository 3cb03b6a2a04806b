"""
Configuration for pinyin splitting, alignment and sentence segmentation.

All character classes and precompiled patterns live here so that the services
stay free of hard-coded tables and one immutable object is shared by all
services.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from hanzialign.paths import DATA_PATH

# Longer clusters first so a regex alternation prefers zh/ch/sh over z/c/s.
SYLLABLE_INITIALS: tuple[str, ...] = (
    "zh", "ch", "sh",
    "b", "p", "m", "f", "d", "t", "n", "l", "g", "k", "h",
    "j", "q", "x", "r", "z", "c", "s", "y", "w",
)

# Base letters after canonical decomposition; ü decomposes to u + U+0308.
VOWEL_BASES = frozenset("aeiou")

# Syllable separators other than whitespace.
SYLLABLE_SEPARATORS = "'’"

TONE_DIGITS = frozenset("12345")

# Marks that the broader Unicode categories do not already cover.
EXTRA_PUNCTUATION = frozenset("·・～~`^|<>=+$")


@dataclass(frozen=True)
class AlignerConfig:
    """Immutable engine configuration."""

    data_dir: str
    syllable_initials: tuple[str, ...]
    vowel_bases: frozenset[str]
    tone_digits: frozenset[str]
    extra_punctuation: frozenset[str]

    # Optional dictionary reading for characters absent from the word index
    fill_unknown_readings: bool
    reading_style: str

    split_cache_size: int

    whitespace_pattern: re.Pattern[str]
    separator_pattern: re.Pattern[str]
    initial_pattern: re.Pattern[str]

    @classmethod
    def create_default(
        cls,
        *,
        fill_unknown_readings: bool = False,
        reading_style: str = "TONE",
        extra_punctuation: str | frozenset[str] = "",
        split_cache_size: int = 4096,
        data_dir: str | None = None,
    ) -> AlignerConfig:
        """Build the default configuration, optionally adjusting the few tunable knobs."""
        if split_cache_size < 0:
            raise ValueError("split_cache_size must be >= 0")

        initials_alternation = "|".join(re.escape(initial) for initial in SYLLABLE_INITIALS)
        return cls(
            data_dir=data_dir or str(DATA_PATH),
            syllable_initials=SYLLABLE_INITIALS,
            vowel_bases=VOWEL_BASES,
            tone_digits=TONE_DIGITS,
            extra_punctuation=EXTRA_PUNCTUATION | frozenset(extra_punctuation),
            fill_unknown_readings=fill_unknown_readings,
            reading_style=reading_style.upper(),
            split_cache_size=split_cache_size,
            whitespace_pattern=re.compile(r"\s+"),
            separator_pattern=re.compile(f"[{re.escape(SYLLABLE_SEPARATORS)}]+"),
            initial_pattern=re.compile(f"(?:{initials_alternation})", re.IGNORECASE),
        )
