"""
Dictionary reading fallback for characters missing from the word index.

Uses pypinyin's single-character readings, memoised per (character, style).
Tone sandhi is never applied: a character keeps its citation reading.
"""
from __future__ import annotations

from functools import cache

import pypinyin

from hanzialign.types import AlignerConfig


@cache  # one entry per unique (character, style)
def _char_to_reading(ch: str, style_name: str) -> str:
    readings = pypinyin.lazy_pinyin(ch, style=getattr(pypinyin.Style, style_name), errors="ignore")
    return readings[0] if readings else ""


class ReadingFallbackService:
    """
    * deterministic, thread‑safe, O(1) repeated look‑ups
    * returns "" for anything pypinyin has no reading for
    """

    def __init__(self, config: AlignerConfig):
        if not hasattr(pypinyin.Style, config.reading_style):
            raise ValueError(f"unknown pypinyin style '{config.reading_style}'")
        self._config = config

    # ---------- public API ----------
    def reading_for(self, ch: str) -> str:
        return _char_to_reading(ch, self._config.reading_style)

    @property
    def cache_size(self) -> int:
        return _char_to_reading.cache_info().currsize
