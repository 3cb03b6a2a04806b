"""Text preprocessing helpers for pinyin alignment."""
