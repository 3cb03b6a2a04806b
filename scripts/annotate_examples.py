#!/usr/bin/env python3
"""
Annotate example sentences with per-character pinyin and print JSON.

Examples:
    python scripts/annotate_examples.py --vocab words.csv "我在学习汉语。"
    python scripts/annotate_examples.py --examples examples.csv --report-degraded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from hanzialign import AlignerConfig, PinyinAligner
from hanzialign.services import ExampleSentence, load_examples_csv, load_seed_vocabulary, load_vocabulary_csv


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Per-character pinyin for example sentences.")
    parser.add_argument("sentences", nargs="*", help="Sentences to segment against the vocabulary.")
    parser.add_argument("--vocab", type=Path, help="Vocabulary CSV (hanzi,pinyin). Defaults to the bundled seed list.")
    parser.add_argument("--examples", type=Path, help="Example CSV (hanzi[,pinyin][,english]).")
    parser.add_argument(
        "--fill-unknown",
        action="store_true",
        help="Give characters missing from the vocabulary their pypinyin reading.",
    )
    parser.add_argument(
        "--report-degraded",
        action="store_true",
        help="List vocabulary words whose pinyin did not split into one syllable per character.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if not args.sentences and args.examples is None:
        print("nothing to annotate: pass sentences or --examples", file=sys.stderr)
        return 2

    vocabulary = load_vocabulary_csv(args.vocab) if args.vocab else load_seed_vocabulary()
    config = AlignerConfig.create_default(fill_unknown_readings=args.fill_unknown)
    aligner = PinyinAligner(config=config, vocabulary=vocabulary)

    examples = [ExampleSentence(sentence) for sentence in args.sentences]
    if args.examples is not None:
        examples.extend(load_examples_csv(args.examples))

    payload = {"examples": [annotation.to_dict() for annotation in aligner.annotate_examples(examples)]}
    if args.report_degraded:
        payload["degraded"] = sorted(aligner.index.degraded_words)

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
