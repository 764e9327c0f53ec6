"""CLI entrypoint for the crossword layout engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from crosslayout.core.exceptions import CrosswordError, WordListError
from crosslayout.core.models import WordCandidate
from crosslayout.data.candidates import (
    GeminiWordListGenerator,
    UserWordListGenerator,
    complete_for_solution,
)
from crosslayout.data.normalization import normalize_word
from crosslayout.engine.generator import CrosswordGenerator, GeneratorConfig
from crosslayout.utils.logger import configure_logging, get_logger
from crosslayout.utils.pretty import print_layout_stats

LOGGER = get_logger("crosslayout.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a numbered crossword from (word, clue) pairs",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--solution", type=str, default=None, help="Hidden solution word")
    parser.add_argument("--topic", type=str, default="", help="Topic for LLM-generated words")
    parser.add_argument(
        "--llm",
        action="store_true",
        help=(
            "Ask Gemini for words on --topic; with --words or --words-file it only "
            "adds words for solution letters the list lacks (requires --solution)"
        ),
    )
    parser.add_argument("--language", type=str, default="Italian", help="Language for LLM words and clues")
    parser.add_argument("--word-count", type=int, default=10, help="Number of LLM words to request")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strict-adjacency",
        action="store_true",
        help="Refuse placements that run alongside or extend other words",
    )
    parser.add_argument(
        "--free-placement",
        action="store_true",
        help="Place words without an intersection in free space instead of dropping them",
    )
    parser.add_argument("--pretty", action="store_true", help="Print the grid instead of JSON")
    parser.add_argument("--output", type=Path, help="Optional output file (JSON, or the printed grid with --pretty)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_candidates(args: argparse.Namespace) -> List[WordCandidate]:
    raw_words: List[str] = []
    if args.words:
        raw_words.extend(args.words)
    if args.words_file:
        raw_words.extend(parse_words_file(args.words_file))

    if raw_words:
        candidates = UserWordListGenerator(raw_words).generate(args.topic)
        if args.llm:
            llm = GeminiWordListGenerator(language=args.language)
            candidates = complete_for_solution(candidates, args.solution, llm, args.topic or "generic")
        return candidates

    llm = GeminiWordListGenerator(language=args.language)
    required = list(dict.fromkeys(normalize_word(args.solution))) if args.solution else []
    candidates = llm.generate(args.topic, limit=args.word_count, required_letters=required)
    if not candidates:
        raise WordListError(f"Gemini returned no usable words for '{args.topic}'")
    return candidates


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    has_user_words = bool(args.words or args.words_file)
    if not has_user_words and not args.llm:
        parser.error("provide --words / --words-file, or --llm with --topic")
    if args.llm and not has_user_words and not args.topic:
        parser.error("--llm without --words requires --topic")
    if args.llm and has_user_words and not args.solution:
        parser.error("--llm with --words or --words-file requires --solution")

    try:
        candidates = collect_candidates(args)
    except (CrosswordError, RuntimeError) as exc:
        LOGGER.error("Could not obtain candidate words: %s", exc)
        return 1

    config = GeneratorConfig(
        seed=args.seed,
        strict_adjacency=args.strict_adjacency,
        allow_free_placement=args.free_placement,
    )
    layout = CrosswordGenerator(config).generate(candidates, args.solution)

    if args.pretty:
        if args.output:
            with args.output.open("w", encoding="utf-8") as handle:
                print_layout_stats(layout, stream=handle)
        else:
            print_layout_stats(layout, stream=sys.stdout)
        return 0

    output_text = json.dumps(layout.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
