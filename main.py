"""CLI entrypoint for the number-grid and word-search generators."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from puzzlegen.core.constants import BoardProfile
from puzzlegen.core.exceptions import PuzzleError
from puzzlegen.core.models import BoardShape
from puzzlegen.engine.number_generator import NumberGridConfig, NumberGridGenerator
from puzzlegen.engine.puzzle_store import PuzzleStore
from puzzlegen.engine.validator import NumberGridValidator
from puzzlegen.engine.word_placement import WordPlacementEngine, WordSearchConfig
from puzzlegen.utils.logger import configure_logging
from puzzlegen.utils.pretty import print_number_grid_stats, print_word_search_stats


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
        description="Generate number-grid puzzles and word searches",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    common.add_argument("--output", type=Path, help="Optional path to JSON output")
    common.add_argument(
        "--store-dir",
        type=Path,
        help="Also save the puzzle as a JSON document under this directory",
    )
    common.add_argument(
        "--pretty",
        action="store_true",
        help="Print a human-readable board to stderr",
    )
    common.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    number_grid = subparsers.add_parser(
        "number-grid", parents=[common], help="Generate a Sudoku-style number grid"
    )
    number_grid.add_argument(
        "--profile",
        type=str,
        choices=[p.value for p in BoardProfile],
        help="Preset board shape",
    )
    number_grid.add_argument("--rows", type=int, help="Rows (and columns) of the board")
    number_grid.add_argument("--box-width", type=int, help="Box width in cells")
    number_grid.add_argument("--box-height", type=int, help="Box height in cells")
    number_grid.add_argument(
        "--symbols",
        nargs="+",
        metavar="SYMBOL",
        help="Legal symbols in solver order (default: 1..rows)",
    )
    number_grid.add_argument(
        "--verify",
        action="store_true",
        help="Confirm with CP-SAT that the clues admit a completion",
    )

    word_search = subparsers.add_parser(
        "word-search", parents=[common], help="Generate a word-search grid"
    )
    word_search.add_argument("--size", type=int, required=True, help="Grid side length (>= 4)")
    word_search.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide")
    word_search.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    return parser


def resolve_shape(parser: argparse.ArgumentParser, args: argparse.Namespace) -> BoardShape:
    explicit = [args.rows, args.box_width, args.box_height]
    if args.profile and any(value is not None for value in explicit):
        parser.error("--profile cannot be combined with --rows/--box-width/--box-height")
    if args.profile:
        return BoardShape.from_profile(args.profile)
    if any(value is None for value in explicit):
        if any(value is not None for value in explicit):
            parser.error("--rows, --box-width and --box-height must be given together")
        return BoardShape.from_profile(BoardProfile.NINE_BY_NINE)
    return BoardShape.square(args.rows, args.box_width, args.box_height, args.symbols)


def run_number_grid(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Dict[str, Any]:
    shape = resolve_shape(parser, args)
    generator = NumberGridGenerator(NumberGridConfig(seed=args.seed))
    puzzle = generator.generate(shape)

    payload: Dict[str, Any] = {"kind": "number_grid", "seed": args.seed, **puzzle.to_jsonable()}
    if args.verify:
        validation = NumberGridValidator().validate(puzzle, check_completable=True)
        payload["validation"] = validation.messages
        payload["completable"] = validation.ok
    if args.pretty:
        print_number_grid_stats(puzzle, stream=sys.stderr)
    if args.store_dir:
        payload["id"] = PuzzleStore(args.store_dir).save_number_grid(puzzle, seed=args.seed)
    return payload


def run_word_search(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Dict[str, Any]:
    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide --words and/or --words-file")

    engine = WordPlacementEngine(WordSearchConfig(seed=args.seed))
    grid = engine.generate(args.size, words)

    payload: Dict[str, Any] = {"kind": "word_search", "seed": args.seed, **grid.to_jsonable()}
    if args.pretty:
        print_word_search_stats(grid, stream=sys.stderr)
    if args.store_dir:
        payload["id"] = PuzzleStore(args.store_dir).save_word_search(grid, seed=args.seed)
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "number-grid":
            payload = run_number_grid(parser, args)
        else:
            payload = run_word_search(parser, args)
    except PuzzleError as exc:
        logging.getLogger(__name__).error("Generation failed: %s", exc)
        return 1

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
