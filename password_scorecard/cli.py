"""
Password Scorecard CLI

What it does:
- Scores a password against the full rule table
- Prints a per-rule breakdown OR JSON
- Returns exit codes based on the grade (good for automation)
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_CONFIG, ScoringConfig, load_word_list
from .engine import Evaluation, Scorecard
from .grading import exit_code_from_grade

logger = logging.getLogger(__name__)

CATEGORY_TITLES = {
    "merit": "Additions",
    "infraction": "Deductions (minor)",
    "misdemeanour": "Deductions (intermediate)",
    "felony": "Deductions (serious)",
    "basic": "Requirements",
}

# Exit code for a word list that could not be read
EXIT_BAD_WORDS = 4


def writer(value: Optional[int]) -> str:
    if not value:
        return "-"
    return str(value)


def print_human(evaluation: Evaluation) -> None:
    print("\nResults")
    print("-" * 72)
    for category, results in evaluation.by_category().items():
        print(f"\n{CATEGORY_TITLES.get(category, category)}")
        print(f"  {'rule':<32}{'count':>6}{'factor':>8}{'limit':>7}{'rating':>8}  status")
        for result in results:
            limit = result.maximum if result.kind.is_offence else result.minimum
            print(
                f"  {result.title:<32}{writer(result.count):>6}{writer(result.factor):>8}"
                f"{writer(limit) if limit is not None else '':>7}{writer(result.rating):>8}"
                f"  {result.status.label}"
            )

    print()
    print(f"Total score: {evaluation.raw_total}")
    print(f"Score: {evaluation.adjusted_percentage}%")
    print(f"Complexity: {evaluation.grade or '-'}")
    print(f"Estimated entropy: {evaluation.entropy_bits} bits (informational, not scored)")


def to_json(evaluation: Evaluation) -> str:
    payload = evaluation.to_dict()
    payload["exit_code"] = exit_code_from_grade(evaluation.grade)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="password-scorecard",
        description="Score a password against a weighted rule table.",
    )
    parser.add_argument(
        "-p",
        "--password",
        type=str,
        default=None,
        help="Password string to evaluate. If omitted, interactive prompt is used.",
    )
    parser.add_argument(
        "--words",
        metavar="PATH",
        default=None,
        help="Replace the built-in common-word list with a newline-delimited file.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the scoring configuration and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    return parser.parse_args(argv)


def build_config(words_path: Optional[str]) -> ScoringConfig:
    if words_path is None:
        return DEFAULT_CONFIG
    words = load_word_list(words_path)
    logger.info("Loaded %d common words from %s", len(words), words_path)
    return DEFAULT_CONFIG.with_words(words)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args.words)
    except OSError as exc:
        print(f"Could not read word list: {exc}", file=sys.stderr)
        return EXIT_BAD_WORDS

    if args.show_config:
        print(config.describe())
        return 0

    if args.password is None:
        # Interactive
        pw = getpass.getpass("Enter a password: ")
    else:
        pw = args.password

    evaluation = Scorecard(config).evaluate(pw)

    if args.json:
        print(to_json(evaluation))
    else:
        print_human(evaluation)

    return exit_code_from_grade(evaluation.grade)


if __name__ == "__main__":
    raise SystemExit(main())
