"""
Compare the prefix-pruned search against plain word-membership search.

Usage:
    python -m scripts.compare_strategies [--boards N] [--size N] [--seed S]

Both strategies must report the same words; the full search explores every
path up to the length cap, so keep boards small (3x3) unless you are patient.
"""
import argparse
import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.settings import settings
from boggle.dice import format_grid, roll_grid
from boggle.dictionary import load_index
from boggle.metrics import StageTimer
from boggle.solver import find_words


def main():
    parser = argparse.ArgumentParser(description="Boggle search strategy comparison")
    parser.add_argument("--boards", type=int, default=5, help="Number of boards to roll (default: 5)")
    parser.add_argument("--size", type=int, default=3, help="Board side length (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible boards")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help="Word list to search with")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    timer = StageTimer()
    with timer.stage("load"):
        index = load_index(args.dictionary, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)
    print(f"Loaded {len(index)} words from {args.dictionary}")

    mismatches = 0
    for i in range(args.boards):
        grid = roll_grid(args.size, rng)
        with timer.stage("pruned"):
            pruned = find_words(grid, index, prune=True)
        with timer.stage("full"):
            full = find_words(grid, index, prune=False)

        print(f"\nBoard {i + 1}:\n{format_grid(grid)}")
        print(f"  {len(pruned)} words: {', '.join(pruned) or '-'}")
        if pruned != full:
            mismatches += 1
            print(f"  MISMATCH: full search found {full}")

    t = timer.timings
    print(f"\nPrefix-pruned: {t['pruned']:.2f}ms total")
    print(f"Full search:   {t['full']:.2f}ms total")
    if t["pruned"] > 0:
        print(f"Ratio: {t['full'] / t['pruned']:.1f}x")

    if mismatches:
        print(f"{mismatches} board(s) disagreed")
        sys.exit(1)


if __name__ == "__main__":
    main()
