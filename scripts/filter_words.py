"""
Word-list preprocessing for the Boggle solver.

Usage:
    python -m scripts.filter_words <raw_word_file> [--output data/words.txt]

Keeps one lowercased word per line, dropping blanks, duplicates and anything
outside the playable length range (4-16 letters by default).
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.dictionary import MAX_WORD_LENGTH, MIN_WORD_LENGTH, load_words


def main():
    parser = argparse.ArgumentParser(description="Filter a raw word list for the Boggle solver")
    parser.add_argument("words", help="Path to a newline-delimited word file")
    parser.add_argument("--output", type=str, default=str(PROJECT_ROOT / "data" / "words.txt"),
                        help="Where to write the filtered list (default: data/words.txt)")
    parser.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                        help=f"Shortest word to keep (default: {MIN_WORD_LENGTH})")
    parser.add_argument("--max-length", type=int, default=MAX_WORD_LENGTH,
                        help=f"Longest word to keep (default: {MAX_WORD_LENGTH})")
    args = parser.parse_args()

    src = Path(args.words)
    if not src.exists():
        print(f"Error: {src} does not exist")
        sys.exit(1)

    words = list(dict.fromkeys(load_words(src, args.min_length, args.max_length)))

    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")

    print(f"Kept {len(words)} words between {args.min_length} and {args.max_length} letters")
    print(f"Output saved to: {out}")


if __name__ == "__main__":
    main()
