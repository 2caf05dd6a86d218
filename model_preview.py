from __future__ import annotations

import argparse
import pathlib
import random

from char_data import CharDistribution
from language_model import LanguageModel
from sampling import sample_counts


def preview_sampling(word: str = "committee ", trials: int = 10000, seed: int = 20) -> None:
    """Compare the expected distribution of a word's characters with sampled frequencies."""
    probs = CharDistribution()
    for char in word:
        probs.update(char)
    LanguageModel.calculate_probabilities(probs)

    print("[Sampling Check]")
    print(f"Word: {word!r}, Trials: {trials:,}")
    print("\nexpected distribution:")
    for record in probs:
        print(f"{record.char!r} should occur {record.p:.4f}")

    freqs = sample_counts(probs, random.Random(seed), trials)
    print(f"\nactual distribution after {trials:,} trials:")
    for record, freq in zip(probs, freqs):
        print(f"{record.char!r} occurred {freq:.4f}")


def preview_model(corpus_path: pathlib.Path, window_length: int = 2, max_rows: int = 10) -> None:
    if not corpus_path.exists():
        raise SystemExit(f"Corpus not found: {corpus_path}")

    lm = LanguageModel(window_length, seed=20)
    lm.train_file(corpus_path, progress=True)
    lm.finalize_probabilities()

    print("\n[Model Preview]")
    print(f"Window length: {window_length}")
    print(f"Distinct windows: {len(lm):,}")
    print(f"\nFirst {max_rows} windows (window : ((char count p cp) ...)):")
    for line in str(lm).splitlines()[:max_rows]:
        print(repr(line))


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--corpus", type=str, default=None)
    p.add_argument("--window-length", type=int, default=2)
    p.add_argument("--trials", type=int, default=10000)
    p.add_argument("--rows", type=int, default=10)
    args = p.parse_args()

    preview_sampling(trials=args.trials)
    if args.corpus is not None:
        preview_model(pathlib.Path(args.corpus), window_length=args.window_length, max_rows=args.rows)


if __name__ == "__main__":
    main()
