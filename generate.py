from __future__ import annotations

import argparse
import pathlib
import sys
from dataclasses import dataclass
from typing import List, Optional

from language_model import LanguageModel

# Seed used whenever the mode token is not "random".
FIXED_SEED = 20
RANDOM_MODE = "random"


@dataclass
class GenerateConfig:
    window_length: int
    initial_text: str
    text_length: int
    random_mode: bool
    corpus_path: pathlib.Path

    @property
    def seed(self) -> Optional[int]:
        return None if self.random_mode else FIXED_SEED

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "GenerateConfig":
        p = argparse.ArgumentParser(description="Generate text from a windowed character model.")
        p.add_argument("window_length", type=int)
        p.add_argument("initial_text", type=str)
        p.add_argument("generated_text_length", type=int)
        p.add_argument("mode", type=str, help='"random" for a non-reproducible run, anything else for a fixed seed')
        p.add_argument("file_name", type=str)
        # "--" keeps seed texts such as "-a" positional
        args = p.parse_args(["--", *(sys.argv[1:] if argv is None else argv)])
        return cls(
            window_length=args.window_length,
            initial_text=args.initial_text,
            text_length=args.generated_text_length,
            random_mode=args.mode == RANDOM_MODE,
            corpus_path=pathlib.Path(args.file_name),
        )


def main(argv: Optional[List[str]] = None) -> None:
    cfg = GenerateConfig.from_args(argv)

    if not cfg.corpus_path.exists():
        raise SystemExit(f"Corpus not found: {cfg.corpus_path}")

    lm = LanguageModel(cfg.window_length, seed=cfg.seed)
    lm.train_file(cfg.corpus_path)
    lm.finalize_probabilities()
    print(lm.generate(cfg.initial_text, cfg.text_length))


if __name__ == "__main__":
    main()
