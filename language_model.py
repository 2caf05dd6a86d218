from __future__ import annotations

import pathlib
import random
from typing import Dict, Iterable, List, Optional, Union

from tqdm import tqdm

from char_data import CharDistribution
from corpus import CharReader, FileCharReader, TextCharReader, read_chars
from sampling import sample_char

# Generation keeps going until the text is longer than text_length + 5.
GENERATION_OVERSHOOT = 5


class LanguageModel:
    """Character model mapping each fixed-length window to its successor distribution.

    Construct with a `seed` for reproducible generation, or leave it out for an
    entropy-seeded generator. A ready `random.Random` can be injected via `rng`,
    which takes precedence over `seed`.

    Lifecycle: `train` collects counts, `finalize_probabilities` turns them into
    p/cp, then `generate` samples from the finalized map without modifying it.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        if window_length <= 0:
            raise ValueError("window_length must be positive")
        self.window_length = window_length
        self.rng = rng if rng is not None else random.Random(seed)
        self.char_data_map: Dict[str, CharDistribution] = {}

    def train(self, reader: CharReader, progress: bool = False) -> None:
        """Accumulate successor counts for every window of the stream."""
        chars: Iterable[str] = read_chars(reader)
        if progress:
            chars = tqdm(chars, desc="train", unit="char")

        window = ""
        for char in chars:
            if len(window) < self.window_length:
                window += char
                continue
            probs = self.char_data_map.get(window)
            if probs is None:
                probs = CharDistribution()
                self.char_data_map[window] = probs
            probs.update(char)
            window = window[1:] + char

    def train_text(self, text: str, progress: bool = False) -> None:
        self.train(TextCharReader(text), progress=progress)

    def train_file(self, path: Union[str, pathlib.Path], encoding: str = "utf-8", progress: bool = False) -> None:
        with FileCharReader(path, encoding=encoding) as reader:
            self.train(reader, progress=progress)

    @staticmethod
    def calculate_probabilities(probs: CharDistribution) -> None:
        """Set p and cp of every record, accumulating cp in record order."""
        total = probs.total_count
        prev_cp = 0.0
        for record in probs:
            record.p = record.count / total
            record.cp = prev_cp + record.p
            prev_cp = record.cp

    def finalize_probabilities(self) -> None:
        for probs in self.char_data_map.values():
            self.calculate_probabilities(probs)

    def get_random_char(self, probs: CharDistribution) -> str:
        return sample_char(probs, self.rng.random())

    def generate(self, initial_text: str, text_length: int) -> str:
        """Extend `initial_text` by sampling one character at a time.

        Returns `initial_text` unchanged when it is shorter than the window.
        Stops early, returning what was produced so far, when the trailing
        window was never seen in training. Otherwise stops once the text is
        longer than `text_length + GENERATION_OVERSHOOT`, so the result can
        overshoot `text_length` by up to GENERATION_OVERSHOOT + 1 characters.
        """
        if len(initial_text) < self.window_length:
            return initial_text

        generated: List[str] = list(initial_text)
        while len(generated) <= text_length + GENERATION_OVERSHOOT:
            window = "".join(generated[-self.window_length :])
            probs = self.char_data_map.get(window)
            if probs is None:
                break
            generated.append(self.get_random_char(probs))
        return "".join(generated)

    def distribution(self, window: str) -> Optional[CharDistribution]:
        return self.char_data_map.get(window)

    def windows(self) -> List[str]:
        return list(self.char_data_map.keys())

    def __len__(self) -> int:
        return len(self.char_data_map)

    def __contains__(self, window: object) -> bool:
        return window in self.char_data_map

    def __str__(self) -> str:
        return "".join(f"{window} : {probs}\n" for window, probs in self.char_data_map.items())
