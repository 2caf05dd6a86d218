from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List


@dataclass
class CharData:
    """One character observed after a window, with its count and probabilities.

    `p` and `cp` stay at 0.0 until the owning distribution is finalized.
    """

    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class CharDistribution:
    """Successor characters of one window, kept in first-occurrence order.

    The order matters: cumulative probabilities are accumulated along it, so
    two distributions with equal counts but a different order sample
    differently.
    """

    def __init__(self) -> None:
        self._records: List[CharData] = []

    def update(self, char: str) -> None:
        """Count one more occurrence of `char`, appending a new record on first sight."""
        index = self.index_of(char)
        if index == -1:
            self._records.append(CharData(char))
        else:
            self._records[index].count += 1

    def index_of(self, char: str) -> int:
        for index, record in enumerate(self._records):
            if record.char == char:
                return index
        return -1

    def get(self, index: int) -> CharData:
        if index < 0 or index >= len(self._records):
            raise IndexError(index)
        return self._records[index]

    @property
    def size(self) -> int:
        return len(self._records)

    @property
    def total_count(self) -> int:
        return sum(record.count for record in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._records)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.index_of(char) != -1

    def __str__(self) -> str:
        return "(" + " ".join(str(record) for record in self._records) + ")"
