"""Quadgram (tetragram) log-probability scoring of English-likeness.

Usage:
  scorer = QuadgramScorer(load_quadgrams("english_quadgrams.txt"))
  scorer.score_text("Attack at dawn")   # higher is more English-like

Every overlapping 4-letter window of the cleaned text contributes
log10(count / total); windows missing from the table contribute the floor
log10(FLOOR_COUNT / total).
"""

import math
from typing import Iterable, Tuple

import numpy as np

from .transforms import ALPHABET, IDX, LETTERS, M, clean

# Returned for texts with fewer than 4 letters: "too short to evaluate".
SHORT_TEXT_SCORE = -1000.0
# Pseudo-count given to quadgrams never seen in the training data.
FLOOR_COUNT = 0.01

_PLACES = np.array([M**3, M**2, M, 1], dtype=np.int64)


def quadgram_index(q: str) -> int:
    """Base-26 value of a 4-letter uppercase quadgram."""
    if len(q) != 4 or any(ch not in IDX for ch in q):
        raise ValueError(f"Invalid quadgram: {q!r}")
    return ((IDX[q[0]] * M + IDX[q[1]]) * M + IDX[q[2]]) * M + IDX[q[3]]


class QuadgramScorer:
    """Immutable quadgram table built once and shared by all searches."""

    def __init__(self, quadgrams: Iterable[Tuple[str, int]]):
        counts = {}
        for q, n in quadgrams:
            q = q.upper()
            quadgram_index(q)
            if n < 0:
                raise ValueError(f"Negative count for quadgram {q}: {n}")
            counts[q] = counts.get(q, 0) + n
        total = sum(counts.values())
        if total <= 0:
            raise ValueError("Quadgram table is empty")

        self.total = total
        self.floor = math.log10(FLOOR_COUNT / total)
        table = np.full(M**4, self.floor, dtype=np.float64)
        for q, n in counts.items():
            if n > 0:
                table[quadgram_index(q)] = math.log10(n / total)
        table.setflags(write=False)
        self._table = table
        self._size = len(counts)

    def __len__(self):
        return self._size

    def score(self, quadgram: str) -> float:
        """Log-probability of one quadgram, or the floor if unseen."""
        if len(quadgram) != 4 or any(ch not in LETTERS for ch in quadgram):
            return self.floor
        return float(self._table[quadgram_index(quadgram.upper())])

    def score_text(self, text: str) -> float:
        """Sum of quadgram scores over the sliding window of the cleaned text."""
        s = clean(text)
        if len(s) < 4:
            return SHORT_TEXT_SCORE
        letters = np.frombuffer(s.encode('ascii'), dtype=np.uint8).astype(np.int64) - ord(ALPHABET[0])
        n = len(letters) - 3
        windows = np.stack([letters[i:i + n] for i in range(4)], axis=1)
        return float(self._table[windows @ _PLACES].sum())
