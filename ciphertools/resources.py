"""Reading the word list and quadgram counts off disk, plus reading text files."""

from typing import List, Tuple

from .transforms import IDX

DEFAULT_DICTIONARY = "dictionary.txt"
DEFAULT_QUADGRAMS = "english_quadgrams.txt"


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_dictionary(path: str) -> List[str]:
    """One word per line; blank lines are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def load_quadgrams(path: str) -> List[Tuple[str, int]]:
    """Parse `QUAD,COUNT` lines into (quadgram, count) pairs."""
    pairs = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            quad, sep, count = line.partition(",")
            quad = quad.strip().upper()
            if not sep:
                raise ValueError(f"{path}:{lineno}: expected QUADGRAM,COUNT")
            if len(quad) != 4 or any(ch not in IDX for ch in quad):
                raise ValueError(f"{path}:{lineno}: invalid quadgram {quad!r}")
            try:
                n = int(count)
            except ValueError:
                raise ValueError(f"{path}:{lineno}: invalid count {count.strip()!r}")
            if n < 0:
                raise ValueError(f"{path}:{lineno}: negative count {n}")
            pairs.append((quad, n))
    return pairs
