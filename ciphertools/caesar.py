"""Caesar cipher: encryption and dictionary-validated brute force over all 26 rotations."""

from typing import FrozenSet, Iterable, List, NamedTuple, Optional

from .transforms import M, clean, join_with_spaces, rotate, rotate_all, split_by_spaces


class CaesarCandidate(NamedTuple):
    rotation: int      # amount applied to the ciphertext
    plaintext: str
    matches: int       # words found in the dictionary

    @property
    def shift(self) -> int:
        """Encryption shift undone by this rotation."""
        return (M - self.rotation) % M


def encrypt_caesar(text: str, amount: int) -> str:
    return rotate(text, amount)


def make_dictionary(words: Iterable[str]) -> FrozenSet[str]:
    """Normalise a word list to a frozenset of cleaned uppercase words."""
    return frozenset(w for w in map(clean, words) if w)


def count_words_in(words: Iterable[str], dictionary: FrozenSet[str]) -> int:
    return sum(1 for w in words if w in dictionary)


def break_caesar(ciphertext: str, dictionary: Iterable[str]) -> Optional[List[CaesarCandidate]]:
    """Try all rotations and keep those where a strict majority of words are in the dictionary.

    Returns the qualifying candidates by increasing rotation, or None when no
    rotation qualifies.
    """
    dictionary = make_dictionary(dictionary)
    words = [clean(w) for w in split_by_spaces(ciphertext)]

    results = []
    for amount in range(M):
        rotated = rotate_all(words, amount)
        hits = count_words_in(rotated, dictionary)
        if hits > len(rotated) // 2:
            results.append(CaesarCandidate(amount, join_with_spaces(rotated), hits))
    return results or None
