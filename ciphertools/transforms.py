"""Text helpers and the two cipher transforms (rotation and substitution).

Keys are 26-letter uppercase strings: key[i] is what letter ALPHABET[i] turns into.
"""

import string
from typing import Iterable, List

ALPHABET = string.ascii_uppercase
M = len(ALPHABET)
IDX = {ch: i for i, ch in enumerate(ALPHABET)}
LETTERS = frozenset(string.ascii_letters)

# ------------------------------------------------------------------
# Text utilities
# ------------------------------------------------------------------
def clean(s: str) -> str:
    """Remove non-letters and convert to uppercase."""
    return ''.join(ch.upper() for ch in s if ch in LETTERS)

def split_by_spaces(s: str) -> List[str]:
    return s.split()

def join_with_spaces(words: Iterable[str]) -> str:
    return ' '.join(words)

# ------------------------------------------------------------------
# Caesar rotation
# ------------------------------------------------------------------
def rot_char(ch: str, amount: int) -> str:
    return ALPHABET[(IDX[ch] + amount) % M]

def rotate(text: str, amount: int) -> str:
    """Uppercase and rotate letters, keep whitespace, drop everything else."""
    amount %= M
    result = []
    for ch in text:
        if ch in LETTERS:
            result.append(rot_char(ch.upper(), amount))
        elif ch.isspace():
            result.append(ch)
    return ''.join(result)

def rotate_all(texts: Iterable[str], amount: int) -> List[str]:
    return [rotate(t, amount) for t in texts]

# ------------------------------------------------------------------
# Substitution keys
# ------------------------------------------------------------------
def validate_key(key: str) -> str:
    """Return the key uppercased, or raise ValueError if it is not a permutation of A-Z."""
    if not isinstance(key, str):
        key = ''.join(key)
    key = key.upper()
    if len(key) != M or set(key) != set(ALPHABET):
        raise ValueError("Invalid key: it must contain 26 unique letters (A-Z).")
    return key

def invert_key(key: str) -> str:
    key = validate_key(key)
    inv = [''] * M
    for i, ch in enumerate(key):
        inv[IDX[ch]] = ALPHABET[i]
    return ''.join(inv)

def caesar_key(amount: int) -> str:
    return ''.join(ALPHABET[(i + amount) % M] for i in range(M))

def random_key(rng) -> str:
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return ''.join(letters)

# ------------------------------------------------------------------
# Substitution
# ------------------------------------------------------------------
def substitute_unchecked(key: str, text: str) -> str:
    # key is assumed to be a valid uppercase permutation
    table = dict(zip(ALPHABET, key))
    table.update(zip(ALPHABET.lower(), key))
    return ''.join(table.get(ch, ch) for ch in text)

def substitute(key: str, text: str) -> str:
    """Uppercase letters and map them through key; everything else is kept."""
    return substitute_unchecked(validate_key(key), text)
