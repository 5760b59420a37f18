"""Monoalphabetic substitution: random encryption and hill-climbing cryptanalysis.

The attack scores candidate decryptions with a QuadgramScorer:
 - climb_once: start from a random key, keep swapping two letters and accept a
   swap only if it strictly improves the score; stop after PATIENCE
   non-improving swaps in a row.
 - break_cipher: RESTARTS climbs on one shared random stream, best one wins.
 - break_cipher_parallel: the same restarts spread over processes, each with
   its own stream seeded from the parent stream. Reproducible for a fixed
   seed, but not the same draws as break_cipher.
"""

from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Callable, NamedTuple, Optional, Tuple

from .quadgrams import QuadgramScorer
from .randsource import RandomSource
from .transforms import M, random_key, substitute, substitute_unchecked

RESTARTS = 25
PATIENCE = 1000


class Candidate(NamedTuple):
    key: str
    plaintext: str
    score: float


def encrypt_random(text: str, rng: RandomSource) -> Tuple[str, str]:
    """Encrypt text under a freshly drawn random key. Returns (key, ciphertext)."""
    key = random_key(rng)
    return key, substitute(key, text)


def swap_positions(rng: RandomSource) -> Tuple[int, int]:
    """Two distinct random key positions (reject and redraw on a clash)."""
    i = rng.rand_int(M - 1)
    j = rng.rand_int(M - 1)
    while j == i:
        j = rng.rand_int(M - 1)
    return i, j


# ----------------- hill climbing -----------------

def climb_once(ciphertext: str, scorer: QuadgramScorer, rng: RandomSource,
               patience: int = PATIENCE,
               on_accept: Optional[Callable[[Candidate], None]] = None) -> Candidate:
    key = random_key(rng)
    plain = substitute_unchecked(key, ciphertext)
    best = Candidate(key, plain, scorer.score_text(plain))
    if on_accept:
        on_accept(best)

    trials = 0
    while trials < patience:
        i, j = swap_positions(rng)
        lst = list(best.key)
        lst[i], lst[j] = lst[j], lst[i]
        cand_key = ''.join(lst)
        plain = substitute_unchecked(cand_key, ciphertext)
        sc = scorer.score_text(plain)
        if sc > best.score:
            best = Candidate(cand_key, plain, sc)
            trials = 0
            if on_accept:
                on_accept(best)
        else:
            trials += 1
    return best


def _best_of(candidates) -> Candidate:
    best = None
    for cand in candidates:
        if best is None or cand.score > best.score:
            best = cand
    return best


def break_cipher(ciphertext: str, scorer: QuadgramScorer, rng: RandomSource,
                 restarts: int = RESTARTS, patience: int = PATIENCE) -> Candidate:
    """Best decryption over `restarts` climbs drawn from one random stream."""
    if restarts < 1:
        raise ValueError("restarts must be >= 1")
    return _best_of(climb_once(ciphertext, scorer, rng, patience) for _ in range(restarts))


def break_cipher_parallel(ciphertext: str, scorer: QuadgramScorer, rng: RandomSource,
                          restarts: int = RESTARTS, patience: int = PATIENCE,
                          workers: Optional[int] = None) -> Candidate:
    """Like break_cipher, but each restart runs in a worker process on its own seeded stream."""
    if restarts < 1:
        raise ValueError("restarts must be >= 1")
    sources = rng.spawn(restarts)
    with ProcessPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(climb_once, repeat(ciphertext), repeat(scorer),
                                sources, repeat(patience)))
    return _best_of(results)
