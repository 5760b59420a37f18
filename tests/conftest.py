from collections import Counter

import pytest

from ciphertools.quadgrams import QuadgramScorer
from ciphertools.transforms import clean

PASSAGE = (
    "It was the best of times, it was the worst of times, it was the age of wisdom, "
    "it was the age of foolishness, it was the epoch of belief, it was the epoch of "
    "incredulity, it was the season of light, it was the season of darkness, it was "
    "the spring of hope, it was the winter of despair, we had everything before us, "
    "we had nothing before us, we were all going direct to heaven, we were all going "
    "direct the other way."
)


def quadgram_counts(text):
    s = clean(text)
    return Counter(s[i:i + 4] for i in range(len(s) - 3))


@pytest.fixture
def passage():
    return PASSAGE


@pytest.fixture
def scorer():
    return QuadgramScorer(quadgram_counts(PASSAGE).items())
