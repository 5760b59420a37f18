from ciphertools.caesar import (CaesarCandidate, break_caesar, count_words_in, encrypt_caesar,
                                make_dictionary)

WORDS = ["HELLO", "WORLD"]


def test_hello_world():
    found = break_caesar("KHOOR ZRUOG", WORDS)
    assert found == [CaesarCandidate(23, "HELLO WORLD", 2)]
    assert found[0].shift == 3


def test_punctuation_and_case_are_lost():
    found = break_caesar("Khoor, zruog!", ["hello", "world"])
    assert [c.plaintext for c in found] == ["HELLO WORLD"]


def test_no_good_decryption_is_none():
    assert break_caesar("XYZZY PLUGH", WORDS) is None
    assert break_caesar("", WORDS) is None


def test_majority_is_strict():
    # one of two words matches: 1 > 2 // 2 is false
    assert break_caesar("KHOOR QQQQQ", WORDS) is None
    # two of three words match
    found = break_caesar("KHOOR QQQQQ ZRUOG", WORDS)
    assert [c.matches for c in found] == [2]


def test_every_qualifying_rotation_is_reported_in_order():
    found = break_caesar("b", ["A", "B", "C"])
    assert [c.rotation for c in found] == [0, 1, 25]
    assert [c.plaintext for c in found] == ["B", "C", "A"]


def test_roundtrip_with_encrypt():
    plain = "the quick brown fox"
    enc = encrypt_caesar(plain, 11)
    found = break_caesar(enc, ["THE", "QUICK", "BROWN", "FOX"])
    assert [c.shift for c in found] == [11]
    assert found[0].plaintext == plain.upper()


def test_make_dictionary():
    d = make_dictionary(["hello", " World\n", "", "it's"])
    assert d == frozenset({"HELLO", "WORLD", "ITS"})


def test_frozenset_dictionary_is_normalised_too():
    words = frozenset({"hello", "world"})
    assert make_dictionary(words) == frozenset({"HELLO", "WORLD"})
    found = break_caesar("KHOOR ZRUOG", words)
    assert [c.plaintext for c in found] == ["HELLO WORLD"]


def test_count_words_in():
    d = make_dictionary(WORDS)
    assert count_words_in(["HELLO", "HELLO", "THERE"], d) == 2
