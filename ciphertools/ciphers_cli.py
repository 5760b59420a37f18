#!/usr/bin/env python3
"""
Ciphers: interactive Caesar / substitution cipher tool.

Usage:
  ciphers
  ciphers --seed 42 --dictionary dictionary.txt --quadgrams english_quadgrams.txt
  ciphers --workers 4          # run substitution restarts in parallel

Menu commands (case does not matter):
  C - Encrypt with Caesar Cipher
  D - Decrypt Caesar Cipher
  E - Compute English-ness Score
  A - Apply Random Substitution Cipher
  S - Decrypt Substitution Cipher from Console
  F - Decrypt Substitution Cipher from File
  R - Set Random Seed for Testing
  X - Exit Program

Text and numbers are read one line at a time from standard input.
"""

import argparse
import sys

from .caesar import break_caesar, encrypt_caesar, make_dictionary
from .quadgrams import QuadgramScorer
from .randsource import RandomSource
from .resources import (DEFAULT_DICTIONARY, DEFAULT_QUADGRAMS, load_dictionary,
                        load_quadgrams, read_text)
from .substitution import PATIENCE, RESTARTS, break_cipher, break_cipher_parallel, encrypt_random

MENU = """Ciphers Menu
------------
C - Encrypt with Caesar Cipher
D - Decrypt Caesar Cipher
E - Compute English-ness Score
A - Apply Random Substitution Cipher
S - Decrypt Substitution Cipher from Console
F - Decrypt Substitution Cipher from File
R - Set Random Seed for Testing
X - Exit Program"""


class Session:
    """Resources loaded once at startup plus the shared random source."""

    def __init__(self, dictionary, scorer, rng, restarts=RESTARTS, patience=PATIENCE, workers=None):
        self.dictionary = dictionary
        self.scorer = scorer
        self.rng = rng
        self.restarts = restarts
        self.patience = patience
        self.workers = workers

    def solve_substitution(self, ciphertext: str) -> str:
        if self.workers is not None:
            best = break_cipher_parallel(ciphertext, self.scorer, self.rng, self.restarts,
                                         self.patience, workers=self.workers)
        else:
            best = break_cipher(ciphertext, self.scorer, self.rng, self.restarts, self.patience)
        return best.plaintext


# ===============================
# Commands
# ===============================

def caesar_encrypt_command(session):
    text = input()
    amount = int(input())
    print(encrypt_caesar(text, amount))

def caesar_decrypt_command(session):
    text = input()
    found = break_caesar(text, session.dictionary)
    if found is None:
        print("No good decryptions found")
        return
    for cand in found:
        print(cand.plaintext)

def englishness_command(session):
    text = input()
    print(session.scorer.score_text(text))

def random_substitution_command(session):
    text = input()
    _, enc = encrypt_random(text, session.rng)
    print(enc)

def substitution_decrypt_command(session):
    text = input()
    print(session.solve_substitution(text))

def substitution_file_command(session):
    infile = input("Enter input filename: ")
    outfile = input("Enter output filename: ")
    try:
        ciphertext = read_text(infile)
        out = open(outfile, "w", encoding="utf-8")
    except OSError as e:
        print("Error:", e)
        return
    with out:
        out.write(session.solve_substitution(ciphertext))
    print("Decryption complete.")

def reseed_command(session):
    seed_str = input("Enter a non-negative integer to seed the random number generator: ")
    session.rng.seed(int(seed_str))

COMMANDS = {
    "C": caesar_encrypt_command,
    "D": caesar_decrypt_command,
    "E": englishness_command,
    "A": random_substitution_command,
    "S": substitution_decrypt_command,
    "F": substitution_file_command,
    "R": reseed_command,
}


def run_menu(session):
    print("Welcome to Ciphers!")
    print("-------------------")
    print()
    while True:
        print(MENU)
        try:
            command = input("\nEnter a command (case does not matter): ").strip().upper()
        except EOFError:
            break
        print()
        if command == "X":
            break
        handler = COMMANDS.get(command)
        if handler is not None:
            try:
                handler(session)
            except ValueError as e:
                print("Error:", e)
            except EOFError:
                break
        print()


# ===============================
# CLI
# ===============================

def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Caesar and substitution cipher breaker")
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="Word list, one word per line")
    parser.add_argument("--quadgrams", default=DEFAULT_QUADGRAMS, help="Quadgram counts, QUAD,COUNT per line")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: current time)")
    parser.add_argument("--restarts", type=int, default=RESTARTS, help="Hill-climb restarts per substitution attack")
    parser.add_argument("--patience", type=int, default=PATIENCE,
                        help="Non-improving swaps before a climb stops")
    parser.add_argument("--workers", type=positive_int, default=None,
                        help="Run restarts in this many processes (output differs from sequential mode)")
    args = parser.parse_args(argv)

    try:
        dictionary = make_dictionary(load_dictionary(args.dictionary))
        scorer = QuadgramScorer(load_quadgrams(args.quadgrams))
    except (OSError, ValueError) as e:
        print("Error:", e, file=sys.stderr)
        return 1

    session = Session(dictionary, scorer, RandomSource(args.seed),
                      restarts=args.restarts, patience=args.patience, workers=args.workers)
    run_menu(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
