"""WordSource and scrambling tests."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from unscramble.core.wordlist import DEFAULT_WORDS
from unscramble.core.words import VocabularyError, WordSource, scramble_word, validate_vocabulary


# -- scramble_word ------------------------------------------------------------


@pytest.mark.parametrize("word", ["on", "aab", "seed", "banana", "kaleidoscope"])
def test_scramble_is_a_different_permutation(word):
    rng = random.Random(0)
    for _ in range(50):
        scrambled = scramble_word(word, rng)
        assert scrambled != word
        assert Counter(scrambled) == Counter(word)


def test_two_letter_word_always_swaps():
    rng = random.Random(3)
    assert {scramble_word("on", rng) for _ in range(20)} == {"no"}


@pytest.mark.parametrize("word", ["", "a", "zzz"])
def test_unscramblable_words_raise(word):
    with pytest.raises(ValueError):
        scramble_word(word, random.Random(0))


# -- validate_vocabulary ------------------------------------------------------


def test_builtin_vocabulary_supports_default_game():
    validate_vocabulary(DEFAULT_WORDS, 10)


def test_validate_rejects_empty_vocabulary():
    with pytest.raises(VocabularyError):
        validate_vocabulary([], 1)


def test_validate_rejects_unscramblable_word():
    with pytest.raises(VocabularyError, match="aaa"):
        validate_vocabulary(["apple", "aaa", "lemon"], 2)


def test_validate_counts_distinct_words_only():
    with pytest.raises(VocabularyError):
        validate_vocabulary(["apple", "apple", "apple"], 2)
    validate_vocabulary(["apple", "apple", "lemon"], 2)


# -- WordSource ---------------------------------------------------------------


def test_empty_source_raises():
    with pytest.raises(VocabularyError):
        WordSource([])


def test_pick_word_skips_excluded_words():
    vocab = ("apple", "lemon", "mango")
    source = WordSource(vocab, rng=random.Random(11))
    for _ in range(30):
        answer, scrambled = source.pick_word(excluding={"apple", "lemon"})
        assert answer == "mango"
        assert scrambled != "mango"
        assert sorted(scrambled) == sorted("mango")


def test_pick_word_does_not_mutate_exclusion_set():
    source = WordSource(("apple", "lemon"), rng=random.Random(2))
    excluding = {"apple"}
    source.pick_word(excluding=excluding)
    assert excluding == {"apple"}


def test_seeded_sources_are_reproducible():
    a = WordSource(DEFAULT_WORDS, rng=random.Random(42))
    b = WordSource(DEFAULT_WORDS, rng=random.Random(42))
    assert [a.pick_word() for _ in range(5)] == [b.pick_word() for _ in range(5)]
