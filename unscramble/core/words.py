from __future__ import annotations

import logging
import random
from typing import AbstractSet, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class VocabularyError(ValueError):
    """Raised when a vocabulary cannot support a full game."""


def scramble_word(word: str, rng: random.Random) -> str:
    """
    Return a random permutation of `word` that is not `word` itself.

    Identity shuffles are common for short words ("on" has a 50% chance), so
    shuffling is retried until the result differs.

    Raises
    ------
    ValueError
        If `word` has fewer than two distinct characters; no permutation of
        such a word can differ from the input word.
    """
    if len(set(word)) < 2:
        raise ValueError(f"cannot scramble {word!r}: needs at least two distinct characters")

    chars = list(word)
    while True:
        rng.shuffle(chars)
        scrambled = "".join(chars)
        if scrambled != word:
            return scrambled


def validate_vocabulary(words: Iterable[str], max_rounds: int) -> None:
    """
    Check once, up front, that `words` can sustain a game of `max_rounds` rounds.

    Rules
    -----
    - The vocabulary must not be empty.
    - Every word must be scramblable (two or more distinct characters).
    - There must be at least `max_rounds` distinct words, otherwise picking an
      unused word would loop forever in the final rounds.
    """
    distinct = set(words)
    if not distinct:
        raise VocabularyError("vocabulary is empty")
    bad = sorted(w for w in distinct if len(set(w)) < 2)
    if bad:
        raise VocabularyError(f"vocabulary contains words that cannot be scrambled: {bad}")
    if len(distinct) < max_rounds:
        raise VocabularyError(
            f"vocabulary has {len(distinct)} distinct words but a game needs {max_rounds}"
        )


class WordSource:
    """Picks unused words from a fixed vocabulary and scrambles them."""

    def __init__(self, vocabulary: Iterable[str], rng: Optional[random.Random] = None) -> None:
        self.vocabulary: Tuple[str, ...] = tuple(vocabulary)
        if not self.vocabulary:
            raise VocabularyError("vocabulary is empty")
        self._rng = rng or random.Random()

    def pick_word(self, excluding: AbstractSet[str] = frozenset()) -> Tuple[str, str]:
        """
        Return `(answer, scrambled)` for a random word not in `excluding`.

        The caller owns `excluding` and is responsible for recording `answer`
        in it; this method never mutates it. The caller must also ensure that
        `excluding` does not cover the whole vocabulary.
        """
        answer = self._rng.choice(self.vocabulary)
        while answer in excluding:
            answer = self._rng.choice(self.vocabulary)

        scrambled = scramble_word(answer, self._rng)
        logger.debug("Picked %r (scrambled as %r)", answer, scrambled)
        return answer, scrambled
