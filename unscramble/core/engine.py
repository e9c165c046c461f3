from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, FrozenSet, List, Optional, Set

from unscramble.config import EMPTY_INPUT_ERROR, MAX_ROUNDS, SCORE_INCREASE, GameConfig
from .state import GameSnapshot
from .wordlist import load_wordlist
from .words import WordSource, validate_vocabulary

logger = logging.getLogger(__name__)

Observer = Callable[[GameSnapshot], None]


class GameSession:
    """
    State machine for one word-scramble game.

    The session owns the hidden answer, the used-word set and the player's
    in-progress input. Everything else the UI needs lives in an immutable
    `GameSnapshot` that is replaced (never mutated) by each operation.

    Observers registered with `subscribe` are called synchronously with the
    new snapshot once per snapshot-producing operation, in call order.
    Calls must be serialized by the caller (e.g. a UI event loop).
    """

    def __init__(
        self,
        word_source: Optional[WordSource] = None,
        max_rounds: int = MAX_ROUNDS,
        score_increase: int = SCORE_INCREASE,
    ) -> None:
        """
        Parameters
        ----------
        word_source : WordSource, optional
            Source of scrambled words. Defaults to the built-in vocabulary.
        max_rounds : int
            Number of rounds per game (must be >= 1).
        score_increase : int
            Points awarded for each correct answer (must be >= 1).

        Raises
        ------
        VocabularyError
            If the vocabulary cannot supply `max_rounds` distinct, scramblable words.
        """
        if max_rounds < 1:
            raise ValueError("`max_rounds` must be >= 1.")
        if score_increase < 1:
            raise ValueError("`score_increase` must be >= 1.")

        self.word_source = word_source or WordSource(load_wordlist())
        validate_vocabulary(self.word_source.vocabulary, max_rounds)

        self.max_rounds = max_rounds
        self.score_increase = score_increase

        self._observers: List[Observer] = []
        self._current_answer = ""
        self._used_words: Set[str] = set()
        self._input_value = ""
        self._snapshot = GameSnapshot()

        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameSession":
        """Build a session from startup settings (vocabulary, rounds, scoring, seed)."""
        rng = random.Random(config.seed)
        source = WordSource(load_wordlist(config.wordlist_path), rng=rng)
        return cls(source, max_rounds=config.max_rounds, score_increase=config.score_increase)

    # -- read-only views -------------------------------------------------------

    @property
    def snapshot(self) -> GameSnapshot:
        return self._snapshot

    @property
    def input_value(self) -> str:
        return self._input_value

    @property
    def used_words(self) -> FrozenSet[str]:
        return frozenset(self._used_words)

    @property
    def max_score(self) -> int:
        return self.max_rounds * self.score_increase

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register `observer`; returns a function that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def hint(self, hinter: Callable[[str, str], str]) -> str:
        """Ask `hinter(answer, scrambled)` for a clue without exposing the answer."""
        return hinter(self._current_answer, self._snapshot.scrambled_word)

    # -- operations ------------------------------------------------------------

    def reset(self) -> None:
        """Start a new game: clear used words and input, deal round one."""
        self._used_words.clear()
        self._input_value = ""
        scrambled = self._next_word()
        logger.debug("New game started (%s rounds)", self.max_rounds)
        self._publish(GameSnapshot(scrambled_word=scrambled))

    def update_input(self, text: str) -> None:
        """Replace the in-progress input. No validation and no snapshot change."""
        self._input_value = text

    def submit_or_check(self) -> None:
        """
        Submit the current input.

        Behavior
        --------
        - A guess equal to the answer scores `score_increase`, but only while the
          score *before* the increment is below `max_score`.
        - Any non-empty guess, right or wrong, advances to the next round.
        - An empty guess sets `error_text` and leaves the round unchanged.
        """
        state = self._snapshot
        if self._input_value == self._current_answer and state.score < self.max_score:
            state = replace(state, score=state.score + self.score_increase)
            logger.debug("Correct answer; score is now %s", state.score)

        if self._input_value:
            self._publish(self._advance(state))
        else:
            self._publish(replace(state, error_text=EMPTY_INPUT_ERROR))

    def skip(self) -> None:
        """Move to the next round, or end the game after the last one."""
        self._publish(self._advance(self._snapshot))

    def dismiss_game_over(self) -> None:
        """Leave the game-over state without touching score, stage or word."""
        self._publish(replace(self._snapshot, is_game_over=False))

    # -- internals -------------------------------------------------------------

    def _next_word(self) -> str:
        answer, scrambled = self.word_source.pick_word(excluding=self._used_words)
        self._used_words.add(answer)
        self._current_answer = answer
        return scrambled

    def _advance(self, state: GameSnapshot) -> GameSnapshot:
        self._input_value = ""
        if state.stage + 1 < self.max_rounds:
            return replace(
                state,
                scrambled_word=self._next_word(),
                stage=state.stage + 1,
                error_text="",
            )
        logger.debug("Game over with score %s", state.score)
        return replace(state, is_game_over=True)

    def _publish(self, snapshot: GameSnapshot) -> None:
        self._snapshot = snapshot
        for observer in list(self._observers):
            observer(snapshot)
