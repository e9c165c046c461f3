from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable view of everything the UI is allowed to see about a game.

    Notes
    -----
    - The snapshot is replaced wholesale after each operation on
      `core.engine.GameSession`; nothing ever mutates an existing instance.
    - The unscrambled answer is deliberately absent. The session keeps it
      privately so a UI can render the snapshot without leaking the solution.
    """

    scrambled_word: str = ""
    score: int = 0
    stage: int = 0
    error_text: str = ""
    is_game_over: bool = False

    def __post_init__(self) -> None:
        """
        Validate numeric fields.

        Validation
        ----------
        - `score` must be >= 0.
        - `stage` must be >= 0.
        """
        if self.score < 0:
            raise ValueError("`score` must be >= 0.")
        if self.stage < 0:
            raise ValueError("`stage` must be >= 0.")

    @property
    def display_stage(self) -> int:
        """One-based round number as shown to the player."""
        return self.stage + 1

    @property
    def has_error(self) -> bool:
        return bool(self.error_text)
