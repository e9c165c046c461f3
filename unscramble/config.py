from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Game defaults.
MAX_ROUNDS = 10
SCORE_INCREASE = 20
EMPTY_INPUT_ERROR = "Must not be empty!"


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """
    Settings read once at startup.

    Fields map to environment variables (a `.env` file is honored by the app
    entry point through python-dotenv):

    - `max_rounds`     : UNSCRAMBLE_MAX_ROUNDS      (default 10)
    - `score_increase` : UNSCRAMBLE_SCORE_INCREASE  (default 20)
    - `wordlist_path`  : UNSCRAMBLE_WORDLIST        (optional file, one word per line)
    - `seed`           : UNSCRAMBLE_SEED            (optional, for reproducible games)
    - `offline`        : OFFLINE_MODE               (default "true"; disables LLM hints)
    - `openai_api_key` : OPENAI_API_KEY
    - `model_name`     : MODEL_NAME                 (default "gpt-4o")
    - `log_level`      : LOG_LEVEL                  (default "WARNING")
    """

    max_rounds: int = MAX_ROUNDS
    score_increase: int = SCORE_INCREASE
    wordlist_path: Optional[str] = None
    seed: Optional[int] = None
    offline: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o"
    log_level: str = "WARNING"

    @property
    def max_score(self) -> int:
        return self.max_rounds * self.score_increase

    @property
    def hints_enabled(self) -> bool:
        return not self.offline and bool(self.openai_api_key)


def load_config() -> GameConfig:
    """Build a `GameConfig` from the current process environment."""
    return GameConfig(
        max_rounds=_env_int("UNSCRAMBLE_MAX_ROUNDS", MAX_ROUNDS),
        score_increase=_env_int("UNSCRAMBLE_SCORE_INCREASE", SCORE_INCREASE),
        wordlist_path=os.getenv("UNSCRAMBLE_WORDLIST") or None,
        seed=_env_optional_int("UNSCRAMBLE_SEED"),
        offline=os.getenv("OFFLINE_MODE", "true").lower() == "true",
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        model_name=os.getenv("MODEL_NAME", "gpt-4o"),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
