from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from unscramble.config import GameConfig, load_config

logger = logging.getLogger(__name__)


# Reject a hint if it gives away the answer outright (case-insensitive).
def _contains_answer(text: str, answer: str) -> bool:
    return answer.lower() in (text or "").lower()


def _local_fallback_hint(answer: str) -> str:
    """Always-available local hint (simple and safe)."""
    return f"The word has {len(answer)} letters and starts with '{answer[0].upper()}'."


def llm_hint(
    answer: str,
    scrambled: str,
    config: Optional[GameConfig] = None,
    temperature: float = 0.8,
) -> str:
    """
    Return ONE hint for the word behind `scrambled`; fallback locally on failure.

    Rules
    -----
    - `config` defaults to `load_config()`. Offline mode (the default) or a
      missing API key -> local hint.
    - Accept any reply as long as it is non-empty and does NOT contain the answer.
    - On any API error or rule violation, return the deterministic local hint.
    """
    config = config or load_config()
    if not config.hints_enabled:
        return _local_fallback_hint(answer)

    client = OpenAI(api_key=config.openai_api_key)

    system = "You are a helpful clue-giver for a word-unscramble game."
    user = (
        f"The player sees the scrambled letters '{scrambled}' and must find the word '{answer}'. "
        "Give exactly ONE short, natural-sounding hint about the word's meaning. "
        "Do NOT include the word itself. Reply with the hint only."
    )

    try:
        resp = client.chat.completions.create(
            model=config.model_name,
            messages=[{"role": "system", "content": system},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=80,
        )
        text = (resp.choices[0].message.content or "").strip()
    except Exception:
        logger.warning("Hint request failed; using local hint", exc_info=True)
        return _local_fallback_hint(answer)

    if not text or _contains_answer(text, answer):
        return _local_fallback_hint(answer)
    # Soft cap around 25 words
    words = text.split()
    if len(words) > 25:
        text = " ".join(words[:25])
    return text


__all__ = ["llm_hint"]
