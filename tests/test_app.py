"""Streamlit screen tests driven through ``streamlit.testing.v1.AppTest``.

A two-round game with a fixed seed is played end to end: empty submit,
correct submit, skip into game over, exit, and play again. The first answer
is reproduced with a ``WordSource`` seeded the same way as the app's.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from unscramble.config import EMPTY_INPUT_ERROR
from unscramble.core.wordlist import DEFAULT_WORDS
from unscramble.core.words import WordSource

APP_PATH = Path(__file__).resolve().parent.parent / "unscramble_app.py"
SEED = 1234


# -- helpers ------------------------------------------------------------------


@pytest.fixture
def app(monkeypatch) -> AppTest:
    monkeypatch.setenv("UNSCRAMBLE_MAX_ROUNDS", "2")
    monkeypatch.setenv("UNSCRAMBLE_SCORE_INCREASE", "20")
    monkeypatch.setenv("UNSCRAMBLE_SEED", str(SEED))
    monkeypatch.setenv("OFFLINE_MODE", "true")
    for name in ("UNSCRAMBLE_WORDLIST", "OPENAI_API_KEY", "MODEL_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    at = AppTest.from_file(str(APP_PATH), default_timeout=10)
    at.run()
    assert not at.exception
    return at


def _first_round() -> tuple[str, str]:
    return WordSource(DEFAULT_WORDS, rng=random.Random(SEED)).pick_word()


def _button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


def _labels(at: AppTest) -> list[str]:
    return [b.label for b in at.button]


def _snapshot(at: AppTest):
    return at.session_state["game"].snapshot


# -- tests --------------------------------------------------------------------


def test_first_screen_shows_round_one_puzzle(app):
    answer, scrambled = _first_round()
    snap = _snapshot(app)
    assert snap.scrambled_word == scrambled
    assert (snap.score, snap.stage, snap.is_game_over) == (0, 0, False)
    assert any(scrambled in m.value for m in app.markdown)
    assert app.metric[0].value == "1 / 2"
    assert app.text_input[0].label == "Enter your word"
    assert "Exit" not in _labels(app)


def test_full_game_flow(app):
    answer, _ = _first_round()

    # Empty submission shows the validation message on the input.
    _button(app, "Submit").click().run()
    assert not app.exception
    assert _snapshot(app).error_text == EMPTY_INPUT_ERROR
    assert app.error[0].value == EMPTY_INPUT_ERROR
    assert app.text_input[0].label == EMPTY_INPUT_ERROR
    assert _snapshot(app).stage == 0

    # Correct answer scores and moves to round two.
    app.text_input[0].input(answer)
    _button(app, "Submit").click().run()
    snap = _snapshot(app)
    assert (snap.score, snap.stage, snap.error_text) == (20, 1, "")
    assert len(app.error) == 0
    assert app.metric[0].value == "2 / 2"

    # Skipping the last round ends the game and shows the final score.
    _button(app, "Skip").click().run()
    snap = _snapshot(app)
    assert snap.is_game_over is True
    assert snap.stage == 1
    assert "You scored 20" in app.success[0].value
    assert {"Exit", "Play Again"} <= set(_labels(app))

    # Exit dismisses the game-over state and shows the goodbye screen.
    _button(app, "Exit").click().run()
    snap = _snapshot(app)
    assert snap.is_game_over is False
    assert (snap.score, snap.stage) == (20, 1)
    assert app.info[0].value == "Thanks for playing!"
    assert _labels(app) == ["Play Again"]

    # Play Again starts a fresh game.
    _button(app, "Play Again").click().run()
    snap = _snapshot(app)
    assert (snap.score, snap.stage, snap.is_game_over) == (0, 0, False)
    assert all(i.value != "Thanks for playing!" for i in app.info)
    assert "Submit" in _labels(app)


def test_offline_hint_is_shown(app):
    answer, _ = _first_round()
    _button(app, "✨ Get a hint").click().run()
    assert not app.exception
    expected = f"The word has {len(answer)} letters and starts with '{answer[0].upper()}'."
    assert any(i.value == expected for i in app.info)
