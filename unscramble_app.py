from __future__ import annotations

import logging

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from unscramble.config import GameConfig, load_config
from unscramble.core.engine import GameSession
from unscramble.core.state import GameSnapshot

# --- Generative AI services ---
from unscramble.services.hints import llm_hint  # AI hint (with local fallback)


# =======================================
# Session-state helpers & game management
# =======================================

def _init_logging(config: GameConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_session() -> GameSession:
    """Ensure a GameSession exists in Streamlit session state; create one if missing."""
    if "game" not in st.session_state or not isinstance(st.session_state["game"], GameSession):
        config = load_config()
        _init_logging(config)
        st.session_state["config"] = config
        st.session_state["game"] = GameSession.from_config(config)
    st.session_state.setdefault("hint", None)
    st.session_state.setdefault("exited", False)
    return st.session_state["game"]


def _play_again() -> None:
    st.session_state["game"].reset()
    st.session_state["hint"] = None
    st.session_state["exited"] = False


def _exit_game() -> None:
    st.session_state["game"].dismiss_game_over()
    st.session_state["exited"] = True


# =========
# The App
# =========

def _render_status(snap: GameSnapshot, game: GameSession) -> None:
    c1, c2 = st.columns(2)
    c1.metric("Word", f"{snap.display_stage} / {game.max_rounds}")
    c2.metric("Score", snap.score)


def _render_final_score(snap: GameSnapshot) -> None:
    st.success(f"🎉 Congratulations! You scored {snap.score}.")
    c1, c2 = st.columns(2)
    c1.button("Exit", on_click=_exit_game, use_container_width=True)
    c2.button("Play Again", on_click=_play_again, type="primary", use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Unscramble", page_icon="🔤", layout="centered")
    st.title("🔤 Unscramble")

    game = _ensure_session()

    if st.session_state["exited"]:
        st.info("Thanks for playing!")
        st.button("Play Again", on_click=_play_again)
        st.stop()

    snap = game.snapshot
    _render_status(snap, game)

    # ---- Puzzle ----
    st.markdown(f"## `{snap.scrambled_word}`")
    st.caption("Unscramble the word using all the letters.")

    # ---- Move input ----
    with st.form("guess_form", clear_on_submit=True):
        guess_inp = st.text_input(
            snap.error_text or "Enter your word",
            value=game.input_value,
            max_chars=32,
            disabled=snap.is_game_over,
        )
        c1, c2 = st.columns(2)
        skipped = c1.form_submit_button("Skip", disabled=snap.is_game_over, use_container_width=True)
        submitted = c2.form_submit_button(
            "Submit", type="primary", disabled=snap.is_game_over, use_container_width=True
        )
        if submitted:
            game.update_input((guess_inp or "").strip())
            game.submit_or_check()
            st.session_state["hint"] = None
            st.rerun()
        elif skipped:
            game.skip()
            st.session_state["hint"] = None
            st.rerun()

    if snap.has_error:
        st.error(snap.error_text)

    # ---- Hint ----
    config: GameConfig = st.session_state["config"]
    with st.expander("Need a hint?"):
        st.caption("AI hint" if config.hints_enabled else "Offline hint (letter count and first letter)")
        if st.button("✨ Get a hint", disabled=snap.is_game_over):
            with st.spinner("Thinking..."):
                st.session_state["hint"] = game.hint(lambda answer, scrambled: llm_hint(answer, scrambled, config=config))
            st.rerun()
        st.info(st.session_state["hint"] or "No hint yet.")

    # ---- Game over ----
    if snap.is_game_over:
        _render_final_score(snap)


if __name__ == "__main__":
    main()
