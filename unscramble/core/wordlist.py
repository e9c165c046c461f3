from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Built-in vocabulary. Every entry is lowercase and has at least two distinct
# letters so it can always be scrambled into something different.
DEFAULT_WORDS: Tuple[str, ...] = (
    "animal", "auto", "anecdote", "alphabet", "all", "awesome", "arise",
    "balloon", "basket", "bench", "best", "birthday", "book", "briefcase",
    "camera", "camping", "candle", "cat", "cauliflower", "chat", "children",
    "class", "classic", "classroom", "coffee", "colorful", "cookie",
    "creative", "cruise", "dance", "daytime", "dinosaur", "doorknob", "dine",
    "dream", "dusk", "eating", "elephant", "emerald", "eerie", "electric",
    "finish", "flowers", "follow", "fox", "frame", "free", "frequent",
    "funnel", "green", "guitar", "grocery", "glass", "great", "giggle",
    "haircut", "half", "homemade", "happen", "honey", "hurry", "hundred",
    "ice", "igloo", "invest", "invite", "icon", "introduce", "joke",
    "jovial", "journal", "jump", "join", "kangaroo", "keyboard", "kitchen",
    "koala", "kind", "kaleidoscope", "landscape", "late", "laugh", "learning",
    "lemon", "letter", "lily", "magazine", "marine", "marshmallow", "maze",
    "meditate", "melody", "minute", "monument", "moon", "motorcycle",
    "mountain", "music", "north", "nose", "night", "name", "never",
    "negotiate", "number", "opposite", "octopus", "oak", "order", "open",
    "polar", "pack", "painting", "person", "picnic", "pillow", "pizza",
    "podcast", "presentation", "puppy", "puzzle", "recipe", "release",
    "restaurant", "revolve", "rewind", "room", "run", "secret", "seed",
    "ship", "shirt", "should", "small", "spaceship", "stargazing", "skill",
    "street", "style", "sunrise", "taxi", "tidy", "timer", "together",
    "tooth", "tourist", "travel", "truck", "under", "useful", "unicorn",
    "unique", "uplift", "uniform", "vase", "violin", "visitor", "vision",
    "volume", "view", "walrus", "wander", "world", "winter", "well",
    "whirlwind", "xenon", "xylophone", "yoga", "yogurt", "yoyo", "you",
    "year", "yummy", "zebra", "zigzag", "zoology", "zone", "zeal",
)


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Duplicates are dropped; first occurrence wins so file order is kept.
    """
    if not path.exists() or not path.is_file():
        return []
    raw = path.read_text(encoding="utf-8", errors="ignore").splitlines()
    seen: set[str] = set()
    words: List[str] = []
    for ln in raw:
        w = ln.strip().lower()
        if w and w not in seen:
            seen.add(w)
            words.append(w)
    return words


def load_wordlist(path: Optional[str | Path] = None) -> Tuple[str, ...]:
    """
    Return the game vocabulary as an immutable tuple.

    Fallback strategy
    -----------------
    1) If `path` is given, use the words in that file (one per line).
    2) If no path was given, or the file is missing/empty, use `DEFAULT_WORDS`.
    """
    if path is None:
        return DEFAULT_WORDS

    words = _read_lines(Path(path))
    if not words:
        logger.warning("Word list %s is missing or empty; using built-in vocabulary", path)
        return DEFAULT_WORDS

    logger.info("Loaded %s words from %s", len(words), path)
    return tuple(words)
