from __future__ import annotations
from typing import FrozenSet

BANNED_WORDS: FrozenSet[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"

def clean_word(word: str) -> str:
    return MASK if word.lower() in BANNED_WORDS else word

def clean_chirp(body: str) -> str:
    """
    Mask banned words in a chirp body.
    Splits on single spaces so the original spacing survives; a word with
    punctuation attached ("sharbert!") is not masked.
    """
    return " ".join(clean_word(w) for w in body.split(" "))
