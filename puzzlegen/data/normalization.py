"""Word normalization for word-search entries."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return ``text`` as uppercase ASCII letters only.

    Accented letters are reduced to their base letter (``"Ação"`` becomes
    ``"ACAO"``); digits, spaces and punctuation are dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


__all__ = ["clean_word"]
