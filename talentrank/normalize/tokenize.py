"""
Field tokenizer.

Criteria and profile attributes are free text holding comma separated
values ("Python, SQL, Java").  Every comparison in the engine works on
the tokens produced here.
"""

from __future__ import annotations

from typing import List, Optional


def tokenize(text: Optional[str]) -> List[str]:
    """Split a comma separated field into trimmed, non-empty tokens.

    Order and duplicates are preserved; case is left untouched so the
    caller can report the original spelling.  ``None`` or an empty
    string gives an empty list.
    """
    if not text:
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]
