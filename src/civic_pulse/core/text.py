"""Token-set text similarity.

Free text is reduced to a set of lower-cased word tokens and compared with the
Jaccard index. Tokens of two characters or fewer are ignored so that articles
and short connectives do not inflate the overlap.
"""
from __future__ import annotations

import re
from typing import Final

MIN_TOKEN_LENGTH: Final[int] = 3
_NON_WORD = re.compile(r"[^\w\s]")


def tokenize(text: str) -> frozenset[str]:
    """Return the normalized token set of ``text``.

    Args:
        text: Arbitrary user-supplied text (may be empty).

    Returns:
        Lower-cased tokens with punctuation stripped and short words removed.
    """
    cleaned = _NON_WORD.sub(" ", text.lower())
    return frozenset(word for word in cleaned.split() if len(word) >= MIN_TOKEN_LENGTH)


def text_similarity(a: str, b: str) -> float:
    """Return the Jaccard similarity of the token sets of ``a`` and ``b``.

    The result is in [0, 1]. Two inputs that both reduce to no tokens score 0.
    """
    words_a = tokenize(a)
    words_b = tokenize(b)
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)
