"""Lexical query fingerprinting.

Numbers collapse to ``N`` and quoted literals to ``'S'`` (or ``"S"``), so
statements that differ only in their constants share a fingerprint. Escaped
and nested quotes are not understood.
"""

import re

NUMBER_PLACEHOLDER = "N"
STRING_PLACEHOLDER = "S"
QUOTES = "'\""

_DIGITS = re.compile(r"[0-9]+")


def fingerprint(query_text: str) -> str:
    return _collapse_quoted(_DIGITS.sub(NUMBER_PLACEHOLDER, query_text))


def _collapse_quoted(text: str) -> str:
    parts: list[str] = []
    start = 0
    index = 0
    length = len(text)
    while index < length:
        quote = text[index]
        if quote not in QUOTES:
            index += 1
            continue
        closing = text.find(quote, index + 1)
        if closing < 0:
            # Unterminated: keep the quote as text and continue after it.
            index += 1
            continue
        parts.append(text[start:index])
        parts.append(f"{quote}{STRING_PLACEHOLDER}{quote}")
        index = closing + 1
        start = index
    parts.append(text[start:])
    return "".join(parts)
