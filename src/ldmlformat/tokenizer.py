"""LDML date pattern tokenizer.

Splits a pattern such as ``"EEE, d MMM yyyy HH:mm"`` into maximal runs of
one field letter and literal spans:

    [Field("E", 3), Literal(", "), Field("d", 1), Literal(" "), ...]

Quoting:
    By default every character that is not a field letter is literal,
    apostrophes included. With ``quoting=True`` the LDML convention
    applies: text between single quotes is literal (so ``'de'`` yields
    ``de`` and its letters are not fields) and ``''`` yields one
    apostrophe, inside or outside a quoted span.
"""

from __future__ import annotations

from ldmlformat.errors import PatternSyntaxError
from ldmlformat.types import Field, Literal, PatternElement

FIELD_LETTERS = frozenset("GyYuUQqMLwWdDFgecEahHKkmsSAzZOvVXxj")

QUOTE = "'"


def tokenize(pattern: str, quoting: bool = False) -> list[PatternElement]:
    """Tokenize a date pattern.

    Args:
        pattern: Raw LDML date pattern
        quoting: Apply LDML single-quote escaping

    Returns:
        Elements in pattern order; adjacent literal text is merged and
        adjacent fields never share a letter

    Raises:
        PatternSyntaxError: Unterminated quoted literal (``quoting=True``)
    """
    elements: list[PatternElement] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            elements.append(Literal("".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]

        if quoting and char == QUOTE:
            if pattern.startswith("''", i):
                literal.append(QUOTE)
                i += 2
                continue
            start = i
            i += 1
            while True:
                if i >= n:
                    raise PatternSyntaxError(
                        f"Unterminated quoted literal at position {start}",
                        pattern=pattern,
                        position=start,
                    )
                if pattern[i] == QUOTE:
                    if pattern.startswith("''", i):
                        literal.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char in FIELD_LETTERS:
            end = i + 1
            while end < n and pattern[end] == char:
                end += 1
            flush()
            elements.append(Field(char, end - i))
            i = end
            continue

        literal.append(char)
        i += 1

    flush()
    return elements
