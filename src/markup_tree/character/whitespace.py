"""Whitespace classification for markup character data.

Whitespace is any character listed on
https://en.wikipedia.org/wiki/Whitespace_character. A second table holds the
visible glyphs commonly used to depict whitespace; tokenizers rely on both
tables being exact, so entries must not be added or removed.
"""

from typing import Any, FrozenSet

WHITESPACE_CODE_POINTS: FrozenSet[int] = frozenset({
    0x0009,  # CHARACTER TABULATION
    0x000A,  # LINE FEED
    0x000B,  # LINE TABULATION
    0x000C,  # FORM FEED
    0x000D,  # CARRIAGE RETURN
    0x0020,  # SPACE
    0x0085,  # NEXT LINE
    0x00A0,  # NO-BREAK SPACE
    0x1680,  # OGHAM SPACE MARK
    0x2000,  # EN QUAD
    0x2001,  # EM QUAD
    0x2002,  # EN SPACE
    0x2003,  # EM SPACE
    0x2004,  # THREE-PER-EM SPACE
    0x2005,  # FOUR-PER-EM SPACE
    0x2006,  # SIX-PER-EM SPACE
    0x2007,  # FIGURE SPACE
    0x2008,  # PUNCTUATION SPACE
    0x2009,  # THIN SPACE
    0x200A,  # HAIR SPACE
    0x2028,  # LINE SEPARATOR
    0x2029,  # PARAGRAPH SEPARATOR
    0x202F,  # NARROW NO-BREAK SPACE
    0x205F,  # MEDIUM MATHEMATICAL SPACE
    0x3000,  # IDEOGRAPHIC SPACE
    0x180E,  # MONGOLIAN VOWEL SEPARATOR
    0x200B,  # ZERO WIDTH SPACE
    0x200C,  # ZERO WIDTH NON-JOINER
    0x200D,  # ZERO WIDTH JOINER
    0x2060,  # WORD JOINER
    0xFEFF,  # ZERO WIDTH NO-BREAK SPACE
})

WHITESPACE_SYMBOL_CODE_POINTS: FrozenSet[int] = frozenset({
    0x00B7,  # MIDDLE DOT
    0x21A1,  # DOWNWARDS TWO HEADED ARROW
    0x2261,  # IDENTICAL TO
    0x237D,  # SHOULDERED OPEN BOX
    0x23CE,  # RETURN SYMBOL
    0x2409,  # SYMBOL FOR HORIZONTAL TABULATION
    0x240A,  # SYMBOL FOR LINE FEED
    0x240B,  # SYMBOL FOR VERTICAL TABULATION
    0x240C,  # SYMBOL FOR FORM FEED
    0x240D,  # SYMBOL FOR CARRIAGE RETURN
    0x2420,  # SYMBOL FOR SPACE
    0x2422,  # BLANK SYMBOL
    0x2423,  # OPEN BOX
    0x2424,  # SYMBOL FOR NEWLINE
    0x25B3,  # WHITE UP-POINTING TRIANGLE
    0x2A5B,  # LOGICAL OR WITH MIDDLE STEM
    0x2AAA,  # SMALLER THAN
    0x2AAB,  # LARGER THAN
    0x3037,  # IDEOGRAPHIC TELEGRAPH LINE FEED SEPARATOR SYMBOL
})


def is_whitespace(char: Any, include_symbols: bool = False) -> bool:
    """Check if the given character is a whitespace character.

    Args:
        char: The character to evaluate. Anything other than a single-character
            string is never whitespace.
        include_symbols: Also accept symbolic images representing whitespace

    Returns:
        True if ``char`` is whitespace (or a whitespace symbol when requested)
    """
    if not isinstance(char, str) or len(char) != 1:
        return False

    code_point = ord(char)
    if code_point in WHITESPACE_CODE_POINTS:
        return True

    return include_symbols and code_point in WHITESPACE_SYMBOL_CODE_POINTS
