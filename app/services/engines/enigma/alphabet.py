"""Letter arithmetic over the 26-letter Latin alphabet."""

import string
from typing import Iterable

from app.core.exceptions import OutOfAlphabetError

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_FIRST = ord("A")


def mod26(value: int) -> int:
    """Non-negative remainder modulo the alphabet size."""
    return ((value % SIZE) + SIZE) % SIZE


def is_eligible(char: str) -> bool:
    """True for a single character in 'A'..'Z'."""
    return len(char) == 1 and "A" <= char <= "Z"


def to_letter(char: str) -> int:
    """Map 'A'..'Z' to 0..25."""
    if not isinstance(char, str) or not is_eligible(char):
        raise OutOfAlphabetError(char)
    return ord(char) - _FIRST


def from_letter(letter: int) -> str:
    """Map 0..25 back to 'A'..'Z'."""
    if not is_letter(letter):
        raise OutOfAlphabetError(letter)
    return chr(letter + _FIRST)


def is_letter(value: object) -> bool:
    """True for an int in [0, 25] (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < SIZE


def parse_letter(value: int | str) -> int:
    """Accept either a letter index or a single uppercase character."""
    if isinstance(value, str):
        return to_letter(value)
    if not is_letter(value):
        raise OutOfAlphabetError(value)
    return value


def parse_letters(values: Iterable[int | str]) -> list[int]:
    """
    Parse a sequence of letters.

    A plain string is read character by character, so ``"AAA"`` and
    ``[0, 0, 0]`` are equivalent.
    """
    return [parse_letter(value) for value in values]

