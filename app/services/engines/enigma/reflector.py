from typing import Iterable

from app.core.exceptions import OutOfAlphabetError, ReflectorError
from app.services.engines.enigma.alphabet import SIZE, from_letter, parse_letters


class Reflector:
    """Fixed wiring that folds the signal back; must pair every letter with another."""

    def __init__(self, wiring: str | Iterable[int | str]):
        try:
            table = parse_letters(wiring)
        except OutOfAlphabetError as e:
            raise ReflectorError(wiring, f"contains non-letter {e.details['value']}")
        except TypeError:
            raise ReflectorError(wiring, "is not a sequence of letters")
        if len(table) != SIZE:
            raise ReflectorError(wiring, f"has {len(table)} contacts, expected {SIZE}")

        for letter, target in enumerate(table):
            if target == letter:
                raise ReflectorError(wiring, f"maps {from_letter(letter)} to itself")
            if table[target] != letter:
                raise ReflectorError(
                    wiring,
                    f"is not an involution: {from_letter(letter)}->{from_letter(target)} "
                    f"but {from_letter(target)}->{from_letter(table[target])}",
                )

        self.wiring = table

    def reflect(self, letter: int) -> int:
        return self.wiring[letter]

    def __repr__(self) -> str:
        return f"<Reflector {''.join(from_letter(x) for x in self.wiring)}>"
