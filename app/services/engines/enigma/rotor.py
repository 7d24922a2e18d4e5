from typing import Iterable

from app.core.exceptions import ConfigInvalidError, OutOfAlphabetError, RotorWiringError
from app.services.engines.enigma.alphabet import SIZE, from_letter, mod26, parse_letter, parse_letters


class Rotor:
    """
    A wired wheel with a rotational offset.

    ``wiring[i]`` is the contact reached when contact ``i`` is energised
    from the keyboard side at position zero. The inverse permutation is
    built once here so the return path is a table lookup.
    """

    def __init__(
        self,
        wiring: str | Iterable[int | str],
        notch: int | str,
        position: int | str = 0,
    ):
        try:
            table = parse_letters(wiring)
        except OutOfAlphabetError as e:
            raise RotorWiringError(wiring, f"contains non-letter {e.details['value']}")
        except TypeError:
            raise RotorWiringError(wiring, "is not a sequence of letters")
        if len(table) != SIZE:
            raise RotorWiringError(wiring, f"has {len(table)} contacts, expected {SIZE}")
        if len(set(table)) != SIZE:
            raise RotorWiringError(wiring, "is not a permutation of the alphabet")

        self.wiring = table
        self.inverse = [0] * SIZE
        for contact, target in enumerate(table):
            self.inverse[target] = contact

        self.notch = _config_letter("notch", notch)
        self.position = _config_letter("position", position)

    def forward(self, letter: int) -> int:
        """Keyboard side toward the reflector."""
        contact = mod26(letter + self.position)
        return mod26(self.wiring[contact] - self.position)

    def backward(self, letter: int) -> int:
        """Reflector side back toward the keyboard."""
        contact = mod26(letter + self.position)
        return mod26(self.inverse[contact] - self.position)

    def step(self) -> bool:
        """Advance one position; True when the new position is the notch."""
        self.position = mod26(self.position + 1)
        return self.position == self.notch

    @property
    def at_notch(self) -> bool:
        return self.position == self.notch

    def set_position(self, position: int | str) -> None:
        self.position = _config_letter("position", position)

    def __repr__(self) -> str:
        return f"<Rotor pos={from_letter(self.position)} notch={from_letter(self.notch)}>"


def _config_letter(field: str, value: int | str) -> int:
    try:
        return parse_letter(value)
    except OutOfAlphabetError:
        raise ConfigInvalidError(
            f"Rotor {field} {value!r} is not a letter A-Z",
            {"field": field, "value": repr(value)},
        )
