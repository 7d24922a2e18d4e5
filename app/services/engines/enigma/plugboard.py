from typing import Iterable, Mapping

from app.core.exceptions import OutOfAlphabetError, PlugboardError
from app.services.engines.enigma.alphabet import SIZE, from_letter, parse_letter

PlugPair = str | tuple[int | str, int | str]


class Plugboard:
    """
    Operator-configured letter swaps applied before and after the rotors.

    Built from unordered pairs; every letter appears in at most one pair
    and unmentioned letters map to themselves, so the board is always an
    involution.
    """

    def __init__(self, pairs: Iterable[PlugPair] = ()):
        self._mapping = list(range(SIZE))
        used: set[int] = set()

        try:
            pairs = list(pairs)
        except TypeError:
            raise PlugboardError(
                f"Plugboard pairs {pairs!r} must be a sequence of letter pairs",
                {"pairs": repr(pairs)},
            )

        for raw in pairs:
            a, b = self._parse_pair(raw)
            if a == b:
                raise PlugboardError(
                    f"Plugboard cannot connect {from_letter(a)} to itself",
                    {"pair": str(raw)},
                )
            for letter in (a, b):
                if letter in used:
                    raise PlugboardError(
                        f"Letter {from_letter(letter)} appears in more than one pair",
                        {"letter": from_letter(letter)},
                    )
            self._mapping[a], self._mapping[b] = b, a
            used.update((a, b))

    @classmethod
    def from_mapping(cls, mapping: Mapping[int | str, int | str]) -> "Plugboard":
        """
        Build from a directed mapping, which must list both halves of every swap.

        Identity entries are allowed and ignored.
        """
        parsed: dict[int, int] = {}
        for key, value in mapping.items():
            parsed[cls._parse(key, key)] = cls._parse(value, key)

        pairs = []
        for a, b in parsed.items():
            if a == b:
                continue
            if parsed.get(b) != a:
                raise PlugboardError(
                    f"Plugboard mapping {from_letter(a)}->{from_letter(b)} "
                    f"has no matching {from_letter(b)}->{from_letter(a)}",
                    {"letter": from_letter(a)},
                )
            if a < b:
                pairs.append((a, b))
        return cls(pairs)

    def transform(self, letter: int) -> int:
        return self._mapping[letter]

    @property
    def pairs(self) -> list[str]:
        """Configured swaps as sorted two-letter strings."""
        return [
            from_letter(a) + from_letter(b)
            for a, b in enumerate(self._mapping)
            if a < b
        ]

    @classmethod
    def _parse_pair(cls, raw: PlugPair) -> tuple[int, int]:
        if isinstance(raw, str):
            if len(raw) != 2:
                raise PlugboardError(
                    f"Plugboard pair {raw!r} must be exactly 2 letters",
                    {"pair": raw},
                )
            a, b = raw
        else:
            try:
                a, b = raw
            except (TypeError, ValueError):
                raise PlugboardError(
                    f"Plugboard pair {raw!r} must be exactly 2 letters",
                    {"pair": repr(raw)},
                )
        return cls._parse(a, raw), cls._parse(b, raw)

    @staticmethod
    def _parse(value: int | str, context: object) -> int:
        try:
            return parse_letter(value)
        except OutOfAlphabetError:
            raise PlugboardError(
                f"Plugboard entry {context!r} contains non-letter {value!r}",
                {"value": repr(value)},
            )

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
