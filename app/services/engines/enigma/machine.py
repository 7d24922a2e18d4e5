import logging
from typing import Iterable, Sequence

from app.core.exceptions import ConfigInvalidError, OutOfAlphabetError
from app.models.schemas import SteppingPolicy
from app.services.engines.enigma.alphabet import from_letter, is_letter, parse_letters
from app.services.engines.enigma.plugboard import Plugboard, PlugPair
from app.services.engines.enigma.reflector import Reflector
from app.services.engines.enigma.rotor import Rotor
from app.services.engines.enigma.stepping import get_stepper

logger = logging.getLogger(__name__)

RotorSpec = tuple[str | Sequence[int | str], int | str, int | str]


class Machine:
    """
    Plugboard, rotor stack and reflector wired in series.

    Rotors are ordered fastest first. The machine owns its rotors and
    mutates their positions on every encoded letter; call :meth:`reset`
    before running a second message from the same starting state.
    """

    def __init__(
        self,
        plugboard: Plugboard,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        stepping: SteppingPolicy | str = SteppingPolicy.ODOMETER,
    ):
        if not rotors:
            raise ConfigInvalidError("Machine needs at least one rotor")

        self.plugboard = plugboard
        self.rotors = list(rotors)
        self.reflector = reflector
        self.stepper = get_stepper(stepping)
        self.initial_positions = [rotor.position for rotor in self.rotors]

    @property
    def stepping(self) -> SteppingPolicy:
        return self.stepper.policy

    @property
    def positions(self) -> list[int]:
        return [rotor.position for rotor in self.rotors]

    @property
    def window(self) -> str:
        """Current positions as letters, fastest rotor first."""
        return "".join(from_letter(position) for position in self.positions)

    def step(self) -> None:
        self.stepper.step(self.rotors)

    def substitute(self, letter: int) -> int:
        """Run one letter through the circuit at the current positions, without stepping."""
        letter = self.plugboard.transform(letter)
        for rotor in self.rotors:
            letter = rotor.forward(letter)
        letter = self.reflector.reflect(letter)
        for rotor in reversed(self.rotors):
            letter = rotor.backward(letter)
        return self.plugboard.transform(letter)

    def encode(self, letter: int) -> int:
        """Step once, then substitute."""
        if not is_letter(letter):
            raise OutOfAlphabetError(letter)
        self.step()
        return self.substitute(letter)

    def reset(self, initial_positions: Iterable[int | str] | None = None) -> None:
        """
        Set every rotor position.

        Without arguments the positions the machine was built with are
        restored.
        """
        if initial_positions is None:
            positions = list(self.initial_positions)
        else:
            try:
                positions = parse_letters(initial_positions)
            except OutOfAlphabetError as e:
                raise ConfigInvalidError(
                    f"Rotor position {e.details['value']} is not a letter A-Z",
                    {"positions": repr(initial_positions)},
                )
            except TypeError:
                raise ConfigInvalidError(
                    f"Rotor positions {initial_positions!r} are not a sequence of letters",
                    {"positions": repr(initial_positions)},
                )

        if len(positions) != len(self.rotors):
            raise ConfigInvalidError(
                f"Expected {len(self.rotors)} rotor positions, got {len(positions)}",
                {"expected": len(self.rotors), "got": len(positions)},
            )

        for rotor, position in zip(self.rotors, positions):
            rotor.position = position

    def __repr__(self) -> str:
        return (
            f"<Machine rotors={len(self.rotors)} window={self.window} "
            f"stepping={self.stepping.value}>"
        )


def make_machine(
    rotor_configs: Iterable[RotorSpec],
    reflector_wiring: str | Sequence[int | str],
    plugboard_pairs: Iterable[PlugPair] = (),
    stepping: SteppingPolicy | str = SteppingPolicy.ODOMETER,
) -> Machine:
    """
    Build and validate a machine.

    Args:
        rotor_configs: ``(wiring, notch, initial_position)`` per rotor, fastest first
        reflector_wiring: 26-letter fixed-point-free involution
        plugboard_pairs: unordered letter pairs such as ``"AZ"`` or ``("A", "Z")``
        stepping: stepping policy

    Returns:
        A machine at the given initial positions

    Raises:
        ConfigInvalidError: any part of the configuration is malformed
    """
    if rotor_configs is None:
        raise ConfigInvalidError("Machine needs at least one rotor")

    rotors = []
    for entry in rotor_configs:
        try:
            wiring, notch, position = entry
        except (TypeError, ValueError):
            raise ConfigInvalidError(
                f"Rotor configuration {entry!r} must be (wiring, notch, position)",
                {"rotor": repr(entry)},
            )
        rotors.append(Rotor(wiring, notch, position))

    machine = Machine(
        plugboard=Plugboard(plugboard_pairs),
        rotors=rotors,
        reflector=Reflector(reflector_wiring),
        stepping=stepping,
    )
    logger.debug("Built %r with plugboard %s", machine, machine.plugboard.pairs)
    return machine
