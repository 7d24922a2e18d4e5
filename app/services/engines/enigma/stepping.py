"""
Rotor stepping strategies.

Rotors are always ordered fastest first. Two policies are available:

- Odometer: the fast rotor steps on every key press and a carry moves the
  next rotor whenever the rotor just stepped lands on its notch.
- M3 double step: the historical pawl mechanism. A rotor sitting at its
  notch before the key press engages the pawl of its left neighbour, and
  the middle rotor also steps itself when it sits at its own notch.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from app.core.exceptions import ConfigInvalidError
from app.models.schemas import SteppingPolicy
from app.services.engines.enigma.rotor import Rotor


def step_all(rotors: Sequence[Rotor]) -> None:
    """Odometer stepping: carry left while each stepped rotor reports its notch."""
    for rotor in rotors:
        if not rotor.step():
            break


class Stepper(ABC):
    """Advances a rotor stack by one key press."""

    policy: SteppingPolicy

    @abstractmethod
    def step(self, rotors: Sequence[Rotor]) -> None:
        pass


class OdometerStepper(Stepper):
    policy = SteppingPolicy.ODOMETER

    def step(self, rotors: Sequence[Rotor]) -> None:
        step_all(rotors)


class M3DoubleStepper(Stepper):
    """
    Three-pawl stepping of the Enigma I / M3.

    Only the three fastest rotors move. Notch checks use the positions
    before the key press, so the middle rotor steps twice in a row when
    it arrives at its notch.
    """

    policy = SteppingPolicy.M3_DOUBLE_STEP

    def step(self, rotors: Sequence[Rotor]) -> None:
        fast = rotors[0]
        middle = rotors[1] if len(rotors) > 1 else None
        slow = rotors[2] if len(rotors) > 2 else None

        if middle is not None:
            if slow is not None and middle.at_notch:
                middle.step()
                slow.step()
            elif fast.at_notch:
                middle.step()

        fast.step()


_STEPPERS: dict[SteppingPolicy, Stepper] = {
    SteppingPolicy.ODOMETER: OdometerStepper(),
    SteppingPolicy.M3_DOUBLE_STEP: M3DoubleStepper(),
}


def get_stepper(policy: SteppingPolicy | str) -> Stepper:
    """Look up the stepping strategy for a policy or its string value."""
    try:
        return _STEPPERS[SteppingPolicy(policy)]
    except ValueError:
        raise ConfigInvalidError(
            f"Unknown stepping policy {policy!r}",
            {"policy": str(policy)},
        )
