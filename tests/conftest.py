"""Shared fixtures: the historical wheels used throughout the suite."""

import random

import pytest

from app.services.engines.enigma.machine import make_machine
from app.services.engines.presets import REFLECTOR_B, ROTOR_I, ROTOR_II, ROTOR_III


def scenario_machine(positions: str = "AAA", stepping: str = "odometer"):
    """Rotors I, II, III (I fastest), reflector B, plugs A-Z and B-Y."""
    return make_machine(
        [
            (ROTOR_I.wiring, ROTOR_I.notch, positions[0]),
            (ROTOR_II.wiring, ROTOR_II.notch, positions[1]),
            (ROTOR_III.wiring, ROTOR_III.notch, positions[2]),
        ],
        REFLECTOR_B.wiring,
        ["AZ", "BY"],
        stepping=stepping,
    )


def random_machine(seed: int):
    """A machine with randomly generated wirings, reflector and plugs."""
    rng = random.Random(seed)
    letters = list(range(26))

    rotors = []
    for _ in range(rng.randint(1, 5)):
        rotors.append((rng.sample(letters, 26), rng.randrange(26), rng.randrange(26)))

    shuffled = rng.sample(letters, 26)
    reflector = [0] * 26
    for a, b in zip(shuffled[0::2], shuffled[1::2]):
        reflector[a], reflector[b] = b, a

    plugged = rng.sample(letters, 2 * rng.randint(0, 13))
    pairs = list(zip(plugged[0::2], plugged[1::2]))

    return make_machine(rotors, reflector, pairs)


@pytest.fixture
def machine():
    return scenario_machine()


@pytest.fixture
def make_scenario():
    return scenario_machine


@pytest.fixture
def make_random():
    return random_machine
