"""Enigma cipher machine core."""

from app.services.engines.enigma.alphabet import ALPHABET, from_letter, mod26, to_letter
from app.services.engines.enigma.driver import iter_process, process
from app.services.engines.enigma.machine import Machine, make_machine
from app.services.engines.enigma.plugboard import Plugboard
from app.services.engines.enigma.reflector import Reflector
from app.services.engines.enigma.rotor import Rotor
from app.services.engines.enigma.stepping import get_stepper, step_all

__all__ = [
    "ALPHABET",
    "from_letter",
    "mod26",
    "to_letter",
    "iter_process",
    "process",
    "Machine",
    "make_machine",
    "Plugboard",
    "Reflector",
    "Rotor",
    "get_stepper",
    "step_all",
]
