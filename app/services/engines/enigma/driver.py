import logging
from typing import Iterable, Iterator

from app.services.engines.enigma.alphabet import from_letter, is_eligible, to_letter
from app.services.engines.enigma.machine import Machine

logger = logging.getLogger(__name__)


def iter_process(machine: Machine, chars: Iterable[str]) -> Iterator[str]:
    """
    Lazily transform a character stream.

    Only 'A'..'Z' reach the machine (and step it); everything else,
    lowercase letters included, is yielded unchanged.
    """
    for char in chars:
        if is_eligible(char):
            yield from_letter(machine.encode(to_letter(char)))
        else:
            yield char


def process(machine: Machine, input_sequence: Iterable[str]) -> str:
    """Transform a whole sequence, returning the output as a string."""
    output = "".join(iter_process(machine, input_sequence))
    logger.debug("Processed %d characters, window now %s", len(output), machine.window)
    return output


def count_eligible(text: Iterable[str]) -> int:
    """Number of characters that would step the machine."""
    return sum(1 for char in text if is_eligible(char))
