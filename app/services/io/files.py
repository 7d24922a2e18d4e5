"""
File-level glue around the stream driver.

Reads a plaintext file, upper-cases it, runs it through the machine and
writes the result, timing each pass.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from app.models.schemas import NormalizationMode
from app.services.engines.enigma.driver import count_eligible, process
from app.services.engines.enigma.machine import Machine
from app.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@dataclass
class FileRunReport:
    """Outcome of one pass over a file."""

    source: Path
    destination: Path | None
    characters: int
    letters_processed: int
    seconds: float


@dataclass
class RoundTripReport:
    """Encrypt pass, decrypt pass, and whether the decrypted text matched."""

    encryption: FileRunReport
    decryption: FileRunReport
    verified: bool


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")


def _timed_process(machine: Machine, text: str) -> tuple[str, float]:
    started = time.perf_counter()
    output = process(machine, text)
    return output, time.perf_counter() - started


def encrypt_file(
    machine: Machine,
    source: str | Path,
    destination: str | Path,
    *,
    normalize_mode: NormalizationMode = NormalizationMode.UPPERCASE,
) -> FileRunReport:
    """
    Encrypt ``source`` into ``destination`` from the machine's current positions.

    The machine is left wherever the message moved it.
    """
    source, destination = Path(source), Path(destination)
    text = TextNormalizer().normalize(read_text(source), normalize_mode)

    output, seconds = _timed_process(machine, text)
    write_text(destination, output)

    report = FileRunReport(
        source=source,
        destination=destination,
        characters=len(text),
        letters_processed=count_eligible(text),
        seconds=seconds,
    )
    logger.info(
        "Wrote %s (%d letters) in %.6fs",
        destination,
        report.letters_processed,
        seconds,
    )
    return report


def roundtrip_file(
    machine: Machine,
    source: str | Path,
    encrypted: str | Path,
    decrypted: str | Path | None = None,
    *,
    normalize_mode: NormalizationMode = NormalizationMode.UPPERCASE,
) -> RoundTripReport:
    """
    Encrypt a file, reset the machine, then decrypt the result.

    When ``decrypted`` is None the recovered text is checked but not written.
    """
    start_positions = machine.positions
    encryption = encrypt_file(machine, source, encrypted, normalize_mode=normalize_mode)

    machine.reset(start_positions)
    ciphertext = read_text(encrypted)
    recovered, seconds = _timed_process(machine, ciphertext)

    expected = TextNormalizer().normalize(read_text(source), normalize_mode)
    verified = recovered == expected
    if not verified:
        logger.warning("Decrypted text of %s does not match the plaintext", source)

    destination = Path(decrypted) if decrypted is not None else None
    if destination is not None:
        write_text(destination, recovered)
        logger.info("Wrote %s in %.6fs", decrypted, seconds)

    decryption = FileRunReport(
        source=Path(encrypted),
        destination=destination,
        characters=len(ciphertext),
        letters_processed=count_eligible(ciphertext),
        seconds=seconds,
    )
    return RoundTripReport(encryption=encryption, decryption=decryption, verified=verified)
