"""
Command line front end.

    enigma encrypt message.txt message.enc --decrypted message.dec
    enigma text "HELLO WORLD" --rotors I II III --positions AAA
    enigma presets
"""

import argparse
import logging
import sys
from typing import Sequence

from app.core.config import Settings, get_settings
from app.core.exceptions import ConfigInvalidError, PresetNotFoundError
from app.core.logging import configure_logging
from app.models.schemas import MachineConfig, NormalizationMode, RotorConfig, SteppingPolicy
from app.services.engines.enigma.driver import process
from app.services.engines.enigma.engine import build_machine
from app.services.engines.registry import PresetRegistry
from app.services.io.files import roundtrip_file
from app.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)

EXIT_IO_ERROR = 1
# A decrypted file that does not match its source is reported as a file failure.
EXIT_ROUNDTRIP_MISMATCH = EXIT_IO_ERROR
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="enigma", description="Enigma rotor machine simulator")
    p.add_argument("--log-level", default=settings.log_level, help=f"Logging level. Default: {settings.log_level}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_machine_args(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--rotors", nargs="+", default=settings.default_rotors, metavar="NAME",
                        help=f"Rotor presets, fastest first. Default: {' '.join(settings.default_rotors)}")
        sp.add_argument("--positions", default=settings.default_positions,
                        help=f"Initial positions, fastest first. Default: {settings.default_positions}")
        sp.add_argument("--reflector", default=settings.default_reflector,
                        help=f"Reflector preset or 26-letter wiring. Default: {settings.default_reflector}")
        sp.add_argument("--plug", action="append", dest="plugs", metavar="PAIR",
                        help="Plugboard pair such as AZ; repeat for more pairs. "
                             f"Default: {' '.join(settings.default_plugboard) or 'none'}")
        sp.add_argument("--no-plugs", action="store_true", help="Use an empty plugboard.")
        sp.add_argument("--stepping", choices=[policy.value for policy in SteppingPolicy],
                        default=settings.default_stepping.value,
                        help=f"Stepping policy. Default: {settings.default_stepping.value}")
        sp.add_argument("--no-uppercase", action="store_true",
                        help="Do not upper-case input; lowercase letters then pass through untouched.")

    enc = sub.add_parser("encrypt", help="Encrypt a file, then decrypt it again and report timings")
    enc.add_argument("input", help="Plaintext file")
    enc.add_argument("output", help="Ciphertext file to write")
    enc.add_argument("--decrypted", metavar="PATH", help="Also write the decrypted text here")
    add_machine_args(enc)

    txt = sub.add_parser("text", help="Transform text given on the command line")
    txt.add_argument("message", help="Text to encrypt or decrypt")
    txt.add_argument("--group", action="store_true", help="Print letters only, in five-letter groups")
    add_machine_args(txt)

    sub.add_parser("presets", help="List rotor and reflector presets")

    return p.parse_args(argv)


def machine_config_from_args(args: argparse.Namespace, settings: Settings) -> MachineConfig:
    """Assemble a machine configuration from command line options."""
    if len(args.positions) != len(args.rotors):
        raise ConfigInvalidError(
            f"Got {len(args.rotors)} rotors but {len(args.positions)} positions",
            {"rotors": args.rotors, "positions": args.positions},
        )

    if args.no_plugs:
        plugs = []
    elif args.plugs is not None:
        plugs = args.plugs
    else:
        plugs = settings.default_plugboard

    try:
        return MachineConfig(
            rotors=[
                RotorConfig(preset=name, position=position)
                for name, position in zip(args.rotors, args.positions)
            ],
            reflector=args.reflector,
            plugboard=plugs,
            stepping=SteppingPolicy(args.stepping),
        )
    except ValueError as e:
        raise ConfigInvalidError(f"Invalid machine settings: {e}")


def _normalize_mode(args: argparse.Namespace) -> NormalizationMode:
    return NormalizationMode.PRESERVE if args.no_uppercase else NormalizationMode.UPPERCASE


def cmd_encrypt(args: argparse.Namespace, settings: Settings) -> int:
    machine = build_machine(machine_config_from_args(args, settings))
    report = roundtrip_file(
        machine,
        args.input,
        args.output,
        args.decrypted,
        normalize_mode=_normalize_mode(args),
    )

    print(f"Encrypted message written to {report.encryption.destination}")
    if report.decryption.destination is not None:
        print(f"Decrypted message written to {report.decryption.destination}")
    print(f"Encryption time: {report.encryption.seconds:.6f}s")
    print(f"Decryption time: {report.decryption.seconds:.6f}s")
    if not report.verified:
        print(
            f"enigma: decrypted text of {args.input} does not match the plaintext",
            file=sys.stderr,
        )
        return EXIT_ROUNDTRIP_MISMATCH
    return 0


def cmd_text(args: argparse.Namespace, settings: Settings) -> int:
    machine = build_machine(machine_config_from_args(args, settings))
    normalizer = TextNormalizer()
    output = process(machine, normalizer.normalize(args.message, _normalize_mode(args)))
    print(normalizer.group(output) if args.group else output)
    return 0


def cmd_presets(args: argparse.Namespace, settings: Settings) -> int:
    registry = PresetRegistry()
    for rotor in registry.list_rotors():
        print(f"rotor     {rotor.name:<4} {rotor.wiring}  notch {rotor.notch}")
    for reflector in registry.list_reflectors():
        print(f"reflector {reflector.name:<4} {reflector.wiring}")
    return 0


COMMANDS = {
    "encrypt": cmd_encrypt,
    "text": cmd_text,
    "presets": cmd_presets,
}


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = parse_args(argv, settings)
    configure_logging(args.log_level.upper())
    logger.debug("Running command %s", args.cmd)

    try:
        return COMMANDS[args.cmd](args, settings)
    except (ConfigInvalidError, PresetNotFoundError) as e:
        print(f"enigma: configuration error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except OSError as e:
        print(f"enigma: {e}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
