import random
import string
from typing import ClassVar

from app.core.exceptions import EnigmaError
from app.models.schemas import MachineConfig, RotorConfig
from app.services.engines.base import CipherEngine, DecryptionResult, EncryptionResult
from app.services.engines.enigma.driver import count_eligible, process
from app.services.engines.enigma.machine import Machine, make_machine
from app.services.engines.registry import PresetRegistry


def build_machine(config: MachineConfig) -> Machine:
    """
    Resolve presets in a machine configuration and build a fresh machine.

    Raises:
        PresetNotFoundError: a rotor preset name is unknown
        ConfigInvalidError: the resolved wiring is malformed, or the
            reflector is neither a catalogued name nor a valid wiring
    """
    registry = PresetRegistry()

    rotor_settings = []
    for rotor in config.rotors:
        if rotor.preset is not None:
            preset = registry.get_rotor(rotor.preset)
            wiring, notch = preset.wiring, rotor.notch or preset.notch
        else:
            wiring, notch = rotor.wiring, rotor.notch
        rotor_settings.append((wiring.upper(), notch.upper(), rotor.position.upper()))

    # A catalogued name wins; anything else is read as an explicit wiring.
    reflector = config.reflector.upper()
    if registry.is_registered(reflector, kind="reflector"):
        reflector = registry.get_reflector(reflector).wiring

    return make_machine(
        rotor_settings,
        reflector,
        [pair.upper() for pair in config.plugboard],
        stepping=config.stepping,
    )


class EnigmaEngine(CipherEngine):
    """
    Enigma rotor machine engine.

    The key is the full machine configuration. Every call builds a fresh
    machine from the key, so encryption and decryption both start from the
    key's rotor positions and the engine itself holds no rotor state.
    Because the machine is self-inverse, decryption is encryption.
    """

    name = "Enigma"
    description = (
        "A rotor machine: plugboard, stepping rotors and a reflector form a "
        "new self-inverse substitution for every letter typed."
    )

    ALPHABET: ClassVar[str] = string.ascii_uppercase
    RANDOM_ROTOR_COUNT: ClassVar[int] = 3
    RANDOM_PLUG_PAIRS: ClassVar[int] = 10

    def encrypt(self, plaintext: str, key: MachineConfig) -> str:
        """Encrypt plaintext from the key's initial positions."""
        return self.encrypt_with_key(plaintext, key).ciphertext

    def encrypt_with_key(self, plaintext: str, key: MachineConfig) -> EncryptionResult:
        """Encrypt and report where the rotors came to rest."""
        machine = build_machine(key)
        ciphertext = process(machine, plaintext)

        return EncryptionResult(
            ciphertext=ciphertext,
            key=key,
            final_positions=machine.window,
            letters_processed=count_eligible(plaintext),
        )

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: MachineConfig,
    ) -> DecryptionResult:
        """Decrypt by running the ciphertext through an identically set machine."""
        machine = build_machine(key)
        plaintext = process(machine, ciphertext)

        return DecryptionResult(
            plaintext=plaintext,
            key=key,
            final_positions=machine.window,
            letters_processed=count_eligible(ciphertext),
            explanation=self.explain(ciphertext, plaintext, key),
        )

    def generate_random_key(self) -> MachineConfig:
        """Three distinct catalogue rotors, random positions, B or C, ten plugs."""
        registry = PresetRegistry()
        rotor_names = random.sample(
            [preset.name for preset in registry.list_rotors()],
            self.RANDOM_ROTOR_COUNT,
        )
        reflector = random.choice([preset.name for preset in registry.list_reflectors()])

        letters = random.sample(self.ALPHABET, self.RANDOM_PLUG_PAIRS * 2)
        plugboard = [letters[i] + letters[i + 1] for i in range(0, len(letters), 2)]

        return MachineConfig(
            rotors=[
                RotorConfig(preset=name, position=random.choice(self.ALPHABET))
                for name in rotor_names
            ],
            reflector=reflector,
            plugboard=plugboard,
        )

    def validate_key(self, key: MachineConfig) -> bool:
        """True when the configuration builds a machine."""
        try:
            build_machine(key)
        except EnigmaError:
            return False
        return True

    def explain(self, ciphertext: str, plaintext: str, key: MachineConfig) -> str:
        """Generate human-readable explanation."""
        rotors = ", ".join(rotor.preset or "custom" for rotor in key.rotors)
        plugs = " ".join(key.plugboard) or "none"
        reflector = key.reflector if PresetRegistry.is_registered(key.reflector, kind="reflector") else "custom"

        return (
            f"Enigma with rotors {rotors} (fastest first) starting at "
            f"{key.positions}, reflector "
            f"{reflector}, "
            f"plugboard {plugs}, {key.stepping.value} stepping. "
            f"Each letter stepped the rotors and then passed through the same "
            f"circuit that encrypted it, recovering "
            f"'{plaintext[0] if plaintext else 'N/A'}' from "
            f"'{ciphertext[0] if ciphertext else 'N/A'}'."
        )
