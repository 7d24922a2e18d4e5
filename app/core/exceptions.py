from typing import Any


class EnigmaError(Exception):
    """Base exception for all Enigma machine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigInvalidError(EnigmaError):
    """Raised when a machine configuration is rejected at construction."""

    pass


class RotorWiringError(ConfigInvalidError):
    """Raised when a rotor wiring is not a permutation of the alphabet."""

    def __init__(self, wiring: Any, reason: str):
        super().__init__(
            f"Rotor wiring {wiring!r} is invalid: {reason}",
            {"wiring": str(wiring), "reason": reason},
        )


class ReflectorError(ConfigInvalidError):
    """Raised when a reflector is not a fixed-point-free involution."""

    def __init__(self, wiring: Any, reason: str):
        super().__init__(
            f"Reflector wiring {wiring!r} is invalid: {reason}",
            {"wiring": str(wiring), "reason": reason},
        )


class PlugboardError(ConfigInvalidError):
    """Raised when plugboard pairs do not form an involution."""

    pass


class OutOfAlphabetError(EnigmaError):
    """Raised when a character or letter index lies outside A..Z."""

    def __init__(self, value: Any):
        super().__init__(
            f"Value {value!r} is outside the alphabet A-Z",
            {"value": repr(value)},
        )


class PresetNotFoundError(EnigmaError):
    """Raised when a rotor or reflector preset name is unknown."""

    def __init__(self, kind: str, name: str):
        super().__init__(
            f"{kind.capitalize()} preset '{name}' not found",
            {"kind": kind, "name": name},
        )
