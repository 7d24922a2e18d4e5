from dataclasses import dataclass

from app.core.exceptions import PresetNotFoundError


@dataclass(frozen=True)
class RotorPreset:
    """A catalogued rotor wiring."""

    name: str
    wiring: str
    notch: str


@dataclass(frozen=True)
class ReflectorPreset:
    """A catalogued reflector wiring."""

    name: str
    wiring: str


class PresetRegistry:
    """
    Registry of named rotor and reflector wirings.

    Presets register themselves when the presets module is imported and
    are looked up by name, case-insensitively.
    """

    _rotors: dict[str, RotorPreset] = {}
    _reflectors: dict[str, ReflectorPreset] = {}

    @classmethod
    def register_rotor(cls, preset: RotorPreset) -> RotorPreset:
        """
        Register a rotor preset.

        Args:
            preset: The rotor to register

        Returns:
            The preset (so registration can be chained)
        """
        cls._rotors[preset.name.upper()] = preset
        return preset

    @classmethod
    def register_reflector(cls, preset: ReflectorPreset) -> ReflectorPreset:
        """Register a reflector preset."""
        cls._reflectors[preset.name.upper()] = preset
        return preset

    def get_rotor(self, name: str) -> RotorPreset:
        """
        Get a rotor preset by name.

        Raises:
            PresetNotFoundError: no rotor with that name
        """
        try:
            return self._rotors[name.upper()]
        except KeyError:
            raise PresetNotFoundError("rotor", name)

    def get_reflector(self, name: str) -> ReflectorPreset:
        """
        Get a reflector preset by name.

        Raises:
            PresetNotFoundError: no reflector with that name
        """
        try:
            return self._reflectors[name.upper()]
        except KeyError:
            raise PresetNotFoundError("reflector", name)

    @classmethod
    def list_rotors(cls) -> list[RotorPreset]:
        return list(cls._rotors.values())

    @classmethod
    def list_reflectors(cls) -> list[ReflectorPreset]:
        return list(cls._reflectors.values())

    @classmethod
    def is_registered(cls, name: str, kind: str = "rotor") -> bool:
        """
        Check if a preset name is registered.

        Args:
            name: Preset name
            kind: ``"rotor"`` or ``"reflector"``

        Returns:
            True if registered
        """
        table = cls._reflectors if kind == "reflector" else cls._rotors
        return name.upper() in table


# Import presets to trigger registration
def _load_presets() -> None:
    """Load the preset catalogue to trigger registration."""
    from app.services.engines import presets  # noqa: F401


# Load presets when module is imported
_load_presets()
