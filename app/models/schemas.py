from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


# ============================================================================
# Enums
# ============================================================================


class SteppingPolicy(str, Enum):
    """Rotor stepping policies."""

    ODOMETER = "odometer"
    M3_DOUBLE_STEP = "m3_double_step"


class NormalizationMode(str, Enum):
    """Input pre-filter modes."""

    UPPERCASE = "uppercase"  # Upper-case letters, keep everything else
    LETTERS_ONLY = "letters_only"  # Upper-case, drop non-letters
    PRESERVE = "preserve"  # Leave text untouched


# ============================================================================
# Machine Configuration Schemas
# ============================================================================


LETTER_PATTERN = r"^[A-Za-z]$"
WIRING_PATTERN = r"^[A-Za-z]{26}$"


class RotorConfig(BaseModel):
    """
    A single rotor slot.

    Either name a preset (``"I"`` .. ``"V"``) or give an explicit wiring
    and notch. The position is the letter shown in the window.
    """

    preset: str | None = None
    wiring: str | None = Field(default=None, pattern=WIRING_PATTERN)
    notch: str | None = Field(default=None, pattern=LETTER_PATTERN)
    position: str = Field(default="A", pattern=LETTER_PATTERN)

    @model_validator(mode="after")
    def check_source(self) -> "RotorConfig":
        if self.preset is None and (self.wiring is None or self.notch is None):
            raise ValueError("rotor needs either a preset or both wiring and notch")
        if self.preset is not None and self.wiring is not None:
            raise ValueError("rotor cannot have both a preset and a wiring")
        return self


class MachineConfig(BaseModel):
    """
    Full machine state: rotors (fastest first), reflector, plugboard.

    The reflector is either a preset name or a 26-letter wiring.
    Plugboard pairs are two-letter strings such as ``"AZ"``.
    """

    rotors: list[RotorConfig] = Field(min_length=1)
    reflector: str = "B"
    plugboard: list[str] = Field(default_factory=list)
    stepping: SteppingPolicy = SteppingPolicy.ODOMETER

    @property
    def positions(self) -> str:
        return "".join(rotor.position for rotor in self.rotors).upper()


class RotorPresetInfo(BaseModel):
    """A catalogued rotor."""

    name: str
    wiring: str
    notch: str


class ReflectorPresetInfo(BaseModel):
    """A catalogued reflector."""

    name: str
    wiring: str


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    machine: MachineConfig | None = None
    normalize_mode: NormalizationMode = NormalizationMode.UPPERCASE


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    machine: MachineConfig
    normalize_mode: NormalizationMode = NormalizationMode.UPPERCASE


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    machine: MachineConfig
    final_positions: str
    letters_processed: int


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    final_positions: str
    letters_processed: int
    explanation: str


class PresetsResponse(BaseModel):
    """Response schema for /presets endpoint."""

    rotors: list[RotorPresetInfo]
    reflectors: list[ReflectorPresetInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
