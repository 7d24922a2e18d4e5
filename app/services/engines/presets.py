"""
Historical Enigma I wheel wirings.

Rotor notches are the letters at which, under odometer stepping, the
rotor's carry moves its left neighbour.
"""

from app.services.engines.registry import PresetRegistry, ReflectorPreset, RotorPreset

ROTOR_I = PresetRegistry.register_rotor(
    RotorPreset("I", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q")
)
ROTOR_II = PresetRegistry.register_rotor(
    RotorPreset("II", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E")
)
ROTOR_III = PresetRegistry.register_rotor(
    RotorPreset("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V")
)
ROTOR_IV = PresetRegistry.register_rotor(
    RotorPreset("IV", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J")
)
ROTOR_V = PresetRegistry.register_rotor(
    RotorPreset("V", "VZBRGITYUPSDNHLXAWMJQOFECK", "Z")
)

REFLECTOR_B = PresetRegistry.register_reflector(
    ReflectorPreset("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT")
)
REFLECTOR_C = PresetRegistry.register_reflector(
    ReflectorPreset("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL")
)
