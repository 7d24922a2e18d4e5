"""Tests for the assembled machine and the stream driver."""

import pytest

from app.core.exceptions import (
    ConfigInvalidError,
    OutOfAlphabetError,
    PlugboardError,
    ReflectorError,
    RotorWiringError,
)
from app.models.schemas import SteppingPolicy
from app.services.engines.enigma.alphabet import ALPHABET, from_letter, to_letter
from app.services.engines.enigma.driver import iter_process, process
from app.services.engines.enigma.machine import make_machine
from app.services.engines.presets import REFLECTOR_B, ROTOR_I, ROTOR_II, ROTOR_III

SEEDS = range(25)


class TestMachineProperties:
    """Universal properties, checked on the scenario machine and random machines."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_substitution_is_involution_at_fixed_positions(self, seed, make_random):
        machine = make_random(seed)
        for _ in range(30):
            for letter in range(26):
                assert machine.substitute(machine.substitute(letter)) == letter
            machine.step()

    @pytest.mark.parametrize("seed", SEEDS)
    def test_no_letter_encrypts_to_itself(self, seed, make_random):
        machine = make_random(seed)
        for _ in range(60):
            for letter in range(26):
                assert machine.substitute(letter) != letter
            machine.step()

    @pytest.mark.parametrize("seed", SEEDS)
    def test_end_to_end_reciprocity(self, seed, make_random):
        machine = make_random(seed)
        message = "THE QUICK BROWN FOX, 42 JUMPS OVER the lazy dog! " * 3

        ciphertext = process(machine, message)
        machine.reset()
        assert process(machine, ciphertext) == message

    def test_encode_steps_before_substituting(self, machine, make_scenario):
        expected_window = "BAA"
        stepped = make_scenario(expected_window)
        expected = stepped.substitute(to_letter("A"))

        assert machine.encode(to_letter("A")) == expected
        assert machine.window == expected_window

    def test_encode_rejects_out_of_range_without_stepping(self, machine):
        for bad in (-1, 26, "A"):
            with pytest.raises(OutOfAlphabetError):
                machine.encode(bad)
        assert machine.window == "AAA"

    def test_odometer_advance_after_k_letters(self, machine):
        """Fast rotor moves k steps; a carry from Q on letters 16, 42, 68, 94."""
        process(machine, "A" * 100)
        # Fourth carry lands rotor II on its notch E, which carries into III.
        assert machine.window == from_letter(100 % 26) + "EB"

    def test_slower_rotors_move_only_after_a_carry(self, machine):
        history = [machine.positions]
        for _ in range(100):
            machine.encode(to_letter("A"))
            history.append(machine.positions)

        def moved(slot):
            return [k for k in range(1, 101) if history[k][slot] != history[k - 1][slot]]

        assert moved(0) == list(range(1, 101))
        assert moved(1) == [16, 42, 68, 94]
        assert moved(2) == [94]
        for k in moved(1):
            assert history[k][0] == to_letter(ROTOR_I.notch)

    def test_many_rotors(self):
        wheels = [ROTOR_I, ROTOR_II, ROTOR_III, ROTOR_I, ROTOR_II]
        machine = make_machine(
            [(w.wiring, w.notch, "A") for w in wheels],
            REFLECTOR_B.wiring,
        )
        ciphertext = process(machine, "ATTACK AT DAWN")
        machine.reset()
        assert process(machine, ciphertext) == "ATTACK AT DAWN"


class TestScenarios:
    """Rotors I, II, III fastest first, reflector B, plugs A-Z and B-Y."""

    def test_known_answer_single_letter(self, machine):
        assert process(machine, "A") == "T"

    def test_s1_single_letter_round_trip(self, machine):
        y1 = process(machine, "A")
        assert y1 != "A"

        machine.reset("AAA")
        assert process(machine, y1) == "A"

    def test_s2_five_letters(self, machine):
        ciphertext = process(machine, "AAAAA")
        assert len(ciphertext) == 5
        assert all(c != "A" for c in ciphertext)

    def test_s3_space_preserved(self, machine):
        ciphertext = process(machine, "HELLO WORLD")

        assert ciphertext[5] == " "
        assert ciphertext[:5] != "HELLO"
        assert ciphertext[6:] != "WORLD"

        machine.reset()
        assert process(machine, ciphertext) == "HELLO WORLD"

    def test_s4_lowercase_passes_through(self, machine):
        assert process(machine, "hello") == "hello"
        assert machine.window == "AAA"

    def test_s5_full_revolution(self, machine):
        process(machine, "K" * 26)

        positions = machine.positions
        assert positions[0] == 0
        assert positions[1] == 1
        assert positions[2] == 0

    def test_s6_hundred_letters(self, machine):
        ciphertext = process(machine, "A" * 100)
        assert len(ciphertext) == 100
        assert "A" not in ciphertext


class TestHistoricalVectors:
    """Rotors III, II, I fastest first, reflector B, no plugs."""

    @pytest.mark.parametrize("stepping", list(SteppingPolicy))
    def test_aaaaa_encrypts_to_bdzgo(self, stepping):
        machine = make_machine(
            [
                (ROTOR_III.wiring, ROTOR_III.notch, "A"),
                (ROTOR_II.wiring, ROTOR_II.notch, "A"),
                (ROTOR_I.wiring, ROTOR_I.notch, "A"),
            ],
            REFLECTOR_B.wiring,
            stepping=stepping,
        )
        assert process(machine, "AAAAA") == "BDZGO"

    def test_policies_diverge_at_double_step(self):
        def build(stepping):
            return make_machine(
                [
                    (ROTOR_III.wiring, ROTOR_III.notch, "U"),
                    (ROTOR_II.wiring, ROTOR_II.notch, "D"),
                    (ROTOR_I.wiring, ROTOR_I.notch, "A"),
                ],
                REFLECTOR_B.wiring,
                stepping=stepping,
            )

        odometer = build(SteppingPolicy.ODOMETER)
        m3 = build(SteppingPolicy.M3_DOUBLE_STEP)
        process(odometer, "AAA")
        process(m3, "AAA")

        assert odometer.window == "XEB"
        assert m3.window == "XFB"


class TestPassThrough:
    """Non-alphabet characters."""

    @pytest.mark.parametrize("text", ["", " ", "1234567890", "hello, world", "\n\t", "ÄÖÜ ß", "[]@`{"])
    def test_non_eligible_text_unchanged_and_no_stepping(self, machine, text):
        assert process(machine, text) == text
        assert machine.window == "AAA"

    def test_positions_preserved_in_mixed_text(self, machine):
        text = "A-b C.d E"
        output = process(machine, text)

        assert len(output) == len(text)
        for original, encoded in zip(text, output):
            if original in ALPHABET:
                assert encoded in ALPHABET and encoded != original
            else:
                assert encoded == original
        assert machine.positions[0] == 3

    def test_iter_process_is_lazy(self, machine):
        stream = iter_process(machine, iter("ABCDEF"))
        first_two = [next(stream), next(stream)]

        assert len(first_two) == 2
        assert machine.positions[0] == 2

    def test_process_accepts_character_lists(self, machine):
        ciphertext = process(machine, list("HELLO"))
        machine.reset()
        assert process(machine, ciphertext) == "HELLO"


class TestConfiguration:
    """make_machine validation and reset."""

    def rotor_settings(self):
        return [
            (ROTOR_I.wiring, ROTOR_I.notch, "A"),
            (ROTOR_II.wiring, ROTOR_II.notch, "A"),
            (ROTOR_III.wiring, ROTOR_III.notch, "A"),
        ]

    def test_bad_rotor_wiring(self):
        settings = self.rotor_settings()
        settings[1] = ("ABCDEFGHIJKLMNOPQRSTUVWXYY", "E", "A")
        with pytest.raises(RotorWiringError):
            make_machine(settings, REFLECTOR_B.wiring)

    def test_bad_reflector(self):
        with pytest.raises(ReflectorError):
            make_machine(self.rotor_settings(), ALPHABET)

    def test_plugboard_letter_reused(self):
        with pytest.raises(ConfigInvalidError):
            make_machine(self.rotor_settings(), REFLECTOR_B.wiring, ["AZ", "ZB"])

    def test_no_rotors(self):
        with pytest.raises(ConfigInvalidError):
            make_machine([], REFLECTOR_B.wiring)

    def test_malformed_rotor_tuple(self):
        with pytest.raises(ConfigInvalidError):
            make_machine([(ROTOR_I.wiring, "Q")], REFLECTOR_B.wiring)

    def test_unknown_stepping_policy(self):
        with pytest.raises(ConfigInvalidError):
            make_machine(self.rotor_settings(), REFLECTOR_B.wiring, stepping="wobble")

    def test_initial_positions_remembered(self):
        machine = make_machine(
            [(ROTOR_I.wiring, ROTOR_I.notch, "M"), (ROTOR_II.wiring, ROTOR_II.notch, 3)],
            REFLECTOR_B.wiring,
        )
        assert machine.window == "MD"

        process(machine, "SOMETHING")
        machine.reset()
        assert machine.window == "MD"

    def test_reset_to_explicit_positions(self, machine):
        machine.reset("QEV")
        assert machine.window == "QEV"
        machine.reset([1, 2, 3])
        assert machine.window == "BCD"

    @pytest.mark.parametrize("positions", ["AA", "AAAA", "A1A", [0, 0, 26]])
    def test_reset_rejects_bad_positions(self, machine, positions):
        with pytest.raises(ConfigInvalidError):
            machine.reset(positions)

    @pytest.mark.parametrize("positions", [5, 1.5])
    def test_reset_rejects_non_sequence(self, machine, positions):
        with pytest.raises(ConfigInvalidError):
            machine.reset(positions)
        assert machine.window == "AAA"

    def test_rotor_wiring_not_a_sequence(self):
        with pytest.raises(RotorWiringError):
            make_machine([(None, "Q", "A")], REFLECTOR_B.wiring)

    def test_reflector_not_a_sequence(self):
        with pytest.raises(ReflectorError):
            make_machine(self.rotor_settings(), None)

    @pytest.mark.parametrize("pairs", [None, 42])
    def test_plugboard_not_a_sequence(self, pairs):
        with pytest.raises(PlugboardError):
            make_machine(self.rotor_settings(), REFLECTOR_B.wiring, pairs)

    def test_rotor_list_missing(self):
        with pytest.raises(ConfigInvalidError):
            make_machine(None, REFLECTOR_B.wiring)
