import unittest

import numpy as np

from fret_finder.errors import DomainError
from fret_finder.guitar import (
    MAX_FRETBOARD_VALUE,
    STANDARD_TUNING,
    Guitar,
    GuitarString,
    standard_tuning,
)
from fret_finder.interval import Interval
from fret_finder.note_types import FretboardLocation
from fret_finder.pitch import Pitch


def notes(*names):
    return [Pitch.parse(name) for name in names]


class TestGuitarString(unittest.TestCase):
    def test_open_pitch_is_first(self):
        string = GuitarString(Pitch.parse("E2"), 21)
        self.assertEqual(string[0], Pitch.parse("E2"))
        self.assertEqual(string.open_pitch, Pitch.parse("E2"))

    def test_length_includes_open_string(self):
        self.assertEqual(len(GuitarString(Pitch.parse("A2"), 21)), 22)
        self.assertEqual(len(GuitarString(Pitch.parse("A2"), 0)), 1)
        self.assertEqual(GuitarString(Pitch.parse("A2"), 12).num_frets, 12)

    def test_fret_is_open_pitch_plus_interval(self):
        open_pitch = Pitch.parse("D3")
        string = GuitarString(open_pitch, 24)
        for fret, pitch in enumerate(string):
            self.assertEqual(pitch, open_pitch + Interval(fret))

    def test_frets_of(self):
        string = GuitarString(Pitch.parse("E2"), 24)
        self.assertEqual(string.frets_of(Pitch.parse("E3")), [12])
        self.assertEqual(string.frets_of(Pitch.parse("E4")), [24])
        self.assertEqual(string.frets_of(Pitch.parse("Eb2")), [])

    def test_negative_fret_count(self):
        with self.assertRaises(DomainError):
            GuitarString(Pitch.parse("E2"), -1)

    def test_equality(self):
        self.assertEqual(
            GuitarString(Pitch.parse("G3"), 5), GuitarString(Pitch(43), 5)
        )
        self.assertNotEqual(
            GuitarString(Pitch.parse("G3"), 5), GuitarString(Pitch(43), 6)
        )


class TestGuitar(unittest.TestCase):
    def test_standard_tuning(self):
        self.assertEqual(standard_tuning(), notes("E2", "A2", "D3", "G3", "B3", "E4"))
        self.assertEqual(list(STANDARD_TUNING), standard_tuning())
        self.assertIsNot(standard_tuning(), standard_tuning())

    def test_default_tuning_is_standard(self):
        self.assertEqual(Guitar(21).tuning, standard_tuning())

    def test_strings_are_stored_highest_first(self):
        guitar = Guitar(21, standard_tuning())
        self.assertEqual(len(guitar.strings), 6)
        self.assertEqual(guitar.strings[0].open_pitch, Pitch.parse("E4"))
        self.assertEqual(guitar.strings[5].open_pitch, Pitch.parse("E2"))
        self.assertEqual(guitar.string(1).open_pitch, Pitch.parse("E4"))
        self.assertEqual(guitar.string(6).open_pitch, Pitch.parse("E2"))
        self.assertEqual(guitar.tuning, standard_tuning())

    def test_string_number_out_of_range(self):
        guitar = Guitar(21)
        with self.assertRaises(DomainError):
            guitar.string(0)
        with self.assertRaises(DomainError):
            guitar.string(7)

    def test_tuning_is_not_modified(self):
        tuning = standard_tuning()
        Guitar(12, tuning)
        self.assertEqual(tuning, standard_tuning())

    def test_fretboard_matrix(self):
        board = Guitar(3, notes("E2", "A2")).fretboard()
        np.testing.assert_array_equal(board, [[33, 34, 35, 36], [28, 29, 30, 31]])

    def test_locate_high_e(self):
        locations = Guitar(21, standard_tuning()).locate(Pitch.parse("E4"))
        self.assertEqual(
            locations,
            [
                FretboardLocation(1, 0),
                FretboardLocation(2, 5),
                FretboardLocation(3, 9),
                FretboardLocation(4, 14),
                FretboardLocation(5, 19),
            ],
        )

    def test_locate_is_octave_strict(self):
        guitar = Guitar(21, standard_tuning())
        self.assertEqual(guitar.string(6).frets_of(Pitch.parse("E2")), [0])
        self.assertEqual(guitar.string(6).frets_of(Pitch.parse("E3")), [12])
        self.assertEqual(guitar.string(6).frets_of(Pitch.parse("E4")), [])
        self.assertEqual(guitar.string(1).frets_of(Pitch.parse("E5")), [12])
        self.assertEqual(
            guitar.locate(Pitch.parse("A2")),
            [FretboardLocation(5, 0), FretboardLocation(6, 5)],
        )

    def test_locate_is_sound_and_complete(self):
        guitar = Guitar(15, notes("D2", "A2", "D3", "G3", "A3", "D4"))
        for value in range(20, 70):
            pitch = Pitch(value)
            found = set(guitar.locate(pitch))
            expected = {
                FretboardLocation(number, fret)
                for number, string in enumerate(guitar.strings, start=1)
                for fret in string.frets_of(pitch)
            }
            self.assertEqual(found, expected)

    def test_locate_out_of_range(self):
        guitar = Guitar(21, standard_tuning())
        self.assertEqual(guitar.locate(Pitch.parse("Eb2")), [])
        self.assertEqual(guitar.locate(Pitch.parse("D6")), [])
        self.assertEqual(guitar.locate(Pitch.parse("C6")), [FretboardLocation(1, 20)])

    def test_empty_tuning(self):
        guitar = Guitar(21, [])
        self.assertEqual(guitar.strings, ())
        self.assertEqual(guitar.fretboard().shape, (0, 22))
        self.assertEqual(guitar.locate(Pitch.parse("E2")), [])

    def test_zero_frets(self):
        guitar = Guitar(0, standard_tuning())
        self.assertEqual(guitar.locate(Pitch.parse("B3")), [FretboardLocation(2, 0)])
        self.assertEqual(guitar.locate(Pitch.parse("C4")), [])

    def test_negative_fret_count(self):
        with self.assertRaises(DomainError):
            Guitar(-1)

    def test_pitch_too_high_for_fretboard(self):
        guitar = Guitar(2, [Pitch.parse("C800000000000000000")])
        with self.assertRaises(DomainError):
            guitar.locate(Pitch.parse("C800000000000000000"))

    def test_highest_fret_at_fretboard_limit(self):
        guitar = Guitar(2, [Pitch(MAX_FRETBOARD_VALUE - 2)])
        self.assertEqual(
            guitar.locate(Pitch(MAX_FRETBOARD_VALUE)), [FretboardLocation(1, 2)]
        )
        with self.assertRaises(DomainError):
            Guitar(3, [Pitch(MAX_FRETBOARD_VALUE - 2)]).locate(Pitch(0))

    def test_query_above_fretboard_limit(self):
        guitar = Guitar(21, standard_tuning())
        self.assertEqual(guitar.locate(Pitch.parse("C800000000000000000")), [])


class TestFretboardLocation(unittest.TestCase):
    def test_fretted_display(self):
        self.assertEqual(str(FretboardLocation(3, 7)), "String 3, fret 7")

    def test_open_display(self):
        location = FretboardLocation(6, 0)
        self.assertTrue(location.is_open)
        self.assertEqual(str(location), "Open 6 string")

    def test_invalid_coordinates(self):
        with self.assertRaises(DomainError):
            FretboardLocation(0, 3)
        with self.assertRaises(DomainError):
            FretboardLocation(1, -1)


if __name__ == "__main__":
    unittest.main()
