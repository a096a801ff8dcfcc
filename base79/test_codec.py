"""
Unit tests for the base-79 character codec
"""

import random
import unittest

from base79 import codec
from base79.digits import BASE
from base79.digits import Digits


class AlphabetTests(unittest.TestCase):

    def test_size(self):
        self.assertEqual(BASE, len(codec.ALPHABET))
        self.assertEqual(BASE, len(set(codec.ALPHABET)))

    def test_ends(self):
        self.assertEqual('+', codec.MINIMUM)
        self.assertEqual('y', codec.MAXIMUM)
        self.assertEqual('+', codec.ALPHABET[0])
        self.assertEqual('y', codec.ALPHABET[-1])

    def test_monotonic(self):
        for d in range(BASE - 1):
            self.assertLess(codec.ALPHABET[d], codec.ALPHABET[d + 1])

    def test_printable_ascii(self):
        for c in codec.ALPHABET:
            self.assertTrue(c.isprintable())
            self.assertLess(ord(c), 128)
            self.assertFalse(c.isspace())

    def test_no_quotes(self):
        self.assertNotIn('"', codec.ALPHABET)
        self.assertNotIn("'", codec.ALPHABET)
        self.assertNotIn(' ', codec.ALPHABET)


class EncodeDecodeTests(unittest.TestCase):

    def test_encode(self):
        self.assertEqual('R', codec.encode(Digits([39])))
        self.assertEqual('>', codec.encode(Digits([19])))
        self.assertEqual('f', codec.encode(Digits([59])))
        self.assertEqual('H', codec.encode(Digits([29])))
        self.assertEqual('RR', codec.encode(Digits([39, 39])))
        self.assertEqual('s?Q^Z', codec.encode(Digits([72, 20, 38, 51, 47])))

    def test_decode(self):
        self.assertEqual(Digits([39]), codec.decode('R'))
        self.assertEqual(Digits([72, 20, 38, 51, 47]), codec.decode('s?Q^Z'))
        self.assertEqual(Digits([0, 78]), codec.decode('+y'))

    def test_decode_non_canonical(self):
        self.assertEqual(Digits([39, 0]), codec.decode('R+'))
        self.assertEqual(Digits([0]), codec.decode('+'))

    def test_round_trip(self):
        rng = random.Random(43)
        for _ in range(500):
            d = Digits(rng.randint(0, BASE - 1) for _ in range(rng.randint(1, 12)))
            self.assertEqual(d, codec.decode(codec.encode(d)))

    def test_string_order_is_digit_order(self):
        rng = random.Random(121)
        for _ in range(1000):
            x = Digits(rng.randint(0, BASE - 1) for _ in range(rng.randint(1, 5)))
            y = Digits(rng.randint(0, BASE - 1) for _ in range(rng.randint(1, 5)))
            self.assertEqual(x < y, codec.encode(x) < codec.encode(y))


class ValidateTests(unittest.TestCase):

    def test_ok(self):
        codec.validate('R')
        codec.validate(codec.ALPHABET)
        codec.validate('\\')

    def test_empty(self):
        with self.assertRaises(codec.EmptyNotAllowed):
            codec.validate('')
        with self.assertRaises(codec.EmptyNotAllowed):
            codec.decode('')

    def test_control(self):
        with self.assertRaises(codec.InvalidChar):
            codec.validate('R\n')
        with self.assertRaises(codec.InvalidChar):
            codec.validate('\x00')
        with self.assertRaises(codec.InvalidChar):
            codec.validate('R\x7F')

    def test_outside_alphabet(self):
        for bad in (' ', 'R R', '*', 'z', '~', '"', "'", '한글', 'Biševo'):
            with self.assertRaises(codec.InvalidChar):
                codec.decode(bad)

    def test_message_names_the_character(self):
        with self.assertRaises(codec.InvalidChar) as context:
            codec.validate('RS~')
        self.assertIn("'~'", str(context.exception))
        self.assertIn("position 2", str(context.exception))

    def test_hierarchy(self):
        self.assertTrue(issubclass(codec.EmptyNotAllowed, codec.ParseError))
        self.assertTrue(issubclass(codec.InvalidChar, codec.ParseError))
        self.assertTrue(issubclass(codec.ParseError, ValueError))
        self.assertIs(codec.InvalidChar, codec.ParseError.InvalidChar)
        self.assertIs(codec.EmptyNotAllowed, codec.ParseError.EmptyNotAllowed)

    def test_not_a_string(self):
        with self.assertRaises(TypeError):
            codec.validate(b'R')
        with self.assertRaises(TypeError):
            codec.validate(None)


if __name__ == '__main__':
    unittest.main()
