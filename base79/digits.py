"""
Digits - the base-79 fraction underneath every Key.

A digit sequence is a tuple of small integers, each 0 through 78.
It is read as a base-79 fraction after an implicit leading "0."

    Digits([39])      ==  39/79                  (about 0.4937)
    Digits([39, 39])  ==  39/79 + 39/79**2       (about 0.4999)

Features:
 - arbitrary precision
 - values strictly between 0 and 1
 - monotonicity (tuple order is value order, for canonical sequences)

The exact endpoints 0 and 1 are never stored.  They are the virtual bounds BELOW and ABOVE,
which only ever go INTO between(), never come out of it.
"""

import fractions
import logging


logger = logging.getLogger(__name__)


BASE = 79
DIGIT_MIN = 0
DIGIT_MAX = BASE - 1
LOW = DIGIT_MIN - 1    # virtual digit of BELOW, every position, exactly 0
HIGH = DIGIT_MAX + 1   # virtual digit of ABOVE, every position, exactly 1
assert (LOW + HIGH) // 2 == 39


class OrderError(ValueError):
    """e.g. between(Digits([40]), Digits([39])) or between(ABOVE, BELOW)"""


class CanonicalError(ValueError):
    """e.g. canonical(Digits([0, 0])), which would be exactly zero."""


class Bound(object):
    """
    A virtual endpoint:  BELOW is exactly 0, ABOVE is exactly 1.

    A Bound reads as the same out-of-range digit at every position,
    LOW for BELOW and HIGH for ABOVE.  So in digit arithmetic
    BELOW behaves like 0.(-1)(-1)(-1)... and ABOVE like 0.(79)(79)(79)...
    """
    __slots__ = ('name', 'digit')

    def __init__(self, name, digit):
        self.name = name
        self.digit = digit

    def __repr__(self):
        return self.name

    def fraction(self):
        return fractions.Fraction(0 if self.digit == LOW else 1)


BELOW = Bound('BELOW', LOW)
ABOVE = Bound('ABOVE', HIGH)


class Digits(object):
    """
    Immutable sequence of base-79 digits.

        assert Digits([39]) == mid()
        assert [39, 39] == list(Digits([39, 39]))

    Comparison is tuple comparison.  That agrees with value comparison only for canonical
    sequences, i.e. no trailing zero digit.  Digits([5]) < Digits([5, 0]) though both are 5/79.
    """
    __slots__ = ('_digits',)

    class RangeError(ValueError):
        """e.g. Digits([79]) or Digits([-1]) or Digits(['R'])"""

    def __init__(self, digits=()):
        digits = tuple(digits)
        for digit in digits:
            if isinstance(digit, bool) or not isinstance(digit, int):
                raise self.RangeError("A digit must be an int, not a {}".format(type(digit).__name__))
            if not DIGIT_MIN <= digit <= DIGIT_MAX:
                raise self.RangeError("Digit {} is outside {}..{}".format(digit, DIGIT_MIN, DIGIT_MAX))
        self._digits = digits

    def __repr__(self):
        return "Digits([{}])".format(", ".join(str(d) for d in self._digits))

    def __len__(self):
        return len(self._digits)

    def __iter__(self):
        return iter(self._digits)

    def __getitem__(self, index):
        return self._digits[index]

    def __eq__(self, other):
        if not isinstance(other, Digits):
            return NotImplemented
        return self._digits == other._digits

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._digits <  self._comparable(other)
    def __le__(self, other):  return self._digits <= self._comparable(other)
    def __gt__(self, other):  return self._digits >  self._comparable(other)
    def __ge__(self, other):  return self._digits >= self._comparable(other)

    @staticmethod
    def _comparable(other):
        if not isinstance(other, Digits):
            raise TypeError("Digits cannot be compared with a " + type(other).__name__)
        return other._digits

    def __hash__(self):
        return hash(self._digits)

    def digit(self, index):
        """The digit at a position, or 0 past the end.  Zeros go on forever."""
        if index < len(self._digits):
            return self._digits[index]
        return 0

    def is_canonical(self):
        """Non-empty, and no trailing zero that could be dropped without changing the value."""
        return len(self._digits) > 0 and self._digits[-1] != 0

    def fraction(self):
        """
        The exact value, as a Fraction.  No floating point.

        assert Fraction(39, 79) == Digits([39]).fraction()
        """
        numerator = 0
        for digit in self._digits:
            numerator = numerator * BASE + digit
        return fractions.Fraction(numerator, BASE ** len(self._digits))


def read(operand, index):
    """The i-th digit of a Bound or Digits.  Bounds never run out, Digits run out into zeros."""
    if isinstance(operand, Bound):
        return operand.digit
    return operand.digit(index)


def mid():
    """
    The seed:  the one-digit value halfway between the virtual bounds.

    The only digit sequence made out of nothing.  The first key in an empty collection.
    """
    return Digits([(LOW + HIGH) // 2])
assert Digits([39]) == mid()


def between(lo, hi):
    """
    Compute the shortest Digits strictly between lo and hi.

    lo, hi - each is BELOW, ABOVE, or a Digits, with lo < hi in value.

    Reading both operands digit by digit, from the most significant:
        gap of 2 or more - the midpoint digit lands strictly inside, done.
        gap of exactly 1 - keep lo's digit.  That already puts the result below hi,
                           so from here on the only upper limit is ABOVE.
        gap of 0         - keep the shared digit, compare the next position.

    While lo is BELOW, every digit placed so far is 0, so the finishing digit must be at least 1.
    Otherwise e.g. between(BELOW, Digits([1])) would come out Digits([0]), which is exactly zero.

    Raises OrderError if lo is not less than hi.  That is a bug in the caller, not a retry-able condition.
    """
    if lo is ABOVE:
        raise OrderError("Nothing is above ABOVE")
    if hi is BELOW:
        raise OrderError("Nothing is below BELOW")
    output = []
    index = 0
    while True:
        if isinstance(hi, Digits) and index >= len(hi):
            if lo is BELOW:
                raise OrderError("{!r} is zero, no room above BELOW".format(hi))
            if index >= len(lo):
                raise OrderError("{!r} and {!r} are equal".format(lo, hi))
        a = read(lo, index)
        b = read(hi, index)
        if b < a:
            raise OrderError("{!r} is not less than {!r}".format(lo, hi))
        if lo is BELOW:
            if b >= 2:
                output.append(max(1, (a + b) // 2))
                break
            output.append(0)
            if b == 1:
                hi = ABOVE
        elif b - a >= 2:
            output.append((a + b) // 2)
            break
        elif b - a == 1:
            output.append(a)
            hi = ABOVE
        else:
            output.append(a)
        index += 1
        logger.debug("between() extending precision to %d digits", index + 1)

    return_value = Digits(output)
    assert return_value.is_canonical(), "between() made {!r}".format(return_value)
    return return_value


def canonical(digits):
    """
    Strip trailing zeros.  They add nothing to the value.

    assert Digits([5]) == canonical(Digits([5, 0, 0]))

    Raises CanonicalError if nothing is left.  That value would be exactly zero, not a key.
    (Exactly one cannot happen.  A finite string of digits 78 or less always falls short of 1.)
    """
    stripped = list(digits)
    while stripped and stripped[-1] == 0:
        stripped.pop()
    if not stripped:
        raise CanonicalError("{!r} is zero".format(digits))
    return Digits(stripped)
assert Digits([5]) == canonical(Digits([5, 0, 0]))
