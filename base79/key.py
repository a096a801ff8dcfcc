"""
A Key is a sortable position marker:  a fraction strictly between 0 and 1, spelled in base 79.

Features:
 - arbitrary precision
 - string order is value order (sort keys with plain strcmp())
 - there is always room between any two keys
"""

from . import codec
from . import digits as digits_module
from .digits import ABOVE
from .digits import BELOW
from .digits import Digits


class Key(object):
    """
    A fractional index.  Text is the whole story, e.g. Key('R') is 39/79.

        first = Key.seed()                       # 'R', the only key made out of nothing
        before = Key.between_with_floor(first)   # '>'
        after = Key.between_with_ceiling(first)  # 'f'
        middle = Key.between(before, first)      # 'H'
        assert before < middle < first < after

    Why is between() imprecise?
    ---------------------------
    The midpoint of R and S (39/79 and 40/79) is exactly 39.5/79, which would be 'RR' and a half.
    between() does not look for the midpoint.  It looks for the shortest key that fits.
    A little lopsided and short beats perfectly centered and long, when keys are stored
    once per item in a collection.  Deterministic, either way:  same input, same output.

    Equality and order are by text, like comparing the strings.  So Key('R') != Key('R+')
    even though both are worth 39/79.  between() never produces the 'R+' kind.
    """

    __slots__ = ('_text',)

    ParseError = codec.ParseError
    EmptyNotAllowed = codec.EmptyNotAllowed
    InvalidChar = codec.InvalidChar
    OrderError = digits_module.OrderError

    class ConstructorTypeError(TypeError):
        """e.g. Key(42) or Key(b'R')"""

    def __init__(self, content=None):
        """
        Key constructor.

        content - the type can be:
            str               'R'             validated, see Key.parse()
            another Key       Key('R')
            Digits            Digits([39])
            None              (nothing)       the seed, same as Key.seed()
        """
        if isinstance(content, str):
            codec.validate(content)
            self._text = content
        elif isinstance(content, Key):
            self._text = content._text
        elif isinstance(content, Digits):
            if len(content) == 0:
                raise self.EmptyNotAllowed("A key needs at least one digit")
            self._text = codec.encode(content)
        elif content is None:
            self._text = codec.encode(digits_module.mid())
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    # Making keys
    # -----------
    @classmethod
    def seed(cls):
        """The key in the middle, 'R'.  Put it first in an empty collection."""
        return cls(digits_module.mid())

    mid = seed

    @classmethod
    def parse(cls, text):
        """
        Key from text.  Raises a Key.ParseError subclass for bad text.

        assert Key('R') == Key.parse('R')
        """
        return cls(text)

    @classmethod
    def between(cls, lower, upper):
        """
        A new key strictly between two others.

        Raises Key.OrderError unless lower < upper.
        """
        if not lower < upper:
            raise cls.OrderError("{!r} is not less than {!r}".format(lower, upper))
        return cls._from_engine(lower.digits, upper.digits)

    @classmethod
    def between_with_floor(cls, upper):
        """A new key between 0 and this one.  Same as between() with a lower key of exactly zero."""
        return cls._from_engine(BELOW, upper.digits)

    @classmethod
    def between_with_ceiling(cls, lower):
        """A new key between this one and 1.  Same as between() with an upper key of exactly one."""
        return cls._from_engine(lower.digits, ABOVE)

    avg = between
    avg_with_zero = between_with_floor
    avg_with_one = between_with_ceiling

    @classmethod
    def _from_engine(cls, lo, hi):
        return cls(digits_module.canonical(digits_module.between(lo, hi)))

    # Looking at keys
    # ---------------
    def to_text(self):
        """The key as a string.  This is what to store or transmit."""
        return self._text

    def __str__(self):
        return self._text

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self._text)

    def to_json(self):
        return self._text

    @property
    def digits(self):
        """
        The Digits behind the text.

        assert Digits([39]) == Key('R').digits
        """
        return codec.decode(self._text)

    def raw_digits(self):
        """
        The digits as a list of ints, most significant first.

        assert [72, 20, 38, 51, 47] == Key('s?Q^Z').raw_digits()
        """
        return list(self.digits)

    def fraction(self):
        """Exact value, e.g. Fraction(39, 79) for Key('R')"""
        return self.digits.fraction()

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self._text

    def __setstate__(self, text):
        """For the 'pickle' package, object serialization."""
        self._text = text

    # Comparison
    # ----------
    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self._text == other._text

    def __ne__(self, other):
        eq_result = self.__eq__(other)
        if eq_result is NotImplemented:
            return NotImplemented
        return not eq_result

    def __lt__(self, other):  return self._text <  self._comparable(other)
    def __le__(self, other):  return self._text <= self._comparable(other)
    def __gt__(self, other):  return self._text >  self._comparable(other)
    def __ge__(self, other):  return self._text >= self._comparable(other)

    class CompareError(TypeError):
        """e.g. Key('R') < 'S'  Compare keys with keys, or strings with strings."""

    def _comparable(self, other):
        if not isinstance(other, Key):
            raise self.CompareError("Key cannot be compared with a " + type(other).__name__)
        return other._text

    def __hash__(self):
        return hash(self._text)
