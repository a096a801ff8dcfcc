"""
Codec - one printable ASCII character per base-79 digit.

ASCII has 95 printable characters.  The middle 79 of them make the alphabet,
leaving out some at the ends that are awkward in plain text, e.g. space and quote marks.
(Backslash is in.  So it goes.)

    digit  0 <--> '+'
    digit 39 <--> 'R'
    digit 78 <--> 'y'

The mapping is strictly increasing, so string order is digit order.
"""

from .digits import BASE
from .digits import Digits


MINIMUM = '+'
MAXIMUM = chr(ord(MINIMUM) + BASE - 1)
ALPHABET = ''.join(chr(ord(MINIMUM) + d) for d in range(BASE))
assert 'y' == MAXIMUM
assert 'R' == ALPHABET[39]
assert ALPHABET == ''.join(sorted(set(ALPHABET)))
assert not any(c in ALPHABET for c in ' !"\'')


class ParseError(ValueError):
    """Text that cannot be a key."""


class EmptyNotAllowed(ParseError):
    """e.g. Key('')  A key has at least one digit."""


class InvalidChar(ParseError):
    """e.g. Key('R\\n') or Key('R R') or Key('한글')"""


ParseError.EmptyNotAllowed = EmptyNotAllowed
ParseError.InvalidChar = InvalidChar


def validate(text):
    """
    Structural check only.  Raise a ParseError subclass if the text is no good.

    Canonical form is NOT checked, so '+' and 'R+' pass.  Those are zero and R,
    redundantly spelled, and they still sort fine.
    """
    if not isinstance(text, str):
        raise TypeError("Expecting a str, not a " + type(text).__name__)
    if len(text) == 0:
        raise EmptyNotAllowed("A key cannot be empty")
    for position, char in enumerate(text):
        if not MINIMUM <= char <= MAXIMUM:
            raise InvalidChar("Character {char!r} at position {position} is not in {lo!r}..{hi!r}".format(
                char=char,
                position=position,
                lo=MINIMUM,
                hi=MAXIMUM,
            ))


def encode(digits):
    """Digits --> text.  Never fails for a valid Digits."""
    return ''.join(ALPHABET[d] for d in digits)


def decode(text):
    """
    Text --> Digits.  Validates first.

    assert Digits([72, 20, 38, 51, 47]) == decode('s?Q^Z')
    """
    validate(text)
    offset = ord(MINIMUM)
    return Digits(ord(c) - offset for c in text)
assert 's?Q^Z' == encode(Digits([72, 20, 38, 51, 47]))
