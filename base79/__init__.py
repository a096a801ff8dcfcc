"""
base79 - Sortable fractional keys for ordered collections.

Usage example:

    import base79

    first = base79.Key.seed()                       # Key('R')
    before = base79.Key.between_with_floor(first)   # Key('>')
    inserted = base79.Key.between(before, first)    # Key('H')
    assert before < inserted < first

Usage example:

    from base79 import Key, KeyList

    listing = KeyList()
    listing.append()
    listing.insert(0)
"""

from .codec import ParseError
from .codec import EmptyNotAllowed
from .codec import InvalidChar
from .digits import OrderError
from .digits import Digits
from .key import Key
from .listing import KeyList

__all__ = [
    'Key',
    'KeyList',
    'Digits',
    'ParseError',
    'EmptyNotAllowed',
    'InvalidChar',
    'OrderError',
]

from . import version
__version__ = version.__doc__
