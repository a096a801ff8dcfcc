"""
KeyList - an ordered collection whose order lives in its keys.

Insert anywhere, by index, and get back the one new Key to store for the new item.
No other item gets renumbered.
"""

import logging

from .key import Key


logger = logging.getLogger(__name__)


class KeyList(object):
    """
    Keys in ascending order.

        listing = KeyList()
        listing.insert(0)   # Key('R')
        listing.insert(0)   # Key('>')  before R
        listing.insert(1)   # Key('H')  between > and R
        listing.append()    # Key('f')  after R
        assert ['>', 'H', 'R', 'f'] == [str(k) for k in listing]

    Like a list, this is not thread-safe.
    """

    class OrderError(ValueError):
        """e.g. KeyList([Key('S'), Key('R')])"""

    def __init__(self, keys=()):
        self._keys = [Key(k) for k in keys]
        for lower, upper in zip(self._keys, self._keys[1:]):
            if not lower < upper:
                raise self.OrderError("{!r} is not less than {!r}".format(lower, upper))

    def __repr__(self):
        return "KeyList([{}])".format(", ".join(repr(k) for k in self._keys))

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def __getitem__(self, index):
        return self._keys[index]

    def keys(self):
        return list(self._keys)

    def key_for(self, index):
        """
        The key that would go at this index, without inserting it.

        index - 0 through len(self), or negative counting from the end like list.insert()
                (though unlike list.insert(), out of range raises IndexError)
        """
        index = self._normalize(index)
        if len(self._keys) == 0:
            return Key.seed()
        elif index == 0:
            return Key.between_with_floor(self._keys[0])
        elif index == len(self._keys):
            return Key.between_with_ceiling(self._keys[-1])
        else:
            return Key.between(self._keys[index - 1], self._keys[index])

    def insert(self, index):
        """Make a key for the slot before self[index], put it there, and return it."""
        index = self._normalize(index)
        new_key = self.key_for(index)
        self._keys.insert(index, new_key)
        logger.debug("Inserted %r at %d of %d", new_key, index, len(self._keys))
        return new_key

    def prepend(self):
        return self.insert(0)

    def append(self):
        return self.insert(len(self._keys))

    def _normalize(self, index):
        length = len(self._keys)
        if index < 0:
            index += length
        if not 0 <= index <= length:
            raise IndexError("Index {} is out of range for {} keys".format(index, length))
        return index

    def max_length(self):
        """Length of the longest key text, 0 if empty."""
        return max((len(str(k)) for k in self._keys), default=0)

    def mean_length(self):
        """Average length of the key texts, 0.0 if empty."""
        if len(self._keys) == 0:
            return 0.0
        return sum(len(str(k)) for k in self._keys) / len(self._keys)
