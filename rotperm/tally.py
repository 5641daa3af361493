import collections.abc
import logging
import numbers

logger = logging.getLogger(__name__)

class CycleTally(collections.abc.Mapping):
    """
    Frequency table of cycle lengths.

    Maps each cycle length seen so far to the number of times it was seen.
    Iteration, keys() and items() always run in ascending order of length.
    """

    def __init__(self, lengths = ()):
        self._counts = {}
        self.update(lengths)

    def __getitem__(self, length):
        return self._counts[length]

    def __iter__(self):
        return iter(sorted(self._counts))

    def __len__(self):
        return len(self._counts)

    def __repr__(self):
        return f"CycleTally({dict(self.items())})"

    def add(self, length):
        """ Count one more occurrence of length. """
        if isinstance(length, bool) or not isinstance(length, numbers.Integral) or length < 1:
            raise ValueError(f"Cycle length must be a positive integer, got {length!r}")
        length = int(length)
        self._counts[length] = self._counts.get(length, 0) + 1

    def update(self, lengths):
        for length in lengths:
            self.add(length)

    def total(self):
        """ Number of occurrences counted over all lengths. """
        return sum(self._counts.values())

    def lines(self):
        """ Yield one 'Length L: <tab>count' line per length, shortest first. """
        logger.debug("Tally of %d samples over %d lengths", self.total(), len(self))
        for length, count in self.items():
            yield f"Length {length}: \t{count}"
