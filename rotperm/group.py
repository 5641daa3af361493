import collections.abc
import logging
from abc import abstractmethod

from .permutation import Permutation

logger = logging.getLogger(__name__)

class Group(collections.abc.Iterator):
    """
    Class for iterating over the elements of a permutation group.

    Group itself is an abstract class, and its subclasses implement specific groups.
    A Group is an iterator returning a Permutation after each iteration.
    By convention, the first permutation returned should be the identity.
    After raising StopIteration a Group should be in the same state it was when it started
    the iteration, allowing the iteration to be repeated.
    Subclasses answer `in` and len() without iterating, so both are safe inside a loop
    over the group.
    """

    def __iter__(self):
        return self

    @abstractmethod
    def __next__(self):
        pass

class CyclicGroup(Group):
    """
    The cyclic group generated by a single rotation.

    Iterates over rotation**0, rotation**1, ..., rotation**(n-1), each element obtained
    by composing the previous one with the rotation.
    """

    def __init__(self, n):
        self._size = n
        self._generator = Permutation.rotation(n)
        iter(self)

    def __iter__(self):
        self._step = 0
        self._current = Permutation.identity(self._size)
        return self

    def __next__(self):
        if self._step < self._size:
            perm = self._current
            logger.debug("Step %d of %s: %s", self._step, self, perm)
            self._current = self._current.compose(self._generator)
            self._step += 1
            return perm
        else:
            iter(self)
            raise StopIteration

    def __len__(self):
        return self._size

    def __contains__(self, elem):
        """ Check if elem is a power of the rotation, without disturbing an ongoing iteration. """
        if not isinstance(elem, Permutation) or len(elem) != self._size:
            return False
        shift = elem.apply(1) - 1
        return all( m == (i + shift) % self._size for i, m in enumerate(elem) )

    @property
    def generator(self):
        return self._generator

    def __str__(self):
        return f'Cyclic group Z_{self._size}'
