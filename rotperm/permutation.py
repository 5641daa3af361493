import numpy as np

class Permutation:
    """
    Class for representing permutations of a fixed number of labeled elements.

    A Permutation object maps each of the labels 1, 2, ..., N to another of those labels,
    every label being hit exactly once. Labels are 1-based wherever they are passed in or
    handed out; the index map is stored 0-based.
    Permutations never change after construction: composition and the generators below
    always return a new object.
    """

#-- Magic methods --#

    def __init__(self, perm = None, size = None, check = True):
        """
        Create a permutation from a 0-based index map.

        perm -- the permutation maps index i to index perm[i].
        size -- if perm is omitted, create the identity permutation of size elements.
                    If perm is provided, size is only used for verification.
        check -- if True, verify that perm is actually a permutation and that
                    len(perm) == size (if size is given).
        """

        if perm is None and size is None:
            raise ValueError("Need either an index map or a size to build a permutation")
        self._map = tuple(range(size)) if perm is None else tuple(perm)
        if not self._map:
            raise ValueError("Permutation must act on at least one element")

        if check:
            if size is not None and size != len(self._map):
                raise ValueError(f"Index map has {len(self._map)} entries but size {size} was asked for")
            if not self.is_valid():
                raise ValueError(f"Index map {self._map} is not a bijection on 0..{len(self._map) - 1}")

    def __len__(self):
        """ Get the number of elements the permutation acts on. """
        return len(self._map)

    def __iter__(self):
        """ Get an iterator to the underlying 0-based index map. """
        return iter(self._map)

    def __str__(self):
        return self.oneline_string()
    def __repr__(self):
        return f"Permutation{self.oneline_string(sep=', ')}"

    def __hash__(self):
        return hash(self._map)

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._map == other._map

    def __mul__(self, other):
        """ p * q is p.compose(q): apply q first, then p. """
        return self.compose(other)

#-- Generator methods --#

    @staticmethod
    def new_from_mapping(values, check = True):
        """
        Create a permutation from the 1-based images of the labels 1..N.

        values -- values[i] is the label that label i+1 is sent to.
        check -- if False, values is trusted to be a permutation of 1..N. Anything else
                    gives meaningless results from every other method.
        """
        return Permutation( [v - 1 for v in values], check=check )

    @staticmethod
    def identity(size):
        """ Generate the identity permutation. """
        return Permutation( size=size )

    @staticmethod
    def rotation(size):
        """ Generate the permutation that shifts every label one step forward, N wrapping to 1. """
        if size < 1:
            raise ValueError("Permutation size must be positive")
        return Permutation( [(i + 1) % size for i in range(size)], check=False )

#-- Application of permutations --#

    def apply(self, label):
        """ Obtain the image of a 1-based label. """
        if not 1 <= label <= len(self):
            raise IndexError(f"Label {label} out of range for {len(self)}-element permutation")
        return self._map[label - 1] + 1

    def compose(self, other):
        """
        Compose two permutations of equal size.

        The result applies other first and then self, so that
        self.compose(other).apply(k) == self.apply(other.apply(k)).
        """
        if len(self) != len(other):
            raise ValueError("Attempting to compose permutations of different length")

        return Permutation( [self._map[i] for i in other._map], check=False )

#-- Properties of permutations --#

    @staticmethod
    def is_permutation(array):
        """ Check that array holds each of 0..len(array)-1 exactly once. """
        return len(array) > 0 and sorted(array) == list(range(len(array)))

    def is_valid(self):
        return self.is_permutation(self._map)

    def is_identity(self):
        return self._map == tuple(range(len(self)))

    def first_cycle_length(self):
        """
        Obtain the length of the cycle containing label 1.

        Only that cycle is walked, so nothing is allocated; the result is always
        between 1 and len(self).
        """
        length = 1
        j = self._map[0]
        while j != 0:
            length += 1
            j = self._map[j]

        return length

    def cycles(self):
        """
        Obtain the disjoint cycles of a permutation.

        Each cycle is a list of 1-based labels in the order they are visited.
        The first cycle starts at label 1, and each following one at the smallest label
        not yet seen. Fixed points are kept as cycles of length 1, so every label
        appears exactly once.
        """
        cycles = []
        tracker = _CycleTracker(len(self))

        start = 0
        tracker.mark(start)
        while start is not None:
            cycle = []
            j = start
            while True:
                cycle.append(j + 1)
                j = self._map[j]
                if tracker.is_marked(j):
                    break
                tracker.mark(j)
            cycles.append(cycle)

            start = tracker.next_unmarked()
            if start is not None:
                tracker.mark(start)

        return cycles

    def cycle_lengths(self):
        """ Obtain the lengths of the cycles, in the order given by cycles(). """
        return [len(cycle) for cycle in self.cycles()]

    def oneline_string(self, sep=' '):
        """ Write the permutation as the parenthesised list of the images of labels 1..N. """
        return f"({sep.join(str(i + 1) for i in self._map)})"

    def cycle_string(self, sep=' '):
        """
        Write the permutation in cycle form.

        Each cycle is enclosed in parentheses and has its labels separated by sep.
        Nothing is written outside the parentheses.
        """
        return ''.join(f"({sep.join(str(c) for c in cycle)})" for cycle in self.cycles())

    def display_cycle_notation(self, file = None):
        """ Print the permutation in cycle form, on stdout unless another file is given. """
        print(self.cycle_string(), file=file)


class _CycleTracker:
    """
    Records which indices a cycle decomposition has already visited.

    Marks are never removed, so the cursor to the smallest unmarked index only moves forward.
    """

    def __init__(self, size):
        self._marked = np.zeros(size, dtype=np.bool_)
        self._cursor = 0

    def mark(self, index):
        self._marked[index] = True

    def is_marked(self, index):
        return bool(self._marked[index])

    def next_unmarked(self):
        """ Obtain the smallest unmarked index, or None once every index is marked. """
        while self._cursor < len(self._marked) and self._marked[self._cursor]:
            self._cursor += 1
        if self._cursor == len(self._marked):
            return None
        return self._cursor
