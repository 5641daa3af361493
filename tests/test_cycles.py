import itertools

from rotperm import Permutation, permutation
from rotperm.permutation import _CycleTracker


def test_tracker():
    tracker = _CycleTracker(4)
    assert tracker.next_unmarked() == 0
    tracker.mark(0)
    tracker.mark(0)
    tracker.mark(2)
    assert tracker.is_marked(2)
    assert not tracker.is_marked(1)
    assert tracker.next_unmarked() == 1
    tracker.mark(1)
    assert tracker.next_unmarked() == 3
    tracker.mark(3)
    assert tracker.next_unmarked() is None


def test_cycles_rotation():
    assert Permutation.rotation(4).cycles() == [[1, 2, 3, 4]]
    assert Permutation.rotation(4).cycle_string() == "(1 2 3 4)"


def test_cycles_identity():
    assert Permutation.identity(3).cycles() == [[1], [2], [3]]
    assert Permutation.identity(3).cycle_string() == "(1)(2)(3)"


def test_cycles_flip():
    flip = Permutation.new_from_mapping([1, 5, 4, 3, 2])
    assert flip.cycles() == [[1], [2, 5], [3, 4]]
    assert flip.cycle_lengths() == [1, 2, 2]
    assert flip.cycle_string(sep=',') == "(1)(2,5)(3,4)"


def test_cycles_traversal_order():
    perm = Permutation.new_from_mapping([3, 4, 5, 2, 1, 6])
    assert perm.cycles() == [[1, 3, 5], [2, 4], [6]]


def test_cycles_cover_every_label():
    for mapping in itertools.permutations(range(1, 6)):
        perm = Permutation.new_from_mapping(mapping)
        cycles = perm.cycles()
        assert sorted(label for cycle in cycles for label in cycle) == [1, 2, 3, 4, 5]
        assert sum(perm.cycle_lengths()) == 5
        assert 1 <= perm.first_cycle_length() <= 5
        assert cycles[0][0] == 1
        assert perm.first_cycle_length() == len(cycles[0])
        for cycle in cycles:
            for a, b in zip(cycle, cycle[1:] + cycle[:1]):
                assert perm.apply(a) == b


def test_display_cycle_notation(capsys):
    Permutation.rotation(4).display_cycle_notation()
    assert capsys.readouterr().out == "(1 2 3 4)\n"

    Permutation.new_from_mapping([1, 5, 4, 3, 2]).display_cycle_notation()
    assert capsys.readouterr().out == "(1)(2 5)(3 4)\n"


def test_tracker_cursor_only_moves_forward():
    tracker = _CycleTracker(6)
    for index in (0, 1, 3):
        tracker.mark(index)
    assert tracker.next_unmarked() == 2
    # marking past the cursor does not move it back or skip 2
    tracker.mark(5)
    assert tracker.next_unmarked() == 2
    tracker.mark(2)
    assert tracker.next_unmarked() == 4
    tracker.mark(4)
    assert tracker.next_unmarked() is None
    assert tracker.next_unmarked() is None


def test_decomposition_scan_is_linear(monkeypatch):
    cursors = []

    class CountingTracker(_CycleTracker):
        def next_unmarked(self):
            before = self._cursor
            index = super().next_unmarked()
            cursors.append((before, self._cursor))
            return index

    monkeypatch.setattr(permutation, "_CycleTracker", CountingTracker)

    n = 2000
    assert len(Permutation.identity(n).cycles()) == n
    # one scan per cycle, and the scans together walk the array once
    assert len(cursors) == n
    assert all(before <= after for before, after in cursors)
    assert sum(after - before for before, after in cursors) == n
