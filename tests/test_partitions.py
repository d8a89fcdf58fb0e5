import pytest
from collections import deque
from itertools import chain
from sympy.utilities.iterables import partitions as sympy_partitions

from partition_generator.Partitions import Partitions, PartitionView, Split, DESCEND, DONE, START

A000041 = [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42, 56, 77, 101, 135, 176, 231, 297, 385, 490,
           627, 792, 1002, 1255, 1575, 1958, 2436, 3010, 3718, 4565, 5604, 6842, 8349, 10143, 12310]


def drain(p):
    return [tuple(part) for part in p]


def reference_partitions(n):
    return {tuple(sorted(chain.from_iterable([k] * v for k, v in d.items()))) for d in sympy_partitions(n)}


def test_partitions_init():
    with pytest.raises(TypeError):
        Partitions(2.0)
    with pytest.raises(TypeError):
        Partitions("4")
    with pytest.raises(TypeError):
        Partitions(True)
    with pytest.raises(ValueError):
        Partitions(-1)

    p = Partitions(5)
    assert p.n == 5
    assert p.phase is START
    assert not p.is_exhausted
    assert repr(p) == "Partitions(n=5, phase=Start)"


def test_partitions_get_before_advance():
    p = Partitions(3)
    assert p.get() is None
    assert p.get() is None
    assert p.next() == [1, 1, 1]


def test_partitions_oeis():
    for n, ref in enumerate(A000041):
        assert Partitions(n).count() == ref


def test_partitions_n0():
    p = Partitions(0)
    part = p.next()
    assert part is not None
    assert len(part) == 0
    assert part == []
    assert p.next() is None
    assert p.is_exhausted


def test_partitions_n1():
    assert drain(Partitions(1)) == [(1,)]


def test_partitions_n4():
    assert drain(Partitions(4)) == [(1, 1, 1, 1), (1, 1, 2), (1, 3), (2, 2), (4,)]


def test_partitions_valid():
    for n in range(1, 16):
        for part in Partitions(n):
            assert sum(part) == n
            assert part.total() == n
            assert all(i > 0 for i in part)
            assert all(part[i] <= part[i + 1] for i in range(len(part) - 1))


def test_partitions_unique():
    for n in range(16):
        generated = drain(Partitions(n))
        assert len(generated) == len(set(generated))


def test_partitions_lexicographic():
    for n in range(1, 12):
        generated = drain(Partitions(n))
        assert generated == sorted(generated)


def test_partitions_reference():
    for n in range(14):
        assert set(drain(Partitions(n))) == reference_partitions(n)


def test_partitions_exhausted():
    p = Partitions(6)
    assert p.count() == 11
    assert p.is_exhausted
    assert p.phase is DONE
    for _ in range(3):
        assert p.get() is None
        p.advance()
        assert p.get() is None
        assert p.next() is None
    assert p.is_exhausted


def test_partitions_exhausted_n0():
    p = Partitions(0)
    assert p.count() == 1
    for _ in range(3):
        p.advance()
        assert p.get() is None


def test_partitions_split_phase():
    p = Partitions(12)
    previous = None
    while p.next() is not None:
        phase = p.phase
        if isinstance(phase, Split):
            part = p.get()
            assert len(part) == phase.l + 1
            assert part[-2] == phase.x
            pair = part[-2] + part[-1]
            if previous is not None and previous[0] is phase:
                assert pair == previous[1]
                assert part[-2] == previous[2] + 1
                assert part[-1] == previous[3] - 1
            previous = (phase, pair, part[-2], part[-1])
        else:
            assert phase is DESCEND
            previous = None


def test_partitions_borrowed_view():
    p = Partitions(4)
    first = p.next()
    assert first == [1, 1, 1, 1]
    saved = first.tolist()
    second = p.next()
    assert second == [1, 1, 2]
    # a view reads the shared buffer
    assert first == [1, 1, 2, 1]
    assert saved == [1, 1, 1, 1]


def test_partitions_end():
    p = Partitions(5)
    p.next()
    storage = p.end()
    assert isinstance(storage, list)
    assert len(storage) == 6
    assert p.is_exhausted
    assert p.get() is None
    p.advance()
    assert p.get() is None


def test_partitions_recycle():
    p = Partitions(7)
    p.nth(4)
    storage = p.end()

    for n in (0, 3, 7, 10):
        q = Partitions.recycle(n, storage)
        assert q.n == n
        assert drain(q) == drain(Partitions(n))
        storage = q.end()
        assert len(storage) == n + 1


def test_partitions_recycle_storage():
    storage = [9, 9, 9]
    p = Partitions.recycle(5, storage)
    assert storage == [0] * 6
    assert drain(p) == drain(Partitions(5))
    assert p.end() is storage

    with pytest.raises(TypeError):
        Partitions.recycle(3, (0, 0, 0, 0))
    with pytest.raises(ValueError):
        Partitions.recycle(-2, [])


def test_partitions_storage_must_be_list():
    with pytest.raises(TypeError):
        Partitions.recycle(4, deque())
    with pytest.raises(TypeError):
        Partitions(4, deque([0] * 5))

    storage = []
    assert Partitions.recycle(4, storage).next().tolist() == [1, 1, 1, 1]
    assert repr(Partitions(4, storage).next()) == "PartitionView([1, 1, 1, 1])"


def test_partition_view():
    view = PartitionView([1, 2, 3, 0, 0], 3)
    assert len(view) == 3
    assert view[0] == 1
    assert view[-1] == 3
    assert view[1:] == [2, 3]
    assert view[::-1] == [3, 2, 1]
    assert list(view) == [1, 2, 3]
    assert 3 in view
    assert 0 not in view
    assert view == (1, 2, 3)
    assert view == PartitionView([1, 2, 3], 3)
    assert view != [1, 2]
    assert view != [1, 2, 3, 0]
    assert view != "123"
    assert view.tolist() == [1, 2, 3]
    assert view.total() == 6
    assert repr(view) == "PartitionView([1, 2, 3])"

    with pytest.raises(IndexError):
        view[3]
    with pytest.raises(IndexError):
        view[-4]
    with pytest.raises(TypeError):
        hash(view)
