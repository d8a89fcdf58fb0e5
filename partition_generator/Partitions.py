"""
Enumerate the integer partitions of n in amortized constant time per partition.

The generator implements the accelerated ascending composition algorithm described by Jerome Kelleher,
see http://jeromekelleher.net/generating-integer-partitions.html
All partitions are written into one buffer of size n + 1, and get() returns a view over its active prefix.
"""
import collections.abc
from itertools import islice, repeat

from partition_generator.StreamingIterator import StreamingIterator


def check_integer(n):
    """
    Check if n can be partitioned.
    :param n: the integer to be partitioned
    :return: n if it is a non-negative integer
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Invalid integer to be partitioned, given '{n.__class__.__name__}', required 'int'.")
    if n < 0:
        raise ValueError(f"Invalid integer to be partitioned ({n}): cannot be negative.")
    return n


class Phase:
    __slots__ = ()

    def __repr__(self):
        return self.__class__.__name__


class Start(Phase):
    """ Nothing has been generated yet. """
    __slots__ = ()


class Descend(Phase):
    """ The next step lays down the minimal extension of the settled prefix. """
    __slots__ = ()


class Done(Phase):
    """ All partitions have been generated. """
    __slots__ = ()


class Split(Phase):
    """
    The last two parts (x, y) are being rebalanced with x <= y.
    Each step moves one unit from position l to the boundary position k, keeping their sum.
    """
    __slots__ = ('x', 'l')

    def __init__(self, x, l):
        self.x = x
        self.l = l

    def __repr__(self):
        return f"Split(x={self.x}, l={self.l})"


START = Start()
DESCEND = Descend()
DONE = Done()


class PartitionView(collections.abc.Sequence):
    def __init__(self, buffer, size):
        """
        A read-only view of the first size elements of buffer.
        The view does not copy the buffer: it shows whatever the buffer holds when it is accessed.
        :param buffer: the list of parts owned by a Partitions object
        :param size: the number of parts in the partition
        """
        self._buffer = buffer
        self._size = size

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._buffer[i] for i in range(*index.indices(self._size))]

        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"PartitionView index out of range ({index}).")
        return self._buffer[index]

    def __iter__(self):
        return islice(self._buffer, self._size)

    def __eq__(self, other):
        if isinstance(other, str) or not isinstance(other, collections.abc.Sequence):
            return NotImplemented
        return len(other) == self._size and all(i == j for i, j in zip(self, other))

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return f"PartitionView({self.tolist()})"

    def tolist(self):
        """ Return an owned copy of the parts. """
        return list(islice(self._buffer, self._size))

    def total(self):
        return sum(islice(self._buffer, self._size))


class Partitions(StreamingIterator):
    def __init__(self, n, storage=None):
        """
        The generator of all partitions of n, each a non-decreasing sequence of positive integers.
        :param n: the non-negative integer to be partitioned
        :param storage: a list reused as the buffer, its contents are discarded

        Examples
        --------
        p = Partitions(4)
        while p.next() is not None:
            print(p.get().tolist())
        gives [1, 1, 1, 1], [1, 1, 2], [1, 3], [2, 2], [4]

        Every view shares the buffer of p and changes on the next advance,
        so list(Partitions(4)) holds five copies of the same stale view.
        Use list(Partitions(4).owned()) or list_partitions(4) to keep the partitions.
        """
        n = check_integer(n)

        if storage is None:
            storage = [0] * (n + 1)
        else:
            if not isinstance(storage, list):
                raise TypeError(f"Invalid storage, given '{storage.__class__.__name__}',"
                                f" required 'list'.")
            storage.clear()
            storage.extend(repeat(0, n + 1))

        self._n = n
        self._a = storage
        self._k = 1 if n > 0 else 0
        self._y = n - 1 if n > 0 else 0
        self._size = 0
        self._phase = START

    @classmethod
    def recycle(cls, n, storage):
        """
        Make a generator of partitions of n on top of storage.
        The list is cleared and filled with n + 1 zeros.
        :param n: the non-negative integer to be partitioned
        :param storage: the buffer to be reused, e.g., the list returned by end()
        :return: a Partitions object
        """
        return cls(n, storage)

    def end(self):
        """
        Finish the enumeration and hand the buffer back for further use.
        The contents of the returned list are not meaningful.
        """
        buffer, self._a = self._a, []
        self._phase = DONE
        return buffer

    @property
    def n(self):
        return self._n

    @property
    def phase(self):
        return self._phase

    @property
    def is_exhausted(self):
        return self._phase is DONE

    def __repr__(self):
        return f"Partitions(n={self._n}, phase={self._phase})"

    def get(self):
        """ Return the current partition as a PartitionView, or None if no partition is held. """
        if self._phase is START or self._phase is DONE:
            return None
        return PartitionView(self._a, self._size)

    def advance(self):
        phase = self._phase

        if phase is DESCEND:
            self._descend()
        elif phase is START:
            self._phase = DESCEND
            if self._n == 0:
                # the empty partition
                self._size = 0
            else:
                self._descend()
        elif phase is not DONE:
            self._split(phase)

    def _descend(self):
        a, k, y = self._a, self._k, self._y

        if k == 0:
            self._phase = DONE
            return

        k -= 1
        x = a[k] + 1

        while 2 * x <= y:
            a[k] = x
            y -= x
            k += 1

        l = k + 1

        if x <= y:
            a[k] = x
            a[l] = y
            self._phase = Split(x, l)
            self._size = l + 1
        else:
            a[k] = x + y
            y = x + y - 1
            self._size = k + 1

        self._k, self._y = k, y

    def _split(self, phase):
        a, k = self._a, self._k
        phase.x += 1
        self._y -= 1
        x, y = phase.x, self._y

        if x <= y:
            a[k] = x
            a[phase.l] = y
            self._size = phase.l + 1
        else:
            a[k] = x + y
            self._y = x + y - 1
            self._phase = DESCEND
            self._size = k + 1
