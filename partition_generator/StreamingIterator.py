from abc import ABC, abstractmethod


class StreamingIterator(ABC):
    """
    Base class of "lending" iterators.

    An item returned by get() is borrowed from the iterator: it stays valid only until the next advance().
    Subclasses implement advance() and get(); everything else is built on top of these two.
    Iterating with a for loop yields the borrowed items, use owned() to keep copies.
    """

    @abstractmethod
    def advance(self):
        """ Move to the next element. """
        raise NotImplementedError

    @abstractmethod
    def get(self):
        """ Return the current element, or None if there is no current element. """
        raise NotImplementedError

    def next(self):
        """ Advance and return the new current element (None when exhausted). """
        self.advance()
        return self.get()

    def __iter__(self):
        return self

    def __next__(self):
        item = self.next()
        if item is None:
            raise StopIteration
        return item

    def count(self):
        """ Consume the iterator and return the number of remaining elements. """
        count = 0
        while self.next() is not None:
            count += 1
        return count

    def nth(self, n):
        """
        Skip n elements and return the one after.
        :param n: the number of elements to be skipped
        :return: the (n+1)-th remaining element, or None if the iterator runs out
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Invalid nth index, given '{n.__class__.__name__}', required 'int'.")
        if n < 0:
            raise ValueError(f"Invalid nth index ({n}): cannot be negative.")

        for _ in range(n):
            self.advance()
            if self.get() is None:
                return None
        return self.next()

    def for_each(self, func):
        """ Call func on every remaining element. """
        item = self.next()
        while item is not None:
            func(item)
            item = self.next()

    def fold(self, init, func):
        """
        Reduce the remaining elements from the left.
        :param init: the initial value of the accumulator
        :param func: a function of (accumulator, element) returning the new accumulator
        :return: the final accumulator
        """
        acc = init
        item = self.next()
        while item is not None:
            acc = func(acc, item)
            item = self.next()
        return acc

    def filter(self, predicate):
        """ Return a streaming iterator over the elements for which predicate is true. """
        return FilteredStreamingIterator(self, predicate)

    def owned(self, copy=tuple):
        """
        Generate owned copies of the remaining elements.
        :param copy: a function making an independent copy of a borrowed element
        """
        item = self.next()
        while item is not None:
            yield copy(item)
            item = self.next()


class FilteredStreamingIterator(StreamingIterator):
    def __init__(self, iterator, predicate):
        """
        A streaming iterator skipping the elements rejected by predicate.
        :param iterator: the underlying StreamingIterator, advanced by this object
        :param predicate: a function of one element returning True for elements to be kept
        """
        if not isinstance(iterator, StreamingIterator):
            raise TypeError(f"Invalid iterator, given '{iterator.__class__.__name__}',"
                            f" required 'StreamingIterator'.")
        if not callable(predicate):
            raise TypeError(f"Invalid predicate, given '{predicate.__class__.__name__}', required callable.")

        self._iterator = iterator
        self._predicate = predicate

    def advance(self):
        self._iterator.advance()
        item = self._iterator.get()
        while item is not None and not self._predicate(item):
            self._iterator.advance()
            item = self._iterator.get()

    def get(self):
        return self._iterator.get()
