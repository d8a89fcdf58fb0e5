from sympy.functions.combinatorial.numbers import partition

from partition_generator.Partitions import Partitions, check_integer
from partition_generator.helper.Timer import Timer


def partition_number(n):
    """
    Compute the number of partitions of n, i.e., the OEIS sequence A000041.
    :param n: a non-negative integer
    :return: p(n) as int
    """
    return int(partition(check_integer(n)))


def count_partitions(n, verbose=False):
    """
    Count the partitions of n by generating all of them.
    :param n: a non-negative integer
    :param verbose: print the count and the elapsed time if True
    :return: the number of generated partitions
    """
    with Timer(f"Generate partitions of {n}", verbose=verbose):
        count = Partitions(n).count()
    if verbose:
        print(f"Number of partitions of {n}: {count}")
    return count


def list_partitions(n):
    """ Return a list of all partitions of n (tuples) in generation order. """
    return list(Partitions(n).owned())


def check_partitions(n):
    """
    Generate and validate all partitions of n.
    :param n: a non-negative integer
    :return: the number of partitions if all checks pass
    """
    generated = set()
    p = Partitions(n)

    part = p.next()
    while part is not None:
        if part.total() != n:
            raise ValueError(f"Invalid partition {part.tolist()}: parts do not sum to {n}.")
        if any(i <= 0 for i in part):
            raise ValueError(f"Invalid partition {part.tolist()}: contains non-positive parts.")
        if any(part[i] > part[i + 1] for i in range(len(part) - 1)):
            raise ValueError(f"Invalid partition {part.tolist()}: parts are not in non-decreasing order.")

        key = tuple(part)
        if key in generated:
            raise ValueError(f"Invalid enumeration: partition {list(key)} is generated twice.")
        generated.add(key)

        part = p.next()

    expected = partition_number(n)
    if len(generated) != expected:
        raise ValueError(f"Invalid enumeration: {len(generated)} partitions of {n} generated, expected {expected}.")

    return len(generated)
