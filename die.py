'''Internal math functions'''
from numbers import Integral
from typing import Iterator
import logging
import numpy as np

logger = logging.getLogger(__name__)

class InvalidDiceError(ValueError):
    '''Raised for dice parameters outside the supported domain.'''

def check_dice(sides: int, count: int) -> None:
    '''
    Internal function, rejects anything that isn't a positive integer number
    of sides and dice.
    '''
    for label, value in (('sides', sides), ('count', count)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f'{label} must be an integer, got {value!r}')
        if value < 1:
            raise InvalidDiceError(f'{label} must be at least 1, got {value}')

class SumDistribution:
    '''
    The number of ways each total can come up when rolling a group of identical dice.
    Behaves like a read-only mapping from sum to multiplicity, iterating in ascending
    order. Sums outside [start, stop] read as 0.

    Initialization parameters:
    counts: A list or numpy array of non-negative integers, counts[i] is the
            multiplicity of the sum start+i.
    start: An integer, the smallest achievable sum.
    name (optional): A string, a name for this distribution, eg '9d4'.
    '''
    def __init__(self, counts, start: int, name: str|None = None):
        self.counts: np.ndarray = np.array(counts, dtype=object)
        self.start: int = int(start)
        self.name = name if name is not None else f'sums from {self.start}'

    @property
    def stop(self) -> int:
        '''The largest achievable sum.'''
        return self.start + len(self.counts) - 1

    @property
    def total(self) -> int:
        '''Total number of ordered outcomes, ie sides**count for a dice group.'''
        return int(sum(self.counts))

    def __getitem__(self, key: int) -> int:
        if self.start <= key <= self.stop:
            return int(self.counts[key-self.start])
        return 0

    def __contains__(self, key) -> bool:
        return isinstance(key, Integral) and self.start <= key <= self.stop

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop+1))

    def __len__(self) -> int:
        return len(self.counts)

    def keys(self) -> list[int]:
        return list(self)

    def items(self) -> Iterator[tuple[int, int]]:
        for i, c in enumerate(self.counts):
            yield self.start + i, int(c)

    def __eq__(self, other) -> bool:
        if isinstance(other, SumDistribution):
            return dict(self.items()) == dict(other.items())
        if isinstance(other, dict):
            return dict(self.items()) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f'SumDistribution({[int(c) for c in self.counts]}, {self.start}, {self.name!r})'

    def __str__(self) -> str:
        return self.name

    def pmf(self) -> np.ndarray:
        '''
        Returns the probabilities of each sum as a float array, aligned with
        range(start, stop+1).
        '''
        total = self.total
        return np.array([c / total for c in self.counts], dtype=float)

    def mean(self) -> float:
        x = np.arange(self.start, self.stop+1)
        return float(np.sum(x * self.pmf()))

    def var(self) -> float:
        x = np.arange(self.start, self.stop+1)
        mu = self.mean()
        return max(float(np.sum(self.pmf() * (x-mu)**2)), 0.0)

    def sd(self) -> float:
        return float(np.sqrt(self.var()))

def ways_table(sides: int, count: int) -> np.ndarray:
    '''
    Internal function, builds the table of ways[n, x], the number of ways n
    dice with faces 1..sides can add up to x.
    Ex: ways_table(6, 2)[2, 7] == 6
    sides: A positive integer
    count: A positive integer, the most dice the table covers
    Returns a numpy object array of shape (count+1, count*sides+1) holding Python ints.
    '''
    check_dice(sides, count)
    max_sum = count * sides
    # object dtype keeps the counts as exact Python ints, so nothing overflows
    # no matter how many dice there are
    table = np.zeros((count+1, max_sum+1), dtype=object)
    table[0, 0] = 1
    for n in range(1, count+1):
        # x outside [n, n*sides] is unreachable and stays 0
        for x in range(n, n*sides+1):
            lo = max(x-sides, n-1)
            table[n, x] = sum(table[n-1, lo:x])
    logger.debug('ways table for %dd%d: shape %s', count, sides, table.shape)
    return table

def count_sums(sides: int, count: int) -> SumDistribution:
    '''
    Counts how many ordered rolls of count dice with faces 1..sides give each
    total. Every achievable sum from count to count*sides is present.
    Ex: count_sums(6, 2)[7] == 6
    sides: A positive integer
    count: A positive integer
    Returns a SumDistribution whose multiplicities add up to sides**count.
    '''
    table = ways_table(sides, count)
    out = SumDistribution(table[count, count:], count, f'{count}d{sides}')
    logger.debug('%s: %d sums, %d outcomes', out, len(out), out.total)
    return out
