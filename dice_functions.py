'''User-facing functions'''
from dataclasses import dataclass
from fractions import Fraction
import logging
from die import SumDistribution
from dice_group import DiceGroup

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Outcomes:
    '''Exact chances that A's total is higher than, equal to, or lower than B's.'''
    win: Fraction
    draw: Fraction
    loss: Fraction

    def __iter__(self):
        '''Allows unpacking as a tuple: win, draw, loss = outcomes'''
        return iter((self.win, self.draw, self.loss))

def _chance_to_exceed(dist_a: SumDistribution, total_a: int, v: int) -> float:
    '''Internal function, P(A > v) by adding up every sum of A above v.'''
    above = sum(mult for u, mult in dist_a.items() if u > v)
    return above / total_a

def probability_a_exceeds_b(dist_a: SumDistribution, total_a: int,
                            dist_b: SumDistribution, total_b: int,
                            count_a: int, sides_a: int) -> float:
    '''
    Returns the probability that group A rolls a strictly higher total than group B,
    by going through every total B can roll and weighting A's chance to beat it.
    dist_a, dist_b: SumDistribution objects for each group
    total_a, total_b: Integers, the number of ordered outcomes of each group (sides**count)
    count_a: An integer, the number of dice in A, which is also A's lowest total
    sides_a: An integer, the number of faces on A's dice
    Returns a float.

    B totals at or below count_a count as a certain win for A, including
    v == count_a where A's all-ones roll would actually tie. exact_outcomes
    gives the exact figure.
    '''
    probability = 0.0
    for v, mult_b in dist_b.items():
        if mult_b == 0:
            continue
        p_b = mult_b / total_b
        if v <= count_a:
            p_a = 1.0
        elif v >= count_a * sides_a:
            p_a = 0.0
        else:
            p_a = _chance_to_exceed(dist_a, total_a, v)
        probability += p_b * p_a
    return probability

def beats(a: DiceGroup, b: DiceGroup) -> float:
    '''
    Returns the probability that a single roll of a comes out strictly higher than b.
    Ex: beats(DiceGroup(4, 9), DiceGroup(6, 6)) is about 0.5731441
    '''
    dist_a = a.distribution()
    dist_b = b.distribution()
    out = probability_a_exceeds_b(dist_a, a.outcomes, dist_b, b.outcomes, a.count, a.sides)
    logger.debug('P[%s > %s] = %r', a, b, out)
    return out

def exact_outcomes(a: DiceGroup, b: DiceGroup) -> Outcomes:
    '''
    Returns the exact win/draw/loss probabilities of a against b as fractions.
    The three always add up to exactly 1.
    '''
    dist_a = a.distribution()
    dist_b = b.distribution()
    win = draw = loss = 0
    for v, mult_b in dist_b.items():
        lower = sum(mult for u, mult in dist_a.items() if u < v)
        equal = dist_a[v]
        loss += mult_b * lower
        draw += mult_b * equal
        win += mult_b * (a.outcomes - lower - equal)
    denominator = a.outcomes * b.outcomes
    return Outcomes(Fraction(win, denominator), Fraction(draw, denominator),
                    Fraction(loss, denominator))
