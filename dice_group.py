'''Dice groups and the NdM notation used to name them'''
from dataclasses import dataclass
import re
from die import InvalidDiceError, SumDistribution, check_dice, count_sums

_NDM = re.compile(r'([1-9][0-9]*)d([1-9][0-9]*)')

@dataclass(frozen=True)
class DiceGroup:
    '''
    count identical dice with faces numbered 1..sides, rolled together and summed.
    Two groups with the same sides and count are interchangeable.
    '''
    sides: int
    count: int

    def __post_init__(self):
        check_dice(self.sides, self.count)

    @classmethod
    def parse(cls, text: str) -> 'DiceGroup':
        '''
        Builds a group from NdM notation, so '9d4' is nine four-sided dice.
        text: A string, case and surrounding whitespace are ignored.
        '''
        match = _NDM.fullmatch(text.strip().lower())
        if match is None:
            raise InvalidDiceError(f'{text!r} is not in NdM notation, eg 9d4')
        count, sides = match.groups()
        return cls(sides=int(sides), count=int(count))

    @property
    def name(self) -> str:
        return f'{self.count}d{self.sides}'

    @property
    def outcomes(self) -> int:
        '''Number of ordered face combinations, sides**count.'''
        return self.sides ** self.count

    @property
    def min_sum(self) -> int:
        return self.count

    @property
    def max_sum(self) -> int:
        return self.count * self.sides

    def distribution(self) -> SumDistribution:
        return count_sums(self.sides, self.count)

    def __str__(self) -> str:
        return self.name

PETER = DiceGroup(sides=4, count=9)
COLIN = DiceGroup(sides=6, count=6)
