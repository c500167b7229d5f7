#!/usr/bin/env python3
'''
Works out the chance that Peter, rolling nine four-sided dice, gets a higher
total than Colin, rolling six six-sided dice.
Run with no arguments for the puzzle's answer, or pass two groups in NdM
notation, Peter's first, to compare other dice:
    python dice.py 3d6 2d8
'''
import logging
import sys
from die import InvalidDiceError
from dice_functions import beats, exact_outcomes
from dice_group import COLIN, PETER, DiceGroup
import dice_strings

__all__ = ['main', 'result_line']

logger = logging.getLogger(__name__)

def result_line(probability: float) -> str:
    '''The line printed for a given probability, rounded to 7 decimal places.'''
    return f'The chance for Peter to beat Colin is {probability:.7f}'

def main(argv: list[str]|None = None) -> int:
    '''
    Prints the chance for Peter to beat Colin and returns the exit status.
    argv: The command line arguments without the program name. Either empty,
          or Peter's and Colin's dice in NdM notation.
    '''
    logging.basicConfig(level=logging.WARNING, format='%(name)s: %(message)s')
    args = sys.argv[1:] if argv is None else list(argv)
    if any(arg in ('-h', '--help') for arg in args):
        print(dice_strings.usage_string.strip())
        return 0
    peter, colin = PETER, COLIN
    try:
        if len(args) == 2:
            peter, colin = DiceGroup.parse(args[0]), DiceGroup.parse(args[1])
        elif len(args) != 0:
            raise InvalidDiceError(f'expected 0 or 2 dice groups, got {len(args)}')
    except InvalidDiceError as e:
        print(f'Not a valid input: {e}', file=sys.stderr)
        print(dice_strings.usage_string.strip(), file=sys.stderr)
        return 2
    probability = beats(peter, colin)
    if logger.isEnabledFor(logging.DEBUG):
        win = exact_outcomes(peter, colin).win
        logger.debug('exact P[%s > %s] = %s, ties at %d counted as wins add %.3e',
                     peter, colin, win, peter.min_sum, probability - float(win))
    print(result_line(probability))
    return 0

if __name__ == '__main__':
    sys.exit(main())
