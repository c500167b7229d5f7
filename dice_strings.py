usage_string = '''
Usage: dice.py [PETER COLIN]

Prints the chance that Peter's dice total is strictly higher than Colin's
after one roll of both groups.

 PETER, COLIN:
   Dice groups in NdM notation, eg 9d4 is nine four-sided dice.
   Defaults to Peter rolling 9d4 and Colin rolling 6d6.
   Ex: dice.py 3d6 2d8

 -h, --help:
   Show this message.
'''
