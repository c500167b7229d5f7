from fractions import Fraction
import pytest
import dice_functions
from dice_functions import Outcomes, beats, exact_outcomes, probability_a_exceeds_b
from dice_group import COLIN, PETER, DiceGroup

def test_puzzle_answer():
    assert f'{beats(PETER, COLIN):.7f}' == '0.5731441'

def test_exact_puzzle_answer():
    win, draw, loss = exact_outcomes(PETER, COLIN)
    assert f'{float(win):.7f}' == '0.5731441'
    assert win + draw + loss == 1

def test_tie_at_the_minimum_counts_as_a_win():
    # Colin rolls 9 in 56 ways, and Peter's all-ones 9 would only tie it
    exact = exact_outcomes(PETER, COLIN).win
    tie_mass = Fraction(56, COLIN.outcomes) / PETER.outcomes
    assert beats(PETER, COLIN) == pytest.approx(float(exact + tie_mass), abs=1e-12)
    assert beats(PETER, COLIN) > float(exact)

def test_matches_the_call_with_explicit_distributions():
    dist_a, dist_b = PETER.distribution(), COLIN.distribution()
    p = probability_a_exceeds_b(dist_a, 4 ** 9, dist_b, 6 ** 6, 9, 4)
    assert p == beats(PETER, COLIN)

def test_deterministic():
    assert beats(PETER, COLIN) == beats(PETER, COLIN)

def test_coin_flips():
    coin = DiceGroup(2, 1)
    # B rolling 1 is at A's minimum, so it counts as a certain win
    assert beats(coin, coin) == 0.5
    assert exact_outcomes(coin, coin) == Outcomes(Fraction(1, 4), Fraction(1, 2), Fraction(1, 4))

def test_d6_against_a_coin():
    d6, coin = DiceGroup(6, 1), DiceGroup(2, 1)
    assert beats(d6, coin) == pytest.approx(0.5*1.0 + 0.5*4/6)
    assert exact_outcomes(d6, coin) == Outcomes(Fraction(3, 4), Fraction(1, 6), Fraction(1, 12))

def test_certain_win_and_certain_loss():
    coin = DiceGroup(2, 1)
    assert beats(PETER, coin) == 1.0
    assert beats(coin, PETER) == 0.0
    assert exact_outcomes(PETER, coin).win == 1
    assert exact_outcomes(coin, PETER).loss == 1

def test_two_d6_against_itself():
    two_d6 = DiceGroup(6, 2)
    win, draw, loss = exact_outcomes(two_d6, two_d6)
    assert win == loss
    assert draw == Fraction(1 + 4 + 9 + 16 + 25 + 36 + 25 + 16 + 9 + 4 + 1, 36 * 36)

def test_general_case_only_between_the_bounds(monkeypatch):
    seen = []
    general = dice_functions._chance_to_exceed
    def record(dist_a, total_a, v):
        seen.append(v)
        return general(dist_a, total_a, v)
    monkeypatch.setattr(dice_functions, '_chance_to_exceed', record)
    beats(PETER, COLIN)
    assert seen == list(range(10, 36))

def test_skips_sums_that_cannot_come_up(monkeypatch):
    seen = []
    monkeypatch.setattr(dice_functions, '_chance_to_exceed',
                        lambda dist_a, total_a, v: seen.append(v) or 0.5)
    dist_a = DiceGroup(6, 2).distribution()
    dist_b = dice_functions.SumDistribution([1, 0, 1], 5)
    p = probability_a_exceeds_b(dist_a, 36, dist_b, 2, 2, 6)
    assert seen == [5, 7]
    assert p == 0.5
