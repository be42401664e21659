from collections import namedtuple
from typing import Callable, List, Sequence, Tuple

RewardResult = namedtuple('RewardResult', ['reward', 'reason'])

NO_MATCH = RewardResult(0, 'No match')


def reverse_digits(value: str) -> str:
    return value[::-1]


def partial_digit_match(guess: str, pool: str) -> bool:
    """True as soon as any character of ``guess`` occurs anywhere in ``pool``.

    Positions are not compared, so ``"93"`` matches the pool ``"3467"``.
    """
    for ch in guess:
        if ch in pool:
            return True
    return False


def _positional_digit_match(guess: str, exp1: str, exp2: str) -> bool:
    return guess[0] == exp1[0] or guess[1] == exp1[1] or guess[0] == exp2[0] or guess[1] == exp2[1]


def _exact_in_order(g1, g2, e1, e2):
    return g1 == e1 and g2 == e2


def _exact_swapped(g1, g2, e1, e2):
    return g1 == e2 and g2 == e1


def _one_in_place(g1, g2, e1, e2):
    return (g1 == e1 and g2 != e2) or (g2 == e2 and g1 != e1)


def _one_swapped(g1, g2, e1, e2):
    return (g1 == e2 and g2 != e1) or (g2 == e1 and g1 != e2)


def _both_reversed(g1, g2, e1, e2):
    return g1 == reverse_digits(e1) and g2 == reverse_digits(e2)


def _one_reversed(g1, g2, e1, e2):
    return (g1 == reverse_digits(e1) and g2 != e2) or (g2 == reverse_digits(e2) and g1 != e1)


def _digits_from_each(g1, g2, e1, e2):
    pool = e1 + e2
    return partial_digit_match(g1, pool) and partial_digit_match(g2, pool)


def _digit_in_place(g1, g2, e1, e2):
    return _positional_digit_match(g1, e1, e2) or _positional_digit_match(g2, e1, e2)


Predicate = Callable[[str, str, str, str], bool]

# Ordered; the first tier whose predicate holds decides the reward.
TIERS: List[Tuple[Predicate, RewardResult]] = [
    (_exact_in_order, RewardResult(10000, 'Exact match both numbers in correct order')),
    (_exact_swapped, RewardResult(4000, 'Exact match both numbers but in wrong order')),
    (_one_in_place, RewardResult(1000, 'One number matches in correct position')),
    (_one_swapped, RewardResult(600, 'One number matches in wrong position')),
    (_both_reversed, RewardResult(400, 'Both numbers digits reversed in same order')),
    (_one_reversed, RewardResult(200, 'One number digits reversed matching expected number at same position')),
    (_digits_from_each, RewardResult(300, 'At least one digit from each guessed number matches expected digits')),
    (_digit_in_place, RewardResult(100, 'At least one digit of one guessed number matches digit in expected number at correct position')),
]


def compute_reward(guess1: str, guess2: str, expected: Sequence[str]) -> RewardResult:
    """Score a guess pair against the expected pair.

    Guesses shorter than two characters are zero-padded first, so ``"7"``
    scores exactly like ``"07"``. Never raises for two-digit input; a pair
    matching no tier gets ``NO_MATCH``.
    """
    g1, g2 = str(guess1).zfill(2), str(guess2).zfill(2)
    e1, e2 = expected
    for predicate, result in TIERS:
        if predicate(g1, g2, e1, e2):
            return result
    return NO_MATCH
