"""Control digit computation for 11-digit birth numbers.

Both control digits use a weighted mod-11 sum. The first one covers the
nine date and individual digits, the second one covers those nine plus
the first control digit. A remainder of 1 would call for the digit 10,
which does not exist; such prefixes have no control digit at all.
"""
from __future__ import annotations

from collections.abc import Sequence

FIRST_WEIGHTS: tuple[int, ...] = (3, 7, 6, 1, 8, 9, 4, 5, 2)
SECOND_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def control_digit(digits: Sequence[int], weights: Sequence[int]) -> int | None:
    """Returns the control digit (0-9) for ``digits``, or None when none exists."""
    total = sum(digit * weight for digit, weight in zip(digits, weights))
    result = 11 - (total % 11)
    if result == 11:
        return 0
    if result == 10:
        return None
    return result


def control_digits(digits: Sequence[int]) -> tuple[int | None, int | None]:
    """Computes both control digits from the first ten of ``digits``.

    The second digit is computed over the sequence's own 10th digit, not the
    freshly computed first control digit.
    """
    return (
        control_digit(digits[:9], FIRST_WEIGHTS),
        control_digit(digits[:10], SECOND_WEIGHTS),
    )


def has_valid_control_digits(digits: Sequence[int]) -> bool:
    if len(digits) != 11:
        return False
    return tuple(digits[9:11]) == control_digits(digits)
