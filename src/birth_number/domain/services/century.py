from __future__ import annotations

from datetime import date

from birth_number.domain.exceptions import FormatError


def resolve_century(year: int, individual_number: int) -> int:
    """Returns 1800, 1900 or 2000 for a two-digit year and its individual number."""
    if individual_number < 500 or (individual_number >= 900 and year >= 40):
        return 1900
    if individual_number < 750 and year >= 54:
        return 1800
    return 2000


def decode_date(digits: str) -> date:
    """Decodes the DDMMYY segment of ``digits``, using digits 7-9 for the century."""
    day, month, year = int(digits[0:2]), int(digits[2:4]), int(digits[4:6])
    individual_number = int(digits[6:9])
    year += resolve_century(year, individual_number)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise FormatError(f"Invalid birth date: {digits[0:6]}") from exc
