from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from birth_number.domain.exceptions import FormatError
from birth_number.domain.services.century import decode_date
from birth_number.domain.services.checksum import has_valid_control_digits
from birth_number.domain.value_objects.personal_number import PersonalNumber

BIRTH_NUMBER_PATTERN = re.compile(r"[0-9]{11}")


@dataclass(frozen=True)
class BirthNumber:
    """Value Object for an 11-digit birth number (DDMMYY + 5-digit personal number).

    Two instances are equal when birth date and personal number are equal;
    equality never looks at the control digits.
    """

    birth_date: date
    personal_number: str

    def __post_init__(self) -> None:
        if isinstance(self.birth_date, datetime) or not isinstance(self.birth_date, date):
            raise FormatError("Birth date must be a date")
        if not isinstance(self.personal_number, str) or len(self.personal_number) != 5:
            raise FormatError("Personal number must be 5 digits")
        object.__setattr__(self, "personal_number", PersonalNumber(self.personal_number))

    @classmethod
    def create(cls, birth_date: date | datetime | str, personal_number: int | str) -> "BirthNumber":
        """Builds a birth number from loosely typed parts. No checksum check is made.

        Args:
            birth_date: a date, a datetime (its date part is used) or an ISO
                ``YYYY-MM-DD`` string.
            personal_number: an int in 0..99999 or a string of up to 5 digits.

        Raises:
            FormatError: if either part cannot be normalised.
        """
        return cls(_coerce_date(birth_date), PersonalNumber(personal_number))

    @classmethod
    def parse(cls, value: Any) -> "BirthNumber":
        """Parses an 11-digit birth number. Control digits are not checked.

        Raises:
            FormatError: if ``str(value)`` is not 11 digits or holds no real date.
        """
        text = str(value)
        if not BIRTH_NUMBER_PATTERN.fullmatch(text):
            raise FormatError("Birth number must be 11 digits")
        return cls(decode_date(text), PersonalNumber(text[6:11]))

    @staticmethod
    def validate(candidate: Any) -> bool:
        return is_valid(candidate)

    def is_valid(self) -> bool:
        return is_valid(self)

    @property
    def individual_number(self) -> int:
        return PersonalNumber(self.personal_number).individual_number

    @property
    def is_male(self) -> bool:
        return PersonalNumber(self.personal_number).gender_digit % 2 == 1

    @property
    def is_female(self) -> bool:
        return not self.is_male

    @property
    def gender(self) -> str:
        return "M" if self.is_male else "F"

    def matches(self, other: Any) -> bool:
        """True if ``other`` has the same 11-digit string form."""
        return str(self) == str(other)

    def to_dict(self) -> dict[str, Any]:
        return {"birth_date": self.birth_date, "personal_number": self.personal_number}

    def __str__(self) -> str:
        d = self.birth_date
        return f"{d.day:02d}{d.month:02d}{d.year % 100:02d}{self.personal_number}"


def parse(value: Any) -> BirthNumber:
    return BirthNumber.parse(value)


def is_valid(candidate: Any) -> bool:
    """Checks format, birth date and both control digits. Never raises."""
    text = str(candidate)
    if not BIRTH_NUMBER_PATTERN.fullmatch(text):
        return False
    try:
        decode_date(text)
    except FormatError:
        return False
    return has_valid_control_digits([int(c) for c in text])


def _coerce_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise FormatError(f"Invalid birth date: {value!r}") from exc
    raise FormatError("Birth date must be a date or an ISO date string")
