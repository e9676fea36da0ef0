from __future__ import annotations

from birth_number.domain.exceptions import FormatError


class PersonalNumber(str):
    """Value Object for the last 5 digits of a birth number (zero-padded)."""

    def __new__(cls, value: int | str) -> "PersonalNumber":
        if isinstance(value, bool):
            raise FormatError("Personal number must be 5 digits")
        if isinstance(value, int):
            if not 0 <= value <= 99999:
                raise FormatError("Personal number must be 5 digits")
            value = f"{value:05d}"
        elif isinstance(value, str):
            if not (value.isascii() and value.isdigit() and len(value) <= 5):
                raise FormatError("Personal number must be 5 digits")
            value = value.zfill(5)
        else:
            raise FormatError("Personal number must be 5 digits")
        return str.__new__(cls, value)

    @property
    def individual_number(self) -> int:
        return int(self[:3])

    @property
    def gender_digit(self) -> int:
        return int(self[2])
