from dataclasses import dataclass

from birth_number.domain.value_objects.birth_number import BirthNumber


@dataclass(frozen=True)
class BirthNumberDTO:
    number: str
    birth_date: str
    personal_number: str
    gender: str
    valid: bool

    @classmethod
    def from_domain(cls, bn: BirthNumber) -> "BirthNumberDTO":
        return cls(
            number=str(bn),
            birth_date=bn.birth_date.isoformat(),
            personal_number=str(bn.personal_number),
            gender=bn.gender,
            valid=bn.is_valid(),
        )
