from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResultDTO:
    number: str
    valid: bool
