from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException

from birth_number.application.use_cases.parse_birth_number import ParseBirthNumberUseCase
from birth_number.application.use_cases.validate_birth_numbers import (
    BatchTooLargeError,
    ValidateBirthNumbersUseCase,
)
from birth_number.config import settings
from birth_number.presentation.api.metrics import validations

router = APIRouter(prefix=settings.api_prefix, tags=["birth-numbers"])

_parser = ParseBirthNumberUseCase()
_validator = ValidateBirthNumbersUseCase()


@router.post("/validate")
def validate_numbers(body: dict[str, Any]):  # type: ignore[misc]
    numbers = body.get("numbers")
    if not isinstance(numbers, list):
        raise HTTPException(status_code=422, detail="'numbers' must be a list")
    try:
        results = _validator.execute(numbers)
    except BatchTooLargeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    valid = sum(1 for r in results if r.valid)
    validations.labels(result="valid").inc(valid)
    validations.labels(result="invalid").inc(len(results) - valid)
    return {
        "items": [asdict(r) for r in results],
        "valid": valid,
        "invalid": len(results) - valid,
    }


@router.get("/{number}")
def get_birth_number(number: str):  # type: ignore[misc]
    res = _parser.execute(number)
    if res.birth_number is None:
        raise HTTPException(status_code=422, detail=res.message)
    validations.labels(result="valid" if res.birth_number.valid else "invalid").inc()
    return asdict(res.birth_number)
