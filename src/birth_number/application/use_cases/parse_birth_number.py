from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from birth_number.application.dtos.birth_number_dto import BirthNumberDTO
from birth_number.config import mask
from birth_number.domain.exceptions import FormatError
from birth_number.domain.value_objects.birth_number import BirthNumber

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    status: str  # "OK" | "INVALID"
    birth_number: BirthNumberDTO | None
    message: str


class ParseBirthNumberUseCase:
    """Parses a raw value into a BirthNumberDTO, reporting format errors as a result."""

    def execute(self, raw: Any) -> ParseResult:
        try:
            bn = BirthNumber.parse(raw)
        except FormatError as e:
            logger.info("Rejected %s: %s", mask(raw), e)
            return ParseResult("INVALID", None, str(e))
        logger.debug("Parsed %s", mask(raw))
        return ParseResult("OK", BirthNumberDTO.from_domain(bn), "Parsed")
