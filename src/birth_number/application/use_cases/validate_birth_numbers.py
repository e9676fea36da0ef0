from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from birth_number.application.dtos.validation_result_dto import ValidationResultDTO
from birth_number.config import mask, settings
from birth_number.domain.value_objects.birth_number import is_valid

logger = logging.getLogger(__name__)


class BatchTooLargeError(Exception):
    pass


class ValidateBirthNumbersUseCase:
    def __init__(self, *, max_batch: int | None = None) -> None:
        self.max_batch = max_batch if max_batch is not None else settings.max_batch

    def execute(self, candidates: Iterable[Any]) -> Sequence[ValidationResultDTO]:
        items = list(candidates)
        if len(items) > self.max_batch:
            raise BatchTooLargeError(f"At most {self.max_batch} numbers per batch, got {len(items)}")
        results = [ValidationResultDTO(number=str(c), valid=is_valid(c)) for c in items]
        for r in results:
            if not r.valid:
                logger.info("Invalid birth number %s", mask(r.number))
        return results
