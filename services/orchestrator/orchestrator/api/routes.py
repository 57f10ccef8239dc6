from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException

from ..domain.errors import ExternalToolError
from ..domain.models import (
    GenerateAndValidateResponse,
    Schedule,
    SchedulingProblem,
    ValidateRequest,
    ValidationResult,
)
from .. import service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedule", tags=["schedule"])

T = TypeVar("T")


def _call(operation: Callable[[], T]) -> T:
    try:
        return operation()
    except ExternalToolError as exc:
        logger.error(f"{exc.tool} failed ({exc.kind}): {exc}")
        raise HTTPException(
            status_code=exc.status_code, detail={"error": exc.kind, "message": str(exc)}
        ) from exc
    except Exception as exc:  # pragma: no cover - safety net
        logger.exception("Unexpected scheduling failure")
        raise HTTPException(status_code=500, detail=f"Scheduling failed: {exc}") from exc


# Plain ``def`` handlers: FastAPI runs them on its thread pool, one call per worker.
@router.post("/generate", response_model=Schedule)
def generate(problem: SchedulingProblem) -> Schedule:
    return _call(lambda: service.scheduling_service.generate(problem))


@router.post("/validate", response_model=ValidationResult)
def validate(request: ValidateRequest) -> ValidationResult:
    return _call(lambda: service.scheduling_service.validate(request.problem, request.schedule))


@router.post("/generate-and-validate", response_model=GenerateAndValidateResponse)
def generate_and_validate(problem: SchedulingProblem) -> GenerateAndValidateResponse:
    return _call(lambda: service.scheduling_service.generate_and_validate(problem))


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
