from __future__ import annotations

from .clients.generator import GeneratorClient
from .clients.validator import ValidatorClient
from .config import Settings, load_settings
from .domain.models import (
    GenerateAndValidateResponse,
    Schedule,
    SchedulingProblem,
    ValidationResult,
)
from .process.runner import ProcessRunner


class SchedulingService:
    """Application service sequencing the external generator and validator."""

    def __init__(self, generator: GeneratorClient, validator: ValidatorClient) -> None:
        self._generator = generator
        self._validator = validator

    def generate(self, problem: SchedulingProblem) -> Schedule:
        return self._generator.generate(problem)

    def validate(self, problem: SchedulingProblem, schedule: Schedule) -> ValidationResult:
        return self._validator.validate(problem, schedule)

    def generate_and_validate(self, problem: SchedulingProblem) -> GenerateAndValidateResponse:
        schedule = self.generate(problem)
        validation = self.validate(problem, schedule)
        return GenerateAndValidateResponse(schedule=schedule, validation=validation)


def build_scheduling_service(settings: Settings) -> SchedulingService:
    runner = ProcessRunner()
    return SchedulingService(
        GeneratorClient(runner, settings.generator_command, settings.process_timeout_seconds),
        ValidatorClient(runner, settings.validator_command, settings.process_timeout_seconds),
    )


scheduling_service = build_scheduling_service(load_settings())
