from __future__ import annotations

import logging

from ..domain.models import Schedule, SchedulingProblem
from .base import ExternalToolClient

logger = logging.getLogger(__name__)


class GeneratorClient(ExternalToolClient):
    """Sends a SchedulingProblem as JSON on stdin and reads a Schedule JSON from stdout."""

    tool_name = "Schedule generator"

    def generate(self, problem: SchedulingProblem) -> Schedule:
        logger.info(
            f"Generating schedule for {len(problem.lectures)} lectures, "
            f"{len(problem.rooms)} rooms, {len(problem.time_slots)} time slots"
        )
        schedule = self._invoke(self._codec.encode(problem), Schedule)
        logger.info(f"Generator returned {len(schedule.assignments)} assignments (score {schedule.score})")
        return schedule
