from __future__ import annotations

import logging
from typing import List, Optional

from ..domain.models import Schedule, SchedulingProblem, ValidationResult
from .base import ExternalToolClient

logger = logging.getLogger(__name__)


def _esc(value: Optional[str]) -> str:
    if value is None:
        return ""
    # Backslash first so the quote escapes are not doubled.
    return value.replace("\\", "\\\\").replace("'", "\\'")


def to_facts(problem: SchedulingProblem, schedule: Schedule) -> str:
    """
    Render the problem and a candidate schedule as Prolog facts, one per line.

    Block order is rooms, lectures, timeslots, assignments, each in input
    order; the validator's rules rely on it.
    """
    lines: List[str] = []
    for room in problem.rooms:
        lines.append(f"room('{_esc(room.id)}', {room.capacity}).")
    for lecture in problem.lectures:
        lines.append(
            f"lecture('{_esc(lecture.id)}', '{_esc(lecture.course_id)}', {lecture.enrollment})."
        )
    for slot in problem.time_slots:
        lines.append(
            f"timeslot('{_esc(slot.id)}', '{_esc(slot.day)}', '{_esc(slot.start)}', '{_esc(slot.end)}')."
        )
    for assignment in schedule.assignments:
        lines.append(
            f"assignment('{_esc(assignment.lecture_id)}', "
            f"'{_esc(assignment.room_id)}', '{_esc(assignment.time_slot_id)}')."
        )
    return "".join(f"{line}\n" for line in lines)


class ValidatorClient(ExternalToolClient):
    """Feeds Prolog facts to the constraint validator and reads a ValidationResult JSON back."""

    tool_name = "Constraint validator"

    def validate(self, problem: SchedulingProblem, schedule: Schedule) -> ValidationResult:
        facts = to_facts(problem, schedule)
        logger.info(f"Validating {len(schedule.assignments)} assignments")
        result = self._invoke(facts, ValidationResult)
        # Reported as-is, even when valid disagrees with the violations list.
        logger.info(f"Validator verdict: valid={result.valid}, violations={len(result.violations)}")
        return result
