#!/usr/bin/env python3

"""
Direct run of generate-and-validate against the configured external tools
(SCHEDULER_GENERATOR_COMMAND / SCHEDULER_VALIDATOR_COMMAND).
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'services', 'orchestrator'))

from orchestrator.config import load_settings
from orchestrator.domain.errors import ExternalToolError
from orchestrator.domain.models import (
    Course, Lecture, Room, SchedulingProblem, TimeSlot
)
from orchestrator.service import build_scheduling_service


def run_pipeline():
    settings = load_settings()
    print(f"Generator: {' '.join(settings.generator_command)}")
    print(f"Validator: {' '.join(settings.validator_command)}")
    print(f"Timeout:   {settings.process_timeout_seconds}s\n")

    problem = SchedulingProblem(
        courses=[Course(id="C1", name="Algorithms")],
        lectures=[
            Lecture(id="L1", course_id="C1", title="Intro", enrollment=50),
            Lecture(id="L2", course_id="C1", title="Sorting", enrollment=80),
        ],
        rooms=[
            Room(id="R1", name="Room A", capacity=60),
            Room(id="R2", name="Aula", capacity=120),
        ],
        time_slots=[
            TimeSlot(id="T1", day="MON", start="09:00", end="10:00"),
            TimeSlot(id="T2", day="MON", start="10:00", end="11:00"),
        ],
    )

    service = build_scheduling_service(settings)
    try:
        result = service.generate_and_validate(problem)
    except ExternalToolError as exc:
        print(f"Pipeline failed ({exc.kind}): {exc}")
        return 1

    print(f"Score: {result.schedule.score}")
    print("Assignments:")
    for assignment in result.schedule.assignments:
        print(f"  {assignment.lecture_id} -> {assignment.room_id} @ {assignment.time_slot_id}")

    if result.validation.valid:
        print("\nSchedule is valid.")
    else:
        print(f"\nSchedule has {len(result.validation.violations)} violation(s):")
    for violation in result.validation.violations:
        print(f"  [{violation.code}] {violation.message or ''}")
    return 0


if __name__ == "__main__":
    sys.exit(run_pipeline())
