"""Shared fixtures: a one-lecture problem and fake command runners."""
from __future__ import annotations

from typing import List, Optional, Sequence

import pytest

from orchestrator.domain.models import (
    Assignment,
    Course,
    Lecture,
    Room,
    Schedule,
    SchedulingProblem,
    TimeSlot,
)
from orchestrator.process.runner import CommandResult


class FakeRunner:
    """Returns a canned CommandResult and records every call."""

    def __init__(
        self,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        timed_out: bool = False,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = CommandResult(exit_code, stdout, stderr, timed_out)
        self.error = error
        self.calls: List[tuple] = []

    def run(self, command: Sequence[str], stdin: Optional[str], timeout: float) -> CommandResult:
        self.calls.append((list(command), stdin, timeout))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_runner():
    return FakeRunner


@pytest.fixture
def sample_problem() -> SchedulingProblem:
    return SchedulingProblem(
        courses=[Course(id="C1", name="Algorithms")],
        lectures=[Lecture(id="L1", course_id="C1", title="Intro", enrollment=50)],
        rooms=[Room(id="R1", name="Room A", capacity=60)],
        time_slots=[TimeSlot(id="T1", day="MON", start="09:00", end="10:00")],
    )


@pytest.fixture
def sample_schedule() -> Schedule:
    return Schedule(
        assignments=[Assignment(lecture_id="L1", room_id="R1", time_slot_id="T1")],
        score=0.0,
    )
