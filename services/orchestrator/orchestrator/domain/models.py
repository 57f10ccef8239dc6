from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Immutable record exchanged with the external tools (camelCase on the wire)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Course(WireModel):
    id: str
    name: Optional[str] = None


class Lecture(WireModel):
    id: str
    course_id: Optional[str] = Field(None, alias="courseId")
    title: Optional[str] = None
    enrollment: int = 0


class Room(WireModel):
    id: str
    name: Optional[str] = None
    capacity: int = 0


class TimeSlot(WireModel):
    id: str
    day: Optional[str] = None  # MON, TUE, ...
    start: Optional[str] = None  # 09:00 (24h)
    end: Optional[str] = None


class SchedulingProblem(WireModel):
    courses: List[Course] = []
    lectures: List[Lecture] = []
    rooms: List[Room] = []
    time_slots: List[TimeSlot] = Field([], alias="timeSlots")


class Assignment(WireModel):
    lecture_id: str = Field(..., alias="lectureId")
    room_id: str = Field(..., alias="roomId")
    time_slot_id: str = Field(..., alias="timeSlotId")


class Schedule(WireModel):
    assignments: List[Assignment] = []
    score: Optional[float] = None  # generator fitness, higher is better


class Violation(WireModel):
    code: str
    message: Optional[str] = None
    lecture_id: Optional[str] = Field(None, alias="lectureId")
    room_id: Optional[str] = Field(None, alias="roomId")
    time_slot_id: Optional[str] = Field(None, alias="timeSlotId")


class ValidationResult(WireModel):
    valid: bool
    violations: List[Violation] = []

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, violations=[])

    @classmethod
    def from_violations(cls, violations: Optional[List[Violation]]) -> "ValidationResult":
        violations = list(violations or [])
        return cls(valid=not violations, violations=violations)


class ValidateRequest(WireModel):
    problem: SchedulingProblem
    schedule: Schedule


class GenerateAndValidateResponse(WireModel):
    schedule: Schedule
    validation: ValidationResult
