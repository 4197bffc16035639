from typing import Any, List

from pydantic import Field

from app.schemas.base_schema import CamelModel


class WorkoutCreate(CamelModel):
    name: Any = None
    muscle_group: Any = None
    # Each item becomes its own document under workouts/{id}/exercises
    exercises: List[Any] = Field(default_factory=list)


class WorkoutUpdate(CamelModel):
    exercises: Any = None
    name: Any = None


class WorkoutSchedule(CamelModel):
    scheduled_date: Any = None  # timestamp or ISO string from the client


class HistoryCreate(CamelModel):
    completed_at: Any = None
    duration: Any = None


class WorkoutProgressCreate(CamelModel):
    date: Any = None
    sets: Any = None
    reps: Any = None
    weight: Any = None
