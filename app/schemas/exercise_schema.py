from typing import Any

from app.schemas.base_schema import CamelModel


class ExerciseIn(CamelModel):
    name: Any = None
    muscle_group: Any = None


class ExerciseWorkoutCreate(CamelModel):
    name: Any = None
    sets: Any = None
    reps: Any = None
