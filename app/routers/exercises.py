# app/routers/exercises.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from google.cloud.firestore import Client
from google.cloud.firestore_v1.base_query import FieldFilter

from app.database import get_db
from app.models import exercises_col, exercise_workouts_col, list_with_ids
from app.schemas.base_schema import CreatedResponse, MessageResponse
from app.schemas.exercise_schema import ExerciseIn, ExerciseWorkoutCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}/exercises", tags=["Exercises"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_exercise(user_id: str, data: ExerciseIn, db: Client = Depends(get_db)):
    try:
        _, exercise_ref = exercises_col(db, user_id).add(data.to_document())
    except Exception:
        logger.exception("Failed to add exercise for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to add exercise")

    return {"id": exercise_ref.id, "message": "Exercise added successfully"}


@router.get("", response_model=list)
def get_exercises(
    user_id: str,
    muscle_group: Optional[str] = Query(None, alias="muscleGroup"),
    db: Client = Depends(get_db),
):
    """
    All exercises of the user, optionally only those for one muscle group.
    """
    try:
        query = exercises_col(db, user_id)
        if muscle_group:
            query = query.where(filter=FieldFilter("muscleGroup", "==", muscle_group))
        return list_with_ids(query.stream())
    except Exception:
        logger.exception("Failed to retrieve exercises for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve exercises")


@router.put("/{exercise_id}", response_model=MessageResponse)
def update_exercise(user_id: str, exercise_id: str, data: ExerciseIn, db: Client = Depends(get_db)):
    try:
        exercises_col(db, user_id).document(exercise_id).update(data.to_document())
    except Exception:
        logger.exception("Failed to update exercise %s for user %s", exercise_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to update exercise")

    return {"message": "Exercise updated successfully"}


@router.delete("/{exercise_id}", response_model=MessageResponse)
def delete_exercise(user_id: str, exercise_id: str, db: Client = Depends(get_db)):
    try:
        exercises_col(db, user_id).document(exercise_id).delete()
    except Exception:
        logger.exception("Failed to delete exercise %s for user %s", exercise_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to delete exercise")

    return {"message": "Exercise deleted successfully"}


# Workouts logged against a single exercise (name, sets, reps)
@router.post("/{exercise_id}/workouts", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_exercise_workout(user_id: str, exercise_id: str, data: ExerciseWorkoutCreate, db: Client = Depends(get_db)):
    try:
        _, workout_ref = exercise_workouts_col(db, user_id, exercise_id).add(data.to_document())
    except Exception:
        logger.exception("Failed to add workout for exercise %s of user %s", exercise_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to add workout")

    return {"id": workout_ref.id, "message": "Workout added successfully"}


@router.get("/{exercise_id}/workouts", response_model=list)
def get_exercise_workouts(user_id: str, exercise_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(exercise_workouts_col(db, user_id, exercise_id).stream())
    except Exception:
        logger.exception("Failed to retrieve workouts for exercise %s of user %s", exercise_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workouts")
