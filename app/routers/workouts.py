# app/routers/workouts.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from google.cloud.firestore import Client
from google.cloud.firestore_v1.base_query import FieldFilter

from app.database import get_db
from app.models import EXERCISES, HISTORY, PROGRESS, workouts_col, workout_doc, list_with_ids
from app.schemas.base_schema import CreatedResponse, MessageResponse
from app.schemas.workout_schema import (
    WorkoutCreate,
    WorkoutUpdate,
    WorkoutSchedule,
    HistoryCreate,
    WorkoutProgressCreate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}/workouts", tags=["Workouts"])


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_workout(user_id: str, data: WorkoutCreate, db: Client = Depends(get_db)):
    """
    Create a workout, then write each of its exercises as a child document in one batch.

    The workout document is written before the batch. If the batch fails the
    workout stays without its exercises and the request answers 500.
    """
    try:
        _, workout_ref = workouts_col(db, user_id).add(data.to_document())
    except Exception:
        logger.exception("Failed to add workout for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to add workout and exercises")

    try:
        if data.exercises:
            batch = db.batch()
            for exercise in data.exercises:
                batch.set(workout_ref.collection(EXERCISES).document(), exercise)
            batch.commit()
    except Exception:
        logger.exception(
            "Failed to write exercises of workout %s for user %s; workout left without exercises",
            workout_ref.id,
            user_id,
        )
        raise HTTPException(status_code=500, detail="Failed to add workout and exercises")

    return {"id": workout_ref.id, "message": "Workout and exercises added successfully"}


@router.get("", response_model=list)
def get_workouts(user_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(workouts_col(db, user_id).stream())
    except Exception:
        logger.exception("Failed to retrieve workouts for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workouts")


@router.get("/progress", response_model=list)
def get_progress_by_muscle_group(
    user_id: str,
    muscle_group: Optional[str] = Query(None, alias="muscleGroup"),
    db: Client = Depends(get_db),
):
    """
    Progress entries of every workout that targets the given muscle group, flattened.

    404 when no workout matches; 200 with an empty list when workouts match but
    none has progress yet.
    """
    try:
        workouts = list(
            workouts_col(db, user_id)
            .where(filter=FieldFilter("muscleGroup", "==", muscle_group))
            .stream()
        )
        progress = []
        for workout in workouts:
            progress.extend(list_with_ids(workout.reference.collection(PROGRESS).stream()))
    except Exception:
        logger.exception("Failed to retrieve %s progress for user %s", muscle_group, user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workout progress")

    if not workouts:
        raise HTTPException(status_code=404, detail="No workouts found for the specified muscle group")

    return progress


@router.put("/{workout_id}", response_model=MessageResponse)
def update_workout(user_id: str, workout_id: str, data: WorkoutUpdate, db: Client = Depends(get_db)):
    # Both fields are always written; omitted ones become null
    try:
        workout_doc(db, user_id, workout_id).update(data.to_document())
    except Exception:
        logger.exception("Failed to update workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to update workout")

    return {"message": "Workout updated successfully"}


@router.delete("/{workout_id}", response_model=MessageResponse)
def delete_workout(user_id: str, workout_id: str, db: Client = Depends(get_db)):
    try:
        workout_doc(db, user_id, workout_id).delete()
    except Exception:
        logger.exception("Failed to delete workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to delete workout")

    return {"message": "Workout deleted successfully"}


@router.get("/{workout_id}/exercises", response_model=list)
def get_workout_exercises(user_id: str, workout_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(workout_doc(db, user_id, workout_id).collection(EXERCISES).stream())
    except Exception:
        logger.exception("Failed to retrieve exercises of workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workout exercises")


@router.post("/{workout_id}/schedule", response_model=MessageResponse)
def schedule_workout(user_id: str, workout_id: str, data: WorkoutSchedule, db: Client = Depends(get_db)):
    try:
        workout_doc(db, user_id, workout_id).update(data.to_document())
    except Exception:
        logger.exception("Failed to schedule workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to schedule workout")

    return {"message": "Workout scheduled successfully"}


# History: one entry per completed session
@router.post("/{workout_id}/history", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_history(user_id: str, workout_id: str, data: HistoryCreate, db: Client = Depends(get_db)):
    try:
        _, history_ref = workout_doc(db, user_id, workout_id).collection(HISTORY).add(data.to_document())
    except Exception:
        logger.exception("Failed to record history of workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to record workout history")

    return {"id": history_ref.id, "message": "Workout history recorded successfully"}


@router.get("/{workout_id}/history", response_model=list)
def get_history(user_id: str, workout_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(workout_doc(db, user_id, workout_id).collection(HISTORY).stream())
    except Exception:
        logger.exception("Failed to retrieve history of workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workout history")


@router.post("/{workout_id}/progress", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_progress(user_id: str, workout_id: str, data: WorkoutProgressCreate, db: Client = Depends(get_db)):
    try:
        _, progress_ref = workout_doc(db, user_id, workout_id).collection(PROGRESS).add(data.to_document())
    except Exception:
        logger.exception("Failed to add progress to workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to add workout progress")

    return {"id": progress_ref.id, "message": "Workout progress added successfully"}


@router.get("/{workout_id}/progress", response_model=list)
def get_progress(user_id: str, workout_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(workout_doc(db, user_id, workout_id).collection(PROGRESS).stream())
    except Exception:
        logger.exception("Failed to retrieve progress of workout %s for user %s", workout_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve workout progress")
