# app/models.py
# Firestore layout. Documents are schemaless; these helpers only build references.
#
#   users/{userId}
#   users/{userId}/weight-progress/{YYYY-MM-DD}
#   users/{userId}/exercises/{exerciseId}
#   users/{userId}/exercises/{exerciseId}/workouts/{workoutId}
#   users/{userId}/workouts/{workoutId}
#   users/{userId}/workouts/{workoutId}/exercises/{id}
#   users/{userId}/workouts/{workoutId}/history/{historyId}
#   users/{userId}/workouts/{workoutId}/progress/{progressId}
from typing import Any, Iterable

from google.cloud.firestore import Client, CollectionReference, DocumentReference, DocumentSnapshot

USERS = "users"
WEIGHT_PROGRESS = "weight-progress"
EXERCISES = "exercises"
WORKOUTS = "workouts"
HISTORY = "history"
PROGRESS = "progress"


def user_doc(db: Client, user_id: str) -> DocumentReference:
    return db.collection(USERS).document(user_id)


def weight_progress_col(db: Client, user_id: str) -> CollectionReference:
    return user_doc(db, user_id).collection(WEIGHT_PROGRESS)


def exercises_col(db: Client, user_id: str) -> CollectionReference:
    return user_doc(db, user_id).collection(EXERCISES)


def exercise_workouts_col(db: Client, user_id: str, exercise_id: str) -> CollectionReference:
    return exercises_col(db, user_id).document(exercise_id).collection(WORKOUTS)


def workouts_col(db: Client, user_id: str) -> CollectionReference:
    return user_doc(db, user_id).collection(WORKOUTS)


def workout_doc(db: Client, user_id: str, workout_id: str) -> DocumentReference:
    return workouts_col(db, user_id).document(workout_id)


def with_id(snapshot: DocumentSnapshot) -> dict[str, Any]:
    """Document data with the document id attached as `id`."""
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


def list_with_ids(snapshots: Iterable[DocumentSnapshot]) -> list[dict[str, Any]]:
    return [with_id(snapshot) for snapshot in snapshots]
