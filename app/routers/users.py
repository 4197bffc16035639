# app/routers/users.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from google.cloud.firestore import Client

from app.database import get_db
from app.models import user_doc, weight_progress_col, list_with_ids
from app.schemas.base_schema import CreatedResponse, MessageResponse
from app.schemas.user_schema import UserCreate, ProfileUpdate, WeightProgressCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def today_key() -> str:
    """Current UTC date as YYYY-MM-DD, the document id of a weight entry."""
    return datetime.now(timezone.utc).date().isoformat()


@router.get("/{user_id}", response_model=dict)
def get_user(user_id: str, db: Client = Depends(get_db)):
    try:
        snapshot = user_doc(db, user_id).get()
    except Exception:
        logger.exception("Failed to retrieve user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve user")

    if not snapshot.exists:
        raise HTTPException(status_code=404, detail="User not found")

    return snapshot.to_dict()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: Client = Depends(get_db)):
    # uid comes from Firebase Auth and doubles as the document id
    try:
        user_doc(db, data.uid).set(data.to_document(exclude={"uid"}))
    except Exception:
        logger.exception("Failed to add user %s", data.uid)
        raise HTTPException(status_code=500, detail="Failed to add user")

    return {"message": "User added successfully"}


@router.put("/{user_id}/profile", response_model=MessageResponse)
def update_profile(user_id: str, data: ProfileUpdate, db: Client = Depends(get_db)):
    try:
        user_doc(db, user_id).update(data.to_document())
    except Exception:
        logger.exception("Failed to update profile of user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to update profile")

    return {"message": "Profile updated successfully"}


# Weight progress: one document per day, keyed by date
@router.post("/{user_id}/weight-progress", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_weight_progress(user_id: str, data: WeightProgressCreate, db: Client = Depends(get_db)):
    """
    Record today's weight. A second entry on the same day replaces the first.
    """
    date = today_key()
    try:
        weight_progress_col(db, user_id).document(date).set(data.to_document())
    except Exception:
        logger.exception("Failed to add weight progress for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to add weight progress")

    return {"id": date, "message": "Weight progress added successfully"}


@router.get("/{user_id}/weight-progress", response_model=list)
def get_weight_progress(user_id: str, db: Client = Depends(get_db)):
    try:
        return list_with_ids(weight_progress_col(db, user_id).stream())
    except Exception:
        logger.exception("Failed to retrieve weight progress for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve weight progress")


@router.delete("/{user_id}/weight-progress/{progress_id}", response_model=MessageResponse)
def delete_weight_progress(user_id: str, progress_id: str, db: Client = Depends(get_db)):
    try:
        weight_progress_col(db, user_id).document(progress_id).delete()
    except Exception:
        logger.exception("Failed to delete weight progress %s for user %s", progress_id, user_id)
        raise HTTPException(status_code=500, detail="Failed to delete weight progress record")

    return {"message": "Weight progress record deleted successfully"}
