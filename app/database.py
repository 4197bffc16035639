import logging
import os
import threading
from functools import lru_cache

import firebase_admin
from fastapi import HTTPException
from firebase_admin import credentials, firestore
from google.cloud.firestore import Client

from app.config import settings

logger = logging.getLogger(__name__)

# Requests run on the worker thread pool; only one of them may create the app
_init_lock = threading.Lock()


def init_firebase() -> firebase_admin.App:
    """Initialise the default Firebase app once per process.

    Uses the service account key at FIREBASE_CREDENTIALS when the file exists,
    otherwise Application Default Credentials (GOOGLE_APPLICATION_CREDENTIALS,
    gcloud login or the metadata server).
    """
    with _init_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None

        if os.path.exists(settings.FIREBASE_CREDENTIALS):
            cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS)
            logger.info("Initialising Firebase with service account %s", settings.FIREBASE_CREDENTIALS)
        else:
            cred = credentials.ApplicationDefault()
            logger.info("Initialising Firebase with application default credentials")

        try:
            return firebase_admin.initialize_app(cred, options)
        except ValueError:
            # Created outside this module, e.g. by a script importing firebase_admin directly
            return firebase_admin.get_app()


@lru_cache(maxsize=1)
def get_firestore() -> Client:
    init_firebase()
    return firestore.client()


# Dependency for routes
def get_db() -> Client:
    try:
        return get_firestore()
    except Exception:
        logger.exception("Failed to initialise the Firestore client")
        raise HTTPException(status_code=500, detail="Database unavailable")
