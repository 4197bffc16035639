from typing import Any

from app.schemas.base_schema import CamelModel


# Values are stored exactly as sent; only the key names are fixed.
class UserCreate(CamelModel):
    uid: str  # Firebase Auth uid, used as the document id
    name: Any = None
    surname: Any = None
    created: Any = None
    height: Any = None
    weight: Any = None
    gender: Any = None
    date_of_birth: Any = None


class ProfileUpdate(CamelModel):
    height: Any = None
    current_weight: Any = None


class WeightProgressCreate(CamelModel):
    weight: Any = None
