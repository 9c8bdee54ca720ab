# the_field/services/users.py
"""
Read path and profile mutators for user documents.

Every public function raises a `UserServiceError` subclass on failure; the
HTTP layer turns those into JSON error payloads.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError
from pymongo.results import UpdateResult

from the_field.auth import bearer_session_id, get_session
from the_field.db import session_repo
from the_field.db import user_repo
from the_field.errors import (
    AlreadyFinished,
    Empty,
    NotFound,
    PersistenceFailure,
    SessionUpdateFailed,
    ValidationFailed,
)
from the_field.schemas.users import FinishProfileRequest, UpdatePictureRequest, parse_body
from the_field.utils.logger import log_activity
from the_field.validation import is_string_empty, parse_object_id


def to_json(value: Any) -> Any:
    """ObjectIds become hex strings, recursively."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json(v) for v in value]
    return value


def update_result_json(result: UpdateResult) -> Dict[str, Any]:
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
        "upserted_id": to_json(result.upserted_id),
    }


def fetch_user(user_id: ObjectId) -> dict:
    try:
        user = user_repo.get_user_by_id(user_id)
    except PyMongoError as e:
        raise PersistenceFailure(str(e), "Failed to get user")
    if not user:
        raise NotFound("user", "Failed to get user")
    return user


# --- read path ---------------------------------------------------------------

def list_users() -> List[dict]:
    try:
        users = user_repo.get_all_users()
    except PyMongoError as e:
        raise PersistenceFailure("Failed to retrieve users", str(e))
    if not users:
        raise Empty()
    return [to_json(u) for u in users]


def get_user(raw_id: str) -> dict:
    return to_json(fetch_user(parse_object_id(raw_id)))


# --- mutators ------------------------------------------------------------------

def finish_profile(raw_id: str, raw_body: bytes) -> Dict[str, Any]:
    user_id = parse_object_id(raw_id)
    user = fetch_user(user_id)

    if user.get("finished"):
        raise AlreadyFinished()

    body = parse_body(FinishProfileRequest, raw_body)
    is_string_empty("Name", body.name)
    is_string_empty("Bio", body.bio)

    try:
        result = user_repo.finish_user(user_id, {"name": body.name, "bio": body.bio, "finished": True})
    except PyMongoError as e:
        raise PersistenceFailure(str(e), "Failed to update user")
    # another request finished the profile after our read
    if result.matched_count == 0:
        raise AlreadyFinished()

    log_activity(str(user_id), "finish_profile", {"fields": ["name", "bio", "finished"]})
    return update_result_json(result)


def update_picture(raw_id: str, auth_header: Optional[str], raw_body: bytes) -> Dict[str, Any]:
    """
    Set the user's picture, then copy it onto the caller's session.

    A failed session copy is reported but the user update stays applied.
    """
    session_id = bearer_session_id(auth_header)
    user_id = parse_object_id(raw_id)
    get_session(session_id)
    fetch_user(user_id)

    body = parse_body(UpdatePictureRequest, raw_body)
    if body.picture is None:
        raise ValidationFailed("PictureKey", "PictureKey cannot be empty")
    is_string_empty("PictureKey", body.picture.pictureKey)
    is_string_empty("PictureURL", body.picture.pictureURL)

    picture = {"pictureKey": body.picture.pictureKey, "pictureURL": body.picture.pictureURL}

    try:
        result = user_repo.update_user(user_id, {"picture": picture})
    except PyMongoError as e:
        raise PersistenceFailure(str(e), "Failed to update user")

    try:
        session_result = session_repo.update_session(session_id, {"picture": dict(picture)})
    except PyMongoError as e:
        raise SessionUpdateFailed(str(e))
    if session_result.matched_count == 0:
        raise SessionUpdateFailed("session not found")

    log_activity(str(user_id), "update_picture", {"pictureKey": picture["pictureKey"]})
    return update_result_json(result)
