from typing import List, Optional

from bson import ObjectId
from pymongo.results import UpdateResult

from the_field import db


def get_all_users() -> List[dict]:
    return list(db.users.find({}))


def get_user_by_id(user_id: ObjectId) -> Optional[dict]:
    return db.users.find_one({"_id": user_id})


def update_user(user_id: ObjectId, fields: dict) -> UpdateResult:
    """Partial merge of `fields` onto the user document."""
    return db.users.update_one({"_id": user_id}, {"$set": fields})


def link_detail(user_id: ObjectId, field: str, detail_id: ObjectId, empty_fields: List[str]) -> UpdateResult:
    """
    Set `field` to `detail_id` only while every name in `empty_fields` is
    still unset on the user. A matched_count of 0 means another request
    attached first (or the user vanished).
    """
    query = {"_id": user_id}
    for name in empty_fields:
        query[name] = None
    return db.users.update_one(query, {"$set": {field: detail_id}})


def finish_user(user_id: ObjectId, fields: dict) -> UpdateResult:
    """Like update_user, but only matches while the profile is unfinished."""
    return db.users.update_one({"_id": user_id, "finished": {"$ne": True}}, {"$set": fields})
