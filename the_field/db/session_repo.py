from typing import Optional

from pymongo.results import UpdateResult

from the_field import db


def get_session(session_id: str) -> Optional[dict]:
    return db.sessions.find_one({"_id": session_id})


def update_session(session_id: str, fields: dict) -> UpdateResult:
    return db.sessions.update_one({"_id": session_id}, {"$set": fields})
