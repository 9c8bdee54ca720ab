# Org / Athlete detail records, each in its own collection.
from bson import ObjectId
from pymongo.collection import Collection

from the_field import db


def _collection(kind: str) -> Collection:
    if kind == "org":
        return db.orgs
    if kind == "athlete":
        return db.athletes
    raise ValueError(f"unknown detail kind: {kind}")


def insert_detail(kind: str, doc: dict) -> ObjectId:
    return _collection(kind).insert_one(doc).inserted_id


def delete_detail(kind: str, detail_id: ObjectId) -> int:
    return _collection(kind).delete_one({"_id": detail_id}).deleted_count
