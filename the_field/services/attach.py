# the_field/services/attach.py
"""
Attach an Org or Athlete detail record to a user.

The detail record lives in its own collection, so attaching is two writes:
insert the record, then link its id onto the user. The link is a
conditional update that only matches while the user is still unattached,
so two concurrent attaches cannot both win. When the link fails the
inserted record is deleted again; if that delete fails too, both errors
are reported.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.errors import PyMongoError

from the_field.db import detail_repo
from the_field.db import user_repo
from the_field.errors import (
    AlreadyAttached,
    CompensationFailure,
    LinkFailed,
    PersistenceFailure,
)
from the_field.schemas.users import AthleteRequest, OrgRequest, parse_body
from the_field.services.users import fetch_user, to_json
from the_field.utils.logger import log_activity
from the_field.validation import (
    check_range,
    is_list_empty,
    is_string_empty,
    normalize_email,
    parse_object_id,
    validate_email,
)

HEIGHT_RANGE = (100, 200)
WEIGHT_RANGE = (100, 400)


@dataclass
class AttachResult:
    id: ObjectId
    record: Dict[str, Any]


def build_org(body: OrgRequest) -> Dict[str, Any]:
    email = normalize_email(body.email)

    is_string_empty("Country", body.country)
    validate_email("Email", email)
    is_string_empty("City", body.city)
    is_string_empty("Website", body.website)
    is_list_empty("sport", body.sport)

    return {
        "official": False,
        "country": body.country,
        "email": email,
        "city": body.city,
        "website": body.website,
        "sport": list(body.sport),
        "sponsors": list(body.sponsors),
    }


def build_athlete(body: AthleteRequest) -> Dict[str, Any]:
    contact = normalize_email(body.contact)

    is_string_empty("Nationality", body.nationality)
    is_string_empty("Gender", body.gender)
    is_string_empty("Sport", body.sport)
    is_string_empty("CurrentTeam", body.current_team)
    check_range("Height", body.height, *HEIGHT_RANGE)
    check_range("Weight", body.weight, *WEIGHT_RANGE)
    is_string_empty("Achievements", body.achievements)
    validate_email("Contact", contact)

    return {
        "nationality": body.nationality,
        "gender": body.gender,
        "sport": body.sport,
        "sponsors": list(body.sponsors),
        "current_team": body.current_team,
        "height": body.height,
        "weight": body.weight,
        "achievements": body.achievements,
        "contact": contact,
    }


def _attach(user_id: ObjectId, kind: str, record: Dict[str, Any], blocking: List[str]) -> AttachResult:
    user = fetch_user(user_id)

    # org attach only looks at org; athlete attach is blocked by either
    for field in blocking:
        if user.get(field) is not None:
            raise AlreadyAttached(field)

    try:
        detail_id = detail_repo.insert_detail(kind, record)
    except PyMongoError as e:
        raise PersistenceFailure(str(e), f"Failed to create {kind}")

    try:
        linked = user_repo.link_detail(user_id, kind, detail_id, blocking)
        link_error = None if linked.matched_count else f"User already has an {kind} or no longer exists"
    except PyMongoError as e:
        link_error = str(e)

    if link_error is not None:
        _rollback(user_id, kind, detail_id, link_error)

    record["_id"] = detail_id
    log_activity(str(user_id), f"attach_{kind}", {f"{kind}_id": str(detail_id)})
    return AttachResult(id=detail_id, record=record)


def _rollback(user_id: ObjectId, kind: str, detail_id: ObjectId, link_error: str) -> None:
    try:
        deleted = detail_repo.delete_detail(kind, detail_id)
        rollback_error = None if deleted else f"{kind} {detail_id} not found"
    except PyMongoError as e:
        rollback_error = str(e)

    if rollback_error is not None:
        raise CompensationFailure(kind, link_error, rollback_error)

    log_activity(str(user_id), "attach_rollback", {"kind": kind, f"{kind}_id": str(detail_id)})
    raise LinkFailed(kind, link_error)


def attach_org(raw_id: str, raw_body: bytes) -> AttachResult:
    user_id = parse_object_id(raw_id)
    record = build_org(parse_body(OrgRequest, raw_body))
    return _attach(user_id, "org", record, ["org"])


def attach_athlete(raw_id: str, raw_body: bytes) -> AttachResult:
    user_id = parse_object_id(raw_id)
    record = build_athlete(parse_body(AthleteRequest, raw_body))
    return _attach(user_id, "athlete", record, ["org", "athlete"])


def result_json(kind: str, result: AttachResult) -> Dict[str, Any]:
    return {
        "result": {
            "message": f"{kind} created and linked to user",
            "id": str(result.id),
            kind: to_json(result.record),
        }
    }
