# the_field/routes/users.py
from fastapi import APIRouter, Request

from the_field.services import attach as attach_service
from the_field.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def get_users():
    return user_service.list_users()


@router.get("/{user_id}")
def get_user_id(user_id: str):
    user = user_service.get_user(user_id)
    return {"message": "user found", "user": user}


@router.post("/{user_id}/finish")
async def finish_profile(user_id: str, request: Request):
    raw = await request.body()
    result = user_service.finish_profile(user_id, raw)
    return {"message": "success", "user": result}


@router.put("/{user_id}/picture")
async def update_picture(user_id: str, request: Request):
    raw = await request.body()
    result = user_service.update_picture(user_id, request.headers.get("Authorization"), raw)
    return {"message": "success", "user": result}


@router.post("/{user_id}/org")
async def attach_org(user_id: str, request: Request):
    raw = await request.body()
    result = attach_service.attach_org(user_id, raw)
    return attach_service.result_json("org", result)


@router.post("/{user_id}/athlete")
async def attach_athlete(user_id: str, request: Request):
    raw = await request.body()
    result = attach_service.attach_athlete(user_id, raw)
    return attach_service.result_json("athlete", result)
