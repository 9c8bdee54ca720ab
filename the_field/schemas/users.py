from pydantic import BaseModel, Field, ValidationError
from typing import List, Optional

from the_field.errors import ParseFailed


class FinishProfileRequest(BaseModel):
    name: str = ""
    bio: str = ""


class Picture(BaseModel):
    pictureKey: str = ""
    pictureURL: str = ""


class UpdatePictureRequest(BaseModel):
    picture: Optional[Picture] = None


class OrgRequest(BaseModel):
    country: str = ""
    email: str = ""
    city: str = ""
    website: str = ""
    sport: List[str] = Field(default_factory=list)
    sponsors: List[str] = Field(default_factory=list)


class AthleteRequest(BaseModel):
    nationality: str = ""
    gender: str = ""
    sport: str = ""
    sponsors: List[str] = Field(default_factory=list)
    current_team: str = ""
    height: int = 0
    weight: int = 0
    achievements: str = ""
    contact: str = ""


def parse_body(model, raw: bytes):
    """Decode a raw JSON request body into `model`, or raise ParseFailed."""
    try:
        return model.model_validate_json(raw or b"")
    except ValidationError as e:
        raise ParseFailed(e.errors(include_url=False)[0]["msg"])
