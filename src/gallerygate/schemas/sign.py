import enum

from pydantic import BaseModel, ConfigDict, Field


class SignAction(enum.StrEnum):
    IN = "In"
    OUT = "Out"


class SignActionRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=128)
    action: SignAction


class SignEvent(BaseModel):
    username: str = Field(..., alias="Username")
    timestamp: str = Field(..., alias="Timestamp")
    action: SignAction = Field(..., alias="Action")

    model_config = ConfigDict(populate_by_name=True)
