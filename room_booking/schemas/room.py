from pydantic import BaseModel, field_validator


class RoomCreateRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def check_not_empty(cls, v):
        if not v.strip(): raise ValueError("Room name cannot be blank")
        return v.strip()


class RoomUpdateRequest(RoomCreateRequest):
    pass
