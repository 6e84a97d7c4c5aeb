from datetime import datetime

from pydantic import BaseModel, Field

from tracker.models.person import Role


class PersonCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(default="", max_length=80)
    role: Role


class PersonResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    role: Role
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
