
from datetime import datetime
from typing import Literal
from uuid import UUID
from pydantic import BaseModel, ConfigDict

Role = Literal["admin", "editor", "viewer"]

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None

class UpdateRoleIn(BaseModel):
    userId: UUID
    role: Role

class MessageOut(BaseModel):
    message: str
