
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict

class IngestionTriggerIn(BaseModel):
    payload: Any = None

class IngestionStatusOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    payload: Any = None
    created_at: datetime | None = None
