"""Storage for ingestion status records.

Records are append-only: a trigger adds one entry and nothing updates it
afterwards.
"""
import threading
from datetime import datetime, timezone
from typing import Any, Protocol
from sqlalchemy.orm import Session
from docflow.models.ingestion import IngestionJob
from docflow.schemas.ingestion import IngestionStatusOut

IN_PROGRESS = "In Progress"


class IngestionStatusStore(Protocol):
    def add(self, status: str, payload: Any) -> IngestionStatusOut: ...

    def list(self) -> list[IngestionStatusOut]: ...


class SqlIngestionStatusStore:
    def __init__(self, db: Session):
        self.db = db

    def add(self, status: str, payload: Any) -> IngestionStatusOut:
        job = IngestionJob(status=status, payload=payload)
        self.db.add(job); self.db.commit(); self.db.refresh(job)
        return IngestionStatusOut.model_validate(job)

    def list(self) -> list[IngestionStatusOut]:
        jobs = self.db.query(IngestionJob).order_by(IngestionJob.id).all()
        return [IngestionStatusOut.model_validate(j) for j in jobs]


class MemoryIngestionStatusStore:
    """Process-local store; contents are lost on restart."""

    def __init__(self):
        self._items: list[IngestionStatusOut] = []
        self._lock = threading.Lock()

    def add(self, status: str, payload: Any) -> IngestionStatusOut:
        with self._lock:
            item = IngestionStatusOut(
                id=len(self._items) + 1,
                status=status,
                payload=payload,
                created_at=datetime.now(timezone.utc),
            )
            self._items.append(item)
        return item

    def list(self) -> list[IngestionStatusOut]:
        with self._lock:
            return list(self._items)
