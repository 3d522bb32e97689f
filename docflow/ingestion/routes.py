import logging
from typing import Any, Iterator
from fastapi import APIRouter, Depends, HTTPException, Request, status
from docflow.auth.deps import get_db
from docflow.config import settings
from docflow.ingestion.client import IngestionClient, IngestionError
from docflow.ingestion.store import (
    IN_PROGRESS,
    IngestionStatusStore,
    SqlIngestionStatusStore,
)
from docflow.schemas.ingestion import IngestionTriggerIn, IngestionStatusOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingestion", tags=["ingestion"])

def get_ingestion_client() -> IngestionClient:
    return IngestionClient()

def get_status_store(request: Request) -> Iterator[IngestionStatusStore]:
    if settings.ingestion_status_backend == "memory":
        yield request.app.state.ingestion_store
        return
    # session only for the db backend; honour get_db overrides
    sessions = request.app.dependency_overrides.get(get_db, get_db)()
    db = next(sessions)
    try:
        yield SqlIngestionStatusStore(db)
    finally:
        sessions.close()

@router.post("/trigger")
async def trigger(
    body: IngestionTriggerIn,
    client: IngestionClient = Depends(get_ingestion_client),
    store: IngestionStatusStore = Depends(get_status_store),
) -> Any:
    try:
        result = await client.forward(body.payload)
    except IngestionError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Ingestion processor unavailable")
    job = store.add(IN_PROGRESS, body.payload)
    logger.info("Ingestion job %s recorded", job.id)
    return result

@router.get("/status", response_model=list[IngestionStatusOut])
def ingestion_status(store: IngestionStatusStore = Depends(get_status_store)):
    return store.list()
