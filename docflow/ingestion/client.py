import logging
from typing import Any
import httpx
from docflow.config import settings

logger = logging.getLogger(__name__)

class IngestionError(Exception):
    """The external processor could not be reached or rejected the payload."""

class IngestionClient:
    def __init__(self, url: str | None = None, timeout: float | None = None, transport=None):
        self.url = url or settings.ingestion_url
        self.timeout = settings.ingestion_timeout_seconds if timeout is None else timeout
        self._transport = transport

    async def forward(self, payload: Any) -> Any:
        headers = {"Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(self.url, headers=headers, json=payload)
                r.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Ingestion forward to %s failed: %s", self.url, e)
            raise IngestionError(str(e)) from e

        try:
            return r.json()
        except ValueError:
            return r.text
