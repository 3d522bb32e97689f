from sqlalchemy import Column, Integer, String, DateTime, JSON
from datetime import datetime, timezone
from docflow.db.session import Base

def _utcnow():
    return datetime.now(timezone.utc)

class IngestionJob(Base):
    __tablename__ = "ingestion_jobs"
    id = Column(Integer, primary_key=True, index=True)
    status = Column(String(50), nullable=False)
    payload = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=_utcnow)
