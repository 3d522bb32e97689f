
from sqlalchemy import Column, String, Text, DateTime, func
from docflow.db.session import Base
from docflow.models.user import _uuid

class Document(Base):
    __tablename__ = "documents"
    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
