
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from docflow.auth.deps import get_db
from docflow.schemas.document import DocumentCreate, DocumentUpdate, DocumentOut
from docflow.schemas.user import MessageOut
from docflow.models.document import Document

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

def _get_or_404(db: Session, doc_id: str) -> Document:
    doc = db.get(Document, doc_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Document not found")
    return doc

@router.post("", response_model=DocumentOut, status_code=status.HTTP_201_CREATED)
def create_document(body: DocumentCreate, db: Session = Depends(get_db)):
    doc = Document(title=body.title, content=body.content)
    db.add(doc); db.commit(); db.refresh(doc)
    logger.info("Created document %s", doc.id)
    return doc

@router.get("", response_model=list[DocumentOut])
def list_documents(db: Session = Depends(get_db)):
    return db.query(Document).order_by(Document.created_at).all()

@router.get("/{doc_id}", response_model=DocumentOut)
def get_document(doc_id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, doc_id)

@router.patch("/{doc_id}", response_model=DocumentOut)
def update_document(doc_id: str, body: DocumentUpdate, db: Session = Depends(get_db)):
    doc = _get_or_404(db, doc_id)
    if body.title is not None:
        doc.title = body.title
    if body.content is not None:
        doc.content = body.content
    db.commit(); db.refresh(doc)
    logger.info("Updated document %s", doc_id)
    return doc

@router.delete("/{doc_id}", response_model=MessageOut)
def delete_document(doc_id: str, db: Session = Depends(get_db)):
    doc = _get_or_404(db, doc_id)
    db.delete(doc); db.commit()
    logger.info("Deleted document %s", doc_id)
    return MessageOut(message=f"Document with ID {doc_id} has been deleted.")
