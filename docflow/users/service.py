
import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from docflow.models.user import User, DEFAULT_ROLE
from docflow.utils.security import hash_password

logger = logging.getLogger(__name__)

def _not_found(user_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")

def create_user(db: Session, email: str, password: str, role: str = DEFAULT_ROLE) -> User:
    user = User(email=email, password_hash=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()

def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at, User.email).all()

# no authorization here: callers are admin-gated at the route layer

def update_role(db: Session, user_id: str, role: str) -> User:
    user = get_user(db, user_id)
    if user is None:
        raise _not_found(user_id)
    user.role = role
    db.commit()
    db.refresh(user)
    logger.info("User %s role set to %s", user_id, role)
    return user

def delete_user(db: Session, user_id: str) -> None:
    user = get_user(db, user_id)
    if user is None:
        raise _not_found(user_id)
    db.delete(user)
    db.commit()
    logger.info("User %s deleted", user_id)
