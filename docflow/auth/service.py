
import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from docflow.models.user import User
from docflow.schemas.user import UserOut
from docflow.users.service import create_user, get_user_by_email
from docflow.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

# compared against when the email is unknown so both failure paths pay the hash cost
_DUMMY_HASH = hash_password("docflow-dummy-password")

def register_user(db: Session, email: str, password: str) -> User:
    if get_user_by_email(db, email):
        logger.info("Registration conflict for %s", email)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered")
    user = create_user(db, email, password)
    logger.info("Registered user %s", user.id)
    return user

def validate_user(db: Session, email: str, password: str) -> UserOut | None:
    """Return the user without its hash, or None.

    Unknown email and wrong password are deliberately indistinguishable.
    """
    user = get_user_by_email(db, email)
    if user is None:
        verify_password(password, _DUMMY_HASH)
        return None
    if not verify_password(password, user.password_hash):
        return None
    return UserOut.model_validate(user)

def login_user(user: UserOut) -> str:
    return create_access_token(user.id, user.email, user.role)

def authenticate(db: Session, email: str, password: str) -> str:
    user = validate_user(db, email, password)
    if user is None:
        logger.info("Failed login for %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.info("User %s logged in", user.id)
    return login_user(user)
