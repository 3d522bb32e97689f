
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from docflow.auth.deps import get_db, require_access
from docflow.schemas.auth import RegisterIn, LoginIn, TokenOut, RegisterOut, TokenClaims
from docflow.schemas.user import UserOut
from docflow.auth.service import register_user, authenticate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    try:
        user = register_user(db, body.email, body.password)
    except HTTPException as exc:
        if exc.status_code == status.HTTP_409_CONFLICT:
            raise
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Registration failed")
    except IntegrityError:
        # concurrent registration lost the race on the unique email index
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered")
    except Exception:
        db.rollback()
        logger.exception("Registration failed for %s", body.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Registration failed")
    return RegisterOut(message="User registered successfully", user=UserOut.model_validate(user))

@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, db: Session = Depends(get_db)):
    return TokenOut(access_token=authenticate(db, body.email, body.password))

@router.get("/me", response_model=TokenClaims)
def me(identity: TokenClaims = Depends(require_access)):
    return identity
