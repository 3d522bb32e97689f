
from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from datetime import datetime, timedelta, timezone
from jose import jwt
from docflow.config import settings

pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str | None) -> bool:
    """Constant-time check of ``password`` against a stored hash.

    Malformed, empty or unrecognised hashes count as a mismatch.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except (UnknownHashError, ValueError, TypeError):
        return False

def password_needs_rehash(hashed: str) -> bool:
    return pwd_context.needs_update(hashed)

def create_access_token(
    subject: str,
    username: str,
    role: str,
    expires_minutes: int | None = None,
) -> str:
    now = datetime.now(timezone.utc)
    minutes = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    to_encode = {
        "sub": subject,
        "username": username,
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)

def decode_token(token: str) -> dict:
    # raises JWTError (ExpiredSignatureError included) on any failure
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require_exp": True, "require_sub": True},
    )
