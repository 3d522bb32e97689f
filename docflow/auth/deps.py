
import logging
from fastapi import Request, HTTPException, status
from jose import JWTError
from pydantic import ValidationError
from docflow.db.session import SessionLocal
from docflow.schemas.auth import TokenClaims
from docflow.utils.security import decode_token

logger = logging.getLogger(__name__)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def _bearer_token(request: Request) -> str:
    auth = request.headers.get("Authorization")
    if not auth:
        raise _unauthorized("Not authenticated")
    parts = auth.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized("Malformed authorization header")
    return parts[1]

def require_access(request: Request) -> TokenClaims:
    """Verify the bearer token and attach its claims to ``request.state.identity``."""
    token = _bearer_token(request)
    try:
        claims = TokenClaims.model_validate(decode_token(token))
    except (JWTError, ValidationError) as exc:
        logger.info("Rejected token on %s: %s", request.url.path, exc.__class__.__name__)
        raise _unauthorized("Invalid token")

    request.state.identity = claims
    return claims

def get_identity(request: Request) -> TokenClaims | None:
    return getattr(request.state, "identity", None)

def require_roles(*roles: str):
    """Route-level gate; mount after ``require_access`` in the same pipeline."""
    allowed = frozenset(roles)

    def _guard(request: Request) -> TokenClaims:
        identity = get_identity(request)
        if identity is None:
            raise _unauthorized("Not authenticated")
        if identity.role not in allowed:
            logger.info("Role %s denied on %s", identity.role, request.url.path)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role")
        return identity

    return _guard
