
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field
from docflow.schemas.user import UserOut, Role

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=256)

class LoginIn(BaseModel):
    email: EmailStr
    password: str

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class RegisterOut(BaseModel):
    message: str
    user: UserOut

class TokenClaims(BaseModel):
    """Identity carried by a verified access token."""
    sub: str
    username: str
    role: Role
    iat: datetime
    exp: datetime
