
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from docflow.auth.deps import get_db, require_access, require_roles
from docflow.schemas.user import UserOut, UpdateRoleIn, MessageOut
from docflow.users import service

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_access)])

admin_only = [Depends(require_roles("admin"))]

@router.get("", response_model=list[UserOut], dependencies=admin_only)
def list_users(db: Session = Depends(get_db)):
    return service.list_users(db)

@router.patch("/role", response_model=UserOut, dependencies=admin_only)
def update_role(body: UpdateRoleIn, db: Session = Depends(get_db)):
    return service.update_role(db, str(body.userId), body.role)

@router.delete("/{user_id}", response_model=MessageOut, dependencies=admin_only)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    service.delete_user(db, user_id)
    return MessageOut(message=f"User with ID {user_id} has been deleted.")
