#app/api/user.py
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional

from app.schemas.user import UserCreate, UserUpdate, UserRead
from app.crud.user import (
    create_user,
    get_user,
    get_user_by_email,
    get_users,
    update_user,
    delete_user,
)
from app.core.exceptions import UserNotFound
from app.database import JsonStore, get_db

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    data: UserCreate,
    db: JsonStore = Depends(get_db),
):
    """
    Create a user. The team is not checked and emails may repeat.
    """
    return create_user(db, data.model_dump())

@router.get("/", response_model=List[UserRead])
def list_users(
    team_id: Optional[str] = Query(None),
    db: JsonStore = Depends(get_db),
):
    """
    Users ordered by name, optionally only one team's members.
    """
    return get_users(db, team_id=team_id)

@router.get("/by-email/{email}", response_model=UserRead)
def get_by_email(
    email: str,
    db: JsonStore = Depends(get_db),
):
    user_obj = get_user_by_email(db, email)
    if not user_obj:
        raise UserNotFound(f"No user with email {email}")
    return user_obj

@router.get("/{user_id}", response_model=UserRead)
def get_user_profile(
    user_id: str,
    db: JsonStore = Depends(get_db),
):
    user_obj = get_user(db, user_id)
    if not user_obj:
        raise UserNotFound(f"User {user_id} not found")
    return user_obj

@router.patch("/{user_id}", response_model=UserRead)
def patch_user(
    user_id: str,
    data: UserUpdate,
    db: JsonStore = Depends(get_db),
):
    """
    Update user info; team_id: null removes the user from their team.
    """
    user_obj = update_user(db, user_id, data.model_dump(exclude_unset=True))
    if not user_obj:
        raise UserNotFound(f"User {user_id} not found")
    return user_obj

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_user(
    user_id: str,
    db: JsonStore = Depends(get_db),
):
    if not delete_user(db, user_id):
        raise UserNotFound(f"User {user_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
