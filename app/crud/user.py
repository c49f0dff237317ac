#app/crud/user.py
import logging
from typing import List, Optional

from app.database import JsonStore
from app.models.user import User, UserRole

logger = logging.getLogger("TeamDashboard.Users")

USER_UPDATE_FIELDS = ("email", "name", "team_id", "role")

def create_user(db: JsonStore, data: dict) -> User:
    """
    Create a user. The role defaults to member; duplicate emails are not rejected.
    """
    user = User(
        email=data["email"],
        name=data["name"],
        team_id=data.get("team_id"),
        role=data.get("role") or UserRole.MEMBER,
    )
    db.users.append(user)
    db.save()
    logger.info(f"Created user {user.id} <{user.email}>")
    return user

def get_user(db: JsonStore, user_id: str) -> Optional[User]:
    return next((u for u in db.users if u.id == user_id), None)

def get_user_by_email(db: JsonStore, email: str) -> Optional[User]:
    """
    First user registered with this email, if any.
    """
    return next((u for u in db.users if u.email == email), None)

def get_users(db: JsonStore, team_id: Optional[str] = None) -> List[User]:
    """
    Users ordered by name, optionally limited to one team.
    """
    users = db.users
    if team_id:
        users = [u for u in users if u.team_id == team_id]
    return sorted(users, key=lambda u: u.name.casefold())

def update_user(db: JsonStore, user_id: str, data: dict) -> Optional[User]:
    user = get_user(db, user_id)
    if user is None:
        return None
    changes = {k: data[k] for k in USER_UPDATE_FIELDS if k in data}
    if not changes:
        logger.info(f"Update called but no changes for user {user_id}")
        return user
    for field, value in changes.items():
        setattr(user, field, value)
    user.touch()
    db.save()
    logger.info(f"Updated user {user.id} fields: {sorted(changes)}")
    return user

def delete_user(db: JsonStore, user_id: str) -> bool:
    """
    Remove a user. Tasks and comments pointing at the user keep the dangling id.
    """
    user = get_user(db, user_id)
    if user is None:
        return False
    db.users.remove(user)
    db.save()
    logger.info(f"Deleted user {user_id}")
    return True
