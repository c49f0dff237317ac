#app/crud/team.py
import logging
from typing import List, Optional

from app.database import JsonStore
from app.models.team import Team
from app.crud.ordering import newest_first

logger = logging.getLogger("TeamDashboard.Team")

TEAM_UPDATE_FIELDS = ("name", "description")

def create_team(db: JsonStore, data: dict) -> Team:
    """
    Create a new team. Names need not be unique.
    """
    team = Team(
        name=data["name"],
        description=data.get("description"),
    )
    db.teams.append(team)
    db.save()
    logger.info(f"Created team '{team.name}' (ID: {team.id})")
    return team

def get_team(db: JsonStore, team_id: str) -> Optional[Team]:
    return next((t for t in db.teams if t.id == team_id), None)

def get_all_teams(db: JsonStore) -> List[Team]:
    """
    All teams, most recently created first.
    """
    return newest_first(db.teams)

def update_team(db: JsonStore, team_id: str, data: dict) -> Optional[Team]:
    """
    Apply the fields present in data. Returns None for an unknown id.
    """
    team = get_team(db, team_id)
    if team is None:
        return None
    changes = {k: data[k] for k in TEAM_UPDATE_FIELDS if k in data}
    if not changes:
        logger.info(f"Update called but no changes for team {team_id}")
        return team
    for field, value in changes.items():
        setattr(team, field, value)
    team.touch()
    db.save()
    logger.info(f"Updated team '{team.name}' (ID: {team.id}) fields: {sorted(changes)}")
    return team

def delete_team(db: JsonStore, team_id: str) -> bool:
    """
    Remove a team. Users and tasks that reference it are left as they are.
    """
    team = get_team(db, team_id)
    if team is None:
        return False
    db.teams.remove(team)
    db.save()
    logger.info(f"Deleted team {team_id}")
    return True
