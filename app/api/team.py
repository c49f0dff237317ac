#app/api/team.py
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.schemas.team import TeamCreate, TeamRead, TeamUpdate
from app.crud.team import (
    create_team,
    get_team,
    get_all_teams,
    update_team,
    delete_team,
)
from app.core.exceptions import TeamNotFound
from app.database import JsonStore, get_db

router = APIRouter(prefix="/teams", tags=["Teams"])

@router.post("/", response_model=TeamRead, status_code=status.HTTP_201_CREATED)
def create_team_api(
    data: TeamCreate,
    db: JsonStore = Depends(get_db),
):
    """
    Create a new team.
    """
    return create_team(db, data.model_dump())

@router.get("/{team_id}", response_model=TeamRead)
def read_team(
    team_id: str,
    db: JsonStore = Depends(get_db)
):
    team = get_team(db, team_id)
    if team is None:
        raise TeamNotFound(f"Team {team_id} not found")
    return team

@router.get("/", response_model=List[TeamRead])
def list_teams(db: JsonStore = Depends(get_db)):
    """
    All teams, newest first.
    """
    return get_all_teams(db)

@router.patch("/{team_id}", response_model=TeamRead)
def update_team_api(
    team_id: str,
    data: TeamUpdate,
    db: JsonStore = Depends(get_db),
):
    """
    Update a team; only the fields sent are changed.
    """
    team = update_team(db, team_id, data.model_dump(exclude_unset=True))
    if team is None:
        raise TeamNotFound(f"Team {team_id} not found")
    return team

@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team_api(
    team_id: str,
    db: JsonStore = Depends(get_db),
):
    """
    Delete a team. Its users and tasks are not touched.
    """
    if not delete_team(db, team_id):
        raise TeamNotFound(f"Team {team_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
