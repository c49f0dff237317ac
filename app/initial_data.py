# app/initial_data.py

import logging
from app.database import JsonStore, init_store
from app.crud.team import create_team, get_all_teams
from app.crud.user import create_user
from app.core.settings import settings
from app.models.user import UserRole

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("TeamDashboard.InitialData")

DEMO_TEAM = {"name": "Demo Team", "description": "Created by initial data setup"}
DEMO_ADMIN = {"email": "admin@example.com", "name": "Admin", "role": UserRole.ADMIN}

def create_initial_data(db: JsonStore) -> bool:
    """
    Seed a demo team with an admin user when the store has no teams.
    Returns True when data was created.
    """
    logger.info("Checking if initial data needs to be created...")
    if get_all_teams(db):
        logger.info("Store already has teams. No action taken.")
        return False
    team = create_team(db, DEMO_TEAM)
    admin = create_user(db, {**DEMO_ADMIN, "team_id": team.id})
    logger.info(f"Created team '{team.name}' with admin <{admin.email}>")
    return True

def main() -> None:
    logger.info("Initializing initial data...")
    create_initial_data(init_store())
    logger.info("Finished initial data setup.")

if __name__ == "__main__":
    main()
