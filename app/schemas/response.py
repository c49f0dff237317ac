#app/schemas/response.py
from pydantic import BaseModel, Field
from datetime import datetime

class HealthResponse(BaseModel):
    """
    HealthResponse — liveness probe.
    """
    status: str = Field("ok", examples=["ok"])
    timestamp: datetime
