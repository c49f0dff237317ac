# app/main.py

from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.task import router as task_router
from app.api.team import router as team_router
from app.api.user import router as user_router

from app.core.settings import settings
from app.core.exceptions import NotFoundError, StoreError
from app.database import init_store
from app.schemas.response import HealthResponse

# Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("TeamDashboard.API")

app = FastAPI(
    title="Team Dashboard API",
    version="1.0.0",
    description="Team task tracking: teams, members, tasks, comments and a kanban view",
)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(team_router, prefix=settings.API_PREFIX)
app.include_router(user_router, prefix=settings.API_PREFIX)
app.include_router(task_router, prefix=settings.API_PREFIX)

# Health check & root
@app.get("/", tags=["Health"])
def root():
    return {"status": "Team Dashboard API is running!"}

@app.get("/health", tags=["Health"], response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))

@app.on_event("startup")
async def startup_event():
    store = init_store()
    logger.info(f"Starting Team Dashboard API (store: {store.path or 'in-memory'})")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Stopping Team Dashboard API")

@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(StoreError)
async def store_exception_handler(request: Request, exc: StoreError):
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal error while saving data."},
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
