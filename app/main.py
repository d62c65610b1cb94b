import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
from app.db.db import create_db_and_tables
from app.routers import auth, treasures, users
from app.utils.error_handlers import register_error_handlers
from app.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    create_db_and_tables()
    logger.info("Treasure API started")
    yield
    logger.info("Treasure API shutting down")


app = FastAPI(
    title="Dragon Treasure API",
    description="A rare and valuable treasure.",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Register routers
app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(treasures.router, prefix="/api", tags=["Treasure"])
app.include_router(users.router, prefix="/api/users", tags=["User"])


@app.get("/")
def root():
    return {"status": "ok"}
