import logging
import os

from sqlalchemy import create_engine as create_sync_engine
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import Session, SQLModel

from footix_manager.core.config import DATABASE_PATH, SQL_ECHO

logger = logging.getLogger(__name__)

# Ensure DB file exists (prevents async context errors)
if not os.path.exists(DATABASE_PATH):
    logger.info("Database file not found, creating %s", DATABASE_PATH)
    open(DATABASE_PATH, "a").close()

# --- Database URLs ---
DATABASE_URL = f"sqlite+aiosqlite:///{DATABASE_PATH}"    # Async engine (startup)
SYNC_DATABASE_URL = f"sqlite:///{DATABASE_PATH}"         # Sync engine (routes/seeding)

# --- Engines ---
engine = create_async_engine(DATABASE_URL, echo=SQL_ECHO, future=True)
sync_engine = create_sync_engine(
    SYNC_DATABASE_URL,
    echo=SQL_ECHO,
    future=True,
    connect_args={"check_same_thread": False},
)


# --- Initialize DB tables ---
async def init_db():
    """Create tables asynchronously if they don't exist."""
    # Registers every table on SQLModel.metadata
    from footix_manager import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


# --- Sync session for seeding/scripts ---
def get_sync_session():
    return Session(sync_engine)


# --- Sync session (used in routes) ---
def get_session():
    with Session(sync_engine) as session:
        yield session
