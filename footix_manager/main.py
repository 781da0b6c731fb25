import logging

from fastapi import FastAPI

from footix_manager.core.config import LOG_LEVEL, TEST_MODE
from footix_manager.core.database import init_db
from footix_manager.core.errors import ApiError, api_error_handler

# --- Routers ---
from footix_manager.routes.auction_routes import router as auction_router
from footix_manager.routes.club_routes import router as club_router
from footix_manager.routes.competition_routes import router as competition_router
from footix_manager.routes.player_routes import router as player_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Footix Manager")
app.add_exception_handler(ApiError, api_error_handler)


@app.on_event("startup")
async def on_startup():
    # 1️⃣ Init DB tables async
    await init_db()

    # 2️⃣ Demo data when running in test mode
    if TEST_MODE:
        from footix_manager.seed.seed_all import seed_all
        seed_all()

    logger.info("Footix Manager started (test mode: %s)", TEST_MODE)


# Routers
app.include_router(competition_router, prefix="/competitions", tags=["Competitions"])
app.include_router(auction_router, prefix="/servers", tags=["Auctions"])
app.include_router(club_router, prefix="/clubs", tags=["Clubs"])
app.include_router(player_router, prefix="/players", tags=["Players"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("footix_manager.main:app", host="127.0.0.1", port=8000, reload=TEST_MODE)
