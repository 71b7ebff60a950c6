# steamvault dashboard api
# fastapi backend-for-frontend over the steam vault analytics service

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from steamvault.config import settings
from steamvault.services.api_client import AnalyticsClient
from steamvault.routers import summary, top_games, trends, streaks, heatmap, games, search, compare

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: open the analytics api client. shutdown: close it."""
    logger.info(f"Starting SteamVault dashboard against {settings.ANALYTICS_API_URL}")
    app.state.api_client = AnalyticsClient(
        base_url=settings.ANALYTICS_API_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
    )
    logger.info("SteamVault dashboard ready")
    yield
    logger.info("Shutting down SteamVault dashboard...")
    await app.state.api_client.close()


app = FastAPI(
    title="SteamVault Dashboard API",
    description="Dashboard sections for Steam playtime analytics — summary, top games, trends, streaks, heatmap, search and compare",
    version="0.1.0",
    lifespan=lifespan,
)

# cors — allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# register routers
app.include_router(summary.router)
app.include_router(top_games.router)
app.include_router(trends.router)
app.include_router(streaks.router)
app.include_router(heatmap.router)
app.include_router(games.router)
app.include_router(search.router)
app.include_router(compare.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "steamvault-dashboard"}
