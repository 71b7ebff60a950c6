# dashboard configuration
# loads env vars for the analytics api, timeouts, and view-layer limits

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # analytics api
    ANALYTICS_API_URL: str = os.getenv("ANALYTICS_API_URL", "https://steam-vault.onrender.com")
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # search box
    SEARCH_DEBOUNCE_MS: int = 300
    SEARCH_MIN_LENGTH: int = 2

    # game comparison
    COMPARE_MIN_GAMES: int = 2
    COMPARE_MAX_GAMES: int = 5

    # game details modal
    RECENT_WINDOW_DAYS: int = 30
    GAME_DETAILS_DAYS: int = 120

    # streaks card
    STREAK_TOP_GAMES: int = 5

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
