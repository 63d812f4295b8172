import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # -> project root

# Load .env explicitly from project root
load_dotenv(BASE_DIR / ".env")


class Settings:
    PROJECT_NAME = os.getenv("PROJECT_NAME", "Registration Forms")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    FORM_SESSION_LIMIT = int(os.getenv("FORM_SESSION_LIMIT", 1000))

    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
