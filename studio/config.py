import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./studio.db")

# Studio local timezone, stored on appointments for display only.
# Conflict checks always compare UTC instants.
STUDIO_TIMEZONE = os.getenv("STUDIO_TIMEZONE", "America/New_York")

# Comma separated list of dashboard origins allowed by CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:3000,http://localhost:5173",
).split(",")
