import os
from datetime import timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _database_url():
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("DB_HOST")
    name = os.getenv("DB_NAME")
    if not host or not name:
        return None

    port = os.getenv("DB_PORT", "5432")
    user = os.getenv("DB_USER", "")
    password = os.getenv("DB_PASSWORD", "")
    credentials = f"{user}:{password}@" if user else ""
    return f"postgresql://{credentials}{host}:{port}/{name}"


DATABASE_URL = _database_url()

if not DATABASE_URL:
    raise ValueError("DATABASE_URL (or DB_HOST and DB_NAME) environment variable is not set")

DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

SECRET_KEY = os.getenv("BETTER_AUTH_SECRET")

if not SECRET_KEY:
    raise ValueError("BETTER_AUTH_SECRET environment variable is not set")

JWT_ALGORITHM = "HS256"

# CORS configuration
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]


def resolve_timezone(name):
    """
    Look up a timezone by IANA name

    Raises:
        ValueError: If the name is not a known timezone
    """
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"REPORTS_TIMEZONE is not a known timezone: {name}")


# Calendar dates in reports are computed in this timezone
REPORTS_TIMEZONE = resolve_timezone(os.getenv("REPORTS_TIMEZONE", "UTC"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
