"""
Configuration settings for the Growth Valley web tier
Values are read once at import time from the environment (.env supported)
"""
import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Get mode (development or production)
MODE = os.getenv("MODE", "development")

SITE_NAME = os.getenv("SITE_NAME", "Growth Valley")


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


def _get_timeout(key: str) -> Optional[float]:
    raw = os.getenv(key)
    if not raw:
        return None
    return float(raw)


# Upstream backend API
# NEXT_PUBLIC_API_URL is still honoured so existing deployments keep working
API_URL = get_env_var(
    "API_URL", os.getenv("NEXT_PUBLIC_API_URL", "http://localhost:3001")
).rstrip("/")

# Seconds; unset means outbound calls wait for the upstream indefinitely
API_TIMEOUT = _get_timeout("API_TIMEOUT")

# Admin session
ADMIN_TOKEN_COOKIE = os.getenv("ADMIN_TOKEN_COOKIE", "adminToken")
ADMIN_LOGIN_PATH = os.getenv("ADMIN_LOGIN_PATH", "/admin/login")

# CORS Configuration
# Include both localhost and 127.0.0.1 as browsers treat them as different origins
_default_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", ",".join(_default_origins)).split(",")
    if origin.strip()
]

CORS_ALLOW_CREDENTIALS = True
