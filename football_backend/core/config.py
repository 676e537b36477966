import os

from dotenv import load_dotenv

load_dotenv()

# =====================================
# Global configuration for the football backend
# =====================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# TEST_MODE:
# When True, development conveniences are enabled.
# Example uses:
#   - Seed demo teams, players and a fixture on startup
#   - Verbose SQL echo unless SQL_ECHO overrides it
TEST_MODE = _env_bool("TEST_MODE", False)

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'football.db')}")
SQL_ECHO = _env_bool("SQL_ECHO", False)

# --- Tokens (HS256) ---
JWT_SECRET = os.getenv("JWT_SECRET", "change-me-in-production")
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))
JWT_ISSUER = os.getenv("JWT_ISSUER", "football-backend")

# --- Default admin (ensured on startup) ---
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@football.local")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Pagination ---
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
