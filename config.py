"""
Configuration Management - MongoDB Version
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable"""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 't', 'y', 'yes')


def get_int_env(key: str, default: int = 0) -> int:
    """Get integer from environment variable"""
    try:
        return int(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


# ============== MONGODB CONFIGURATION ==============
MONGODB_URI = os.getenv("MONGODB_URI") or os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "people_crud")
PEOPLE_COLLECTION = os.getenv("PEOPLE_COLLECTION", "people")
MONGODB_POOL_SIZE = get_int_env("MONGODB_POOL_SIZE", 50)
MONGODB_MIN_POOL_SIZE = get_int_env("MONGODB_MIN_POOL_SIZE", 10)
MONGODB_MAX_IDLE_TIME = get_int_env("MONGODB_MAX_IDLE_TIME", 30000)  # ms
MONGODB_CONNECT_TIMEOUT = get_int_env("MONGODB_CONNECT_TIMEOUT", 5000)  # ms
MONGODB_SERVER_SELECTION_TIMEOUT = get_int_env("MONGODB_SERVER_SELECTION_TIMEOUT", 5000)  # ms

# ============== LOGGING CONFIGURATION ==============
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_TO_FILE = get_bool_env("LOG_TO_FILE", True)


# ============== VALIDATION ==============
def collect_config_errors(uri: str, min_pool: int, max_pool: int) -> List[str]:
    """Return every problem found in the connection settings"""
    errors = []

    if not uri:
        errors.append("MONGODB_URI is required")
    elif not uri.startswith(("mongodb://", "mongodb+srv://")):
        errors.append("MONGODB_URI must start with mongodb:// or mongodb+srv://")

    if min_pool > max_pool:
        errors.append("MONGODB_MIN_POOL_SIZE cannot exceed MONGODB_POOL_SIZE")

    return errors


def validate_config():
    """Validate critical configuration"""
    errors = collect_config_errors(MONGODB_URI, MONGODB_MIN_POOL_SIZE, MONGODB_POOL_SIZE)

    if errors:
        raise ValueError("\n".join(errors))


# Validate on import
validate_config()
