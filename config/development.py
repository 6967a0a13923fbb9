import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEFAULT_FACE_THRESHOLD = Config.DEFAULT_FACE_THRESHOLD
FACE_TRAINING_MARGIN = Config.FACE_TRAINING_MARGIN
FACE_MIN_THRESHOLD = Config.FACE_MIN_THRESHOLD

# Development mode exposes internal error detail in API responses.
DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = Config.AUTO_SEED_DB
