import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE
LOG_LEVEL = Config.LOG_LEVEL

DEFAULT_FACE_THRESHOLD = Config.DEFAULT_FACE_THRESHOLD
FACE_TRAINING_MARGIN = Config.FACE_TRAINING_MARGIN
FACE_MIN_THRESHOLD = Config.FACE_MIN_THRESHOLD

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
