from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()

TIMEZONE = "Asia/Jakarta"
LOG_LEVEL = "WARNING"

DEFAULT_FACE_THRESHOLD = 80.0
FACE_TRAINING_MARGIN = 10.0
FACE_MIN_THRESHOLD = 60.0

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
