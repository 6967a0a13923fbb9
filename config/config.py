import os


class Config:
    """Values shared by every environment; each may be overridden from the environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "geo_attendance")

    # Deployment constant: every local day/time-of-day decision uses this zone.
    TIMEZONE = os.environ.get("TIMEZONE", "Asia/Jakarta")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Used only when the face_recognition_threshold system setting is missing.
    DEFAULT_FACE_THRESHOLD = float(os.environ.get("DEFAULT_FACE_THRESHOLD", "80"))
    FACE_TRAINING_MARGIN = float(os.environ.get("FACE_TRAINING_MARGIN", "10"))
    FACE_MIN_THRESHOLD = float(os.environ.get("FACE_MIN_THRESHOLD", "60"))

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    AUTO_SEED_DB = bool(int(os.environ.get("AUTO_SEED_DB", "0")))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
