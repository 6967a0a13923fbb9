"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Jakarta"

EARTH_RADIUS_METERS = 6_371_000

# Arrivals up to this many minutes before the shift start are accepted.
EARLY_CHECKIN_BUFFER_MINUTES = 60

FACE_DESCRIPTOR_LENGTH = 128
FACE_MAX_DISTANCE = 1.0
DEFAULT_FACE_THRESHOLD = 80.0
DEFAULT_FACE_TRAINING_MARGIN = 10.0
DEFAULT_FACE_MIN_THRESHOLD = 60.0

SETTING_GPS_RADIUS = "gps_accuracy_radius"
SETTING_FACE_THRESHOLD = "face_recognition_threshold"

DEFAULT_HISTORY_LIMIT = 100
MAX_HISTORY_LIMIT = 1000
