"""Development entry point: ``python app.py`` or ``flask --app app run``."""
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src" / "geo_attendance"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from geo_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
