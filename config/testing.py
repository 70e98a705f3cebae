import os

from .config import *  # noqa: F401,F403

DEBUG = False

API_BASE_URL = os.getenv("ATTENDANCE_API_BASE_URL", "http://api.test")
PORTAL_ORIGIN = "http://portal.test"

# No waiting under test.
CHECK_IN_WINDOW = (0, 0)
CHECK_OUT_WINDOW = (0, 0)

LOG_DIR = os.getenv("ATTENDANCE_LOG_DIR", "logs-test")
