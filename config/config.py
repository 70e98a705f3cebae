import os


def _window(name: str, default: str) -> tuple[int, int]:
    lo, hi = os.environ.get(name, default).split(",")
    return int(lo), int(hi)


class Config:
    # Thông tin đăng nhập (bắt buộc; để trống thì server sẽ từ chối)
    ATTENDANCE_EMAIL = os.environ.get("ATTENDANCE_EMAIL", "")
    ATTENDANCE_PASSWORD = os.environ.get("ATTENDANCE_PASSWORD", "")

    # Upstream API
    API_BASE_URL = os.environ.get("ATTENDANCE_API_BASE_URL", "https://api.skilledim.com")
    PORTAL_ORIGIN = os.environ.get("ATTENDANCE_PORTAL_ORIGIN", "https://portal.skilledim.com")
    ORGANIZATION_ID = int(os.environ.get("ATTENDANCE_ORGANIZATION_ID", "2"))
    EMPLOYEE_ID = int(os.environ.get("ATTENDANCE_EMPLOYEE_ID", "441"))
    HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", "10"))

    LOCATION = {
        "latitude": 28.0009,
        "longitude": 69.3169,
        "accuracy_meters": 76431,
        "address": None,
    }
    MEDIUM = "WEBSITE"

    # Random delay windows in minutes: "min,max"
    CHECK_IN_WINDOW = _window("CHECK_IN_WINDOW", "0,14")
    CHECK_OUT_WINDOW = _window("CHECK_OUT_WINDOW", "0,15")

    LOG_DIR = os.environ.get("ATTENDANCE_LOG_DIR", "logs")
    LOG_LEVEL = os.environ.get("LOG_LEVEL")  # unset: DEBUG decides
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# Module-level names read by AppConfig.from_settings
ATTENDANCE_EMAIL = Config.ATTENDANCE_EMAIL
ATTENDANCE_PASSWORD = Config.ATTENDANCE_PASSWORD
API_BASE_URL = Config.API_BASE_URL
PORTAL_ORIGIN = Config.PORTAL_ORIGIN
ORGANIZATION_ID = Config.ORGANIZATION_ID
EMPLOYEE_ID = Config.EMPLOYEE_ID
HTTP_TIMEOUT = Config.HTTP_TIMEOUT
LOCATION = dict(Config.LOCATION)
MEDIUM = Config.MEDIUM
CHECK_IN_WINDOW = Config.CHECK_IN_WINDOW
CHECK_OUT_WINDOW = Config.CHECK_OUT_WINDOW
LOG_DIR = Config.LOG_DIR
LOG_LEVEL = Config.LOG_LEVEL
LOG_FORMAT = Config.LOG_FORMAT

DEBUG = bool(int(os.environ.get("DEBUG", "0")))
