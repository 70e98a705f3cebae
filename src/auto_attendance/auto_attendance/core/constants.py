"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HTTP_TIMEOUT_SECONDS = 10

# (min, max) minutes of random delay before submitting.
DEFAULT_CHECK_IN_WINDOW = (0, 14)  # 09:00 - 09:14
DEFAULT_CHECK_OUT_WINDOW = (0, 15)  # 18:45 - 19:00

DEFAULT_LOG_DIR = "logs"
LOG_FILE_PREFIX = "attendance-"

DEFAULT_MEDIUM = "WEBSITE"

ACCEPT_LANGUAGE = "en-PK,en-US;q=0.9,en;q=0.8,ur;q=0.7"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36"
)
SEC_CH_UA = '"Not(A:Brand";v="8", "Chromium";v="144", "Google Chrome";v="144"'
SEC_CH_UA_PLATFORM = '"Windows"'
