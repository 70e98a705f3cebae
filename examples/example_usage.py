"""Ví dụ: dùng service layer trực tiếp (không qua CLI, không chờ, không ghi log).

Sign in and print the id of the currently open attendance record, if any.
Handy for checking credentials before wiring up the scheduled job.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.auto_attendance.auto_attendance.container import build_container
from src.auto_attendance.auto_attendance.core.settings import AppConfig


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(config=AppConfig.from_settings(settings))
    try:
        token = container.auth_service.authenticate()
        found = container.status_resolver.resolve_open_attendance_id(token)
        print(found.value if found else "no open attendance record")
    finally:
        container.close()


if __name__ == "__main__":
    main()
