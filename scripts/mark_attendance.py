"""Run one attendance action from a source checkout.

Ví dụ (cron, giờ địa phương):
    0 9 * * 1-5   cd /opt/auto-attendance && python scripts/mark_attendance.py check-in
    45 18 * * 1-5 cd /opt/auto-attendance && python scripts/mark_attendance.py check-out
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.auto_attendance.auto_attendance.main import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
