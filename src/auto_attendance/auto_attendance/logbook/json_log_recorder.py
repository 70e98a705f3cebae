from __future__ import annotations

import json
import logging
from datetime import date, timezone
from pathlib import Path
from typing import Any

from ..attendance.model import LogEntry
from ..core.constants import LOG_FILE_PREFIX
from .repository import LogRecorder

logger = logging.getLogger(__name__)


class JsonFileLogRecorder(LogRecorder):
    """One JSON array file per calendar day (UTC), rewritten on every append.

    Note: Not safe with concurrent writers; runs are expected to be serialised
    by whatever schedules them.
    """

    def __init__(self, log_dir: Path):
        self._log_dir = Path(log_dir)

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    def path_for(self, day: date) -> Path:
        return self._log_dir / f"{LOG_FILE_PREFIX}{day.isoformat()}.json"

    def record(self, entry: LogEntry) -> None:
        self._log_dir.mkdir(parents=True, exist_ok=True)
        day = entry.timestamp.astimezone(timezone.utc).date() if entry.timestamp.tzinfo else entry.timestamp.date()
        path = self.path_for(day)

        entries = self._load(path)
        entries.append(entry.to_dict())
        path.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Appended %s entry to %s (%d total)", entry.status.value, path, len(entries))

    def read_day(self, day: date) -> list[dict[str, Any]]:
        return self._load(self.path_for(day))

    def _load(self, path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.warning("Log file %s is unreadable (%s); starting a fresh log, prior entries are dropped", path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Log file %s does not hold a JSON array; starting a fresh log", path)
            return []
        return data
