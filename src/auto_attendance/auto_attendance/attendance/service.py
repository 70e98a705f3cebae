from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..auth.service import AuthService
from ..common.datetime_utils import now_local, now_utc
from ..core.enums import AttendanceAction, RunOutcome
from ..core.exceptions import ResolutionError, SubmissionError
from ..core.settings import AppConfig
from ..logbook.repository import LogRecorder
from ..scheduling.gate import SchedulerGate
from .model import AttendanceId, LogEntry, SubmitResult
from .status_resolver import StatusResolver
from .submitter import AttendanceSubmitter

logger = logging.getLogger(__name__)


class AttendanceService:
    """Runs one attendance action end to end.

    Gate -> wait -> sign in -> (resolve open record) -> submit -> log.
    Failures are raised as ``DomainError`` subclasses; the caller decides the
    exit code.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        gate: SchedulerGate,
        auth: AuthService,
        resolver: StatusResolver,
        submitter: AttendanceSubmitter,
        recorder: LogRecorder,
        clock: Callable[[], datetime] = now_local,
        utc_clock: Callable[[], datetime] = now_utc,
    ):
        self._config = config
        self._gate = gate
        self._auth = auth
        self._resolver = resolver
        self._submitter = submitter
        self._recorder = recorder
        self._clock = clock
        self._utc_clock = utc_clock

    def run(self, action: AttendanceAction) -> RunOutcome:
        now = self._clock()
        if not self._gate.is_eligible_day(now):
            logger.info("Today is not a weekday (Monday-Friday). Skipping attendance.")
            return RunOutcome.SKIPPED

        self._gate.wait(self._config.window_for(action), purpose=action.value)

        logger.info("=" * 60)
        logger.info("Starting %s process at %s", action.value.upper(), self._clock().strftime("%Y-%m-%d %H:%M:%S"))
        logger.info("=" * 60)

        token = self._auth.authenticate()

        attendance_id: Optional[AttendanceId] = None
        if action is AttendanceAction.CHECK_OUT:
            found = self._resolver.resolve_open_attendance_id(token)
            if found is None:
                raise ResolutionError(
                    "Cannot check-out: no active attendance record found",
                    detail="Make sure you have checked in first!",
                )
            attendance_id = found.value

        result = self._submitter.submit(action, token, attendance_id)
        self._record(action, result)

        if not result.ok:
            raise SubmissionError(f"{action.value} request failed", result=result, detail=result.message)
        return RunOutcome.COMPLETED

    def _record(self, action: AttendanceAction, result: SubmitResult) -> None:
        entry = LogEntry.from_result(action, result, timestamp=self._utc_clock())
        self._recorder.record(entry)
