from __future__ import annotations

import random
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import requests

from .api.connection import ApiConfig, ApiConnection
from .attendance.service import AttendanceService
from .attendance.status_resolver import StatusResolver
from .attendance.submitter import AttendanceSubmitter
from .auth.service import AuthService
from .common.datetime_utils import now_local, now_utc
from .core.settings import AppConfig
from .logbook.json_log_recorder import JsonFileLogRecorder
from .scheduling.gate import SchedulerGate


@dataclass(frozen=True)
class Container:
    config: AppConfig
    conn: ApiConnection

    gate: SchedulerGate
    recorder: JsonFileLogRecorder

    auth_service: AuthService
    status_resolver: StatusResolver
    submitter: AttendanceSubmitter
    attendance_service: AttendanceService

    def close(self) -> None:
        self.conn.close()


def build_container(
    *,
    config: AppConfig,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
    rng: Optional[random.Random] = None,
    clock: Callable[[], datetime] = now_local,
    utc_clock: Callable[[], datetime] = now_utc,
) -> Container:
    conn = ApiConnection(
        ApiConfig(base_url=config.base_url, portal_origin=config.portal_origin, timeout=config.http_timeout),
        session=session,
    )

    gate = SchedulerGate(sleep=sleep, rng=rng)
    recorder = JsonFileLogRecorder(config.log_dir)

    auth_service = AuthService(conn, config.credentials)
    status_resolver = StatusResolver(conn, organization_id=config.organization_id, employee_id=config.employee_id)
    submitter = AttendanceSubmitter(
        conn,
        organization_id=config.organization_id,
        employee_id=config.employee_id,
        location=config.location,
        medium=config.medium,
    )
    attendance_service = AttendanceService(
        config,
        gate=gate,
        auth=auth_service,
        resolver=status_resolver,
        submitter=submitter,
        recorder=recorder,
        clock=clock,
        utc_clock=utc_clock,
    )

    return Container(
        config=config,
        conn=conn,
        gate=gate,
        recorder=recorder,
        auth_service=auth_service,
        status_resolver=status_resolver,
        submitter=submitter,
        attendance_service=attendance_service,
    )
