from __future__ import annotations

import argparse
import importlib
import logging
import sys
from types import ModuleType
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.service import AttendanceService
from .common.logging_setup import DEFAULT_FORMAT, configure_logging
from .container import Container, build_container
from .core.enums import AttendanceAction, RunOutcome
from .core.exceptions import DomainError, InvalidArgumentError
from .core.settings import AppConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

EXAMPLES = """examples:
  auto-attendance check-in   # Mark attendance for the day
  auto-attendance check-out  # Mark check-out for the day
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auto-attendance",
        usage="%(prog)s [check-in|check-out]",
        description="Mark daily attendance after a random delay inside the configured window.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("action", nargs="?", metavar="check-in|check-out", help="attendance action to perform")
    return parser


def parse_action(argv: Optional[Sequence[str]], parser: Optional[argparse.ArgumentParser] = None) -> AttendanceAction:
    parser = parser or build_parser()
    args, extra = parser.parse_known_args(argv)
    if extra:
        raise InvalidArgumentError(f"Unexpected arguments: {' '.join(extra)}")
    return AttendanceAction.parse(args.action)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def log_level_for(settings) -> str:
    """Explicit LOG_LEVEL wins; otherwise DEBUG settings log at DEBUG."""
    level = getattr(settings, "LOG_LEVEL", None)
    if level:
        return str(level)
    return "DEBUG" if getattr(settings, "DEBUG", False) else "INFO"


def run_action(service: AttendanceService, action: AttendanceAction) -> int:
    """The only place that turns run outcomes into process exit codes."""
    try:
        outcome = service.run(action)
    except DomainError as exc:
        logger.error("Process failed: %s", exc)
        if exc.detail:
            logger.error("   %s", exc.detail)
        return EXIT_FAILURE

    if outcome is RunOutcome.COMPLETED:
        logger.info("Process completed successfully!")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None, *, container: Optional[Container] = None) -> int:
    parser = build_parser()
    try:
        action = parse_action(argv, parser)
    except InvalidArgumentError as exc:
        print(str(exc), file=sys.stderr)
        parser.print_help(sys.stdout)
        return EXIT_FAILURE

    owns_container = container is None
    if container is None:
        settings = load_settings()
        configure_logging(log_level_for(settings), getattr(settings, "LOG_FORMAT", DEFAULT_FORMAT))
        container = build_container(config=AppConfig.from_settings(settings))

    try:
        return run_action(container.attendance_service, action)
    finally:
        if owns_container:
            container.close()


if __name__ == "__main__":
    sys.exit(main())
