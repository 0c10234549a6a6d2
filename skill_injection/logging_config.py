"""Logging setup for hosts embedding the skill injector: console plus optional rotating file"""
import glob
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

KEEP_SESSION_LOGS = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def _prune_session_logs(log_path: Path) -> None:
    """Delete all but the newest session logs (one slot is left for the new session)"""
    pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing = sorted(glob.glob(pattern), reverse=True)  # Newest first
    for old_log in existing[KEEP_SESSION_LOGS - 1:]:
        try:
            Path(old_log).unlink()
        except OSError:
            pass  # Another process may hold or have removed it


def setup_logging(
    log_file: Optional[str] = "logs/skill-injection.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG
) -> Optional[Path]:
    """
    Configure the skill_injection logger.

    - Console: brief messages on stdout (INFO by default)
    - File: detailed messages (DEBUG by default), one timestamped file per
      session, rotated at 10MB, last 5 session files kept

    Only the "skill_injection" logger is touched so the host's own logging
    setup is left alone.

    Args:
        log_file: Base path of the log file, or None for console only
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file, or None when file logging is off
    """
    package_logger = logging.getLogger("skill_injection")
    package_logger.setLevel(min(console_level, file_level) if log_file else console_level)
    package_logger.propagate = False

    # Remove existing handlers to avoid duplicates on re-configuration
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    package_logger.addHandler(console_handler)

    session_log = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _prune_session_logs(log_path)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=MAX_LOG_BYTES,
            backupCount=KEEP_SESSION_LOGS,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        package_logger.addHandler(file_handler)

    package_logger.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log or 'disabled'}"
    )
    return session_log


def setup_logging_from_env() -> Optional[Path]:
    """
    Configure logging from LOG_LEVEL and SKILLS_LOG_FILE.

    SKILLS_LOG_FILE="" disables the file handler.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    console_level = getattr(logging, level_name, logging.INFO)
    log_file = os.getenv("SKILLS_LOG_FILE", "logs/skill-injection.log") or None
    return setup_logging(log_file=log_file, console_level=console_level)
