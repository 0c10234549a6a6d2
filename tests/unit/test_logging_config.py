"""
Unit tests for logging setup.
"""

import logging

import pytest
from skill_injection.logging_config import setup_logging, setup_logging_from_env

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler changes so other tests see default logging"""
    package_logger = logging.getLogger("skill_injection")
    yield
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Test console and file handlers"""

    def test_console_and_file(self, tmp_path):
        """Test a timestamped session file is created next to the base path"""
        session_log = setup_logging(str(tmp_path / "logs" / "skills.log"))

        assert session_log is not None
        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("skills_")
        assert len(logging.getLogger("skill_injection").handlers) == 2

        logging.getLogger("skill_injection.selector").debug("selector debug line")
        for handler in logging.getLogger("skill_injection").handlers:
            handler.flush()
        assert "selector debug line" in session_log.read_text(encoding="utf-8")

    def test_console_only(self):
        """Test file logging can be disabled"""
        assert setup_logging(None) is None
        assert len(logging.getLogger("skill_injection").handlers) == 1

    def test_reconfigure_does_not_duplicate(self, tmp_path):
        """Test repeated setup replaces handlers"""
        setup_logging(None)
        setup_logging(None)
        assert len(logging.getLogger("skill_injection").handlers) == 1

    def test_old_session_logs_pruned(self, tmp_path):
        """Test only the newest session files are kept"""
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        for i in range(8):
            (log_dir / f"skills_2024010{i}_000000.log").write_text("old")

        setup_logging(str(log_dir / "skills.log"))

        # 4 old files survive plus the new session file
        assert len(list(log_dir.glob("skills_*.log"))) == 5

    def test_from_env(self, monkeypatch):
        """Test LOG_LEVEL and SKILLS_LOG_FILE"""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("SKILLS_LOG_FILE", "")

        assert setup_logging_from_env() is None
        handler = logging.getLogger("skill_injection").handlers[0]
        assert handler.level == logging.WARNING
