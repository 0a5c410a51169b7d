"""Unit tests for logging configuration."""

import logging
import shutil
import tempfile
import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security import logging_config
from catpoint_security.logging_config import (
    PACKAGE_LOGGER_NAME,
    LoggingManager,
    StructuredFormatter,
    get_logger,
    setup_logging
)


class TestStructuredFormatter(unittest.TestCase):
    """Test cases for StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord("catpoint_security.test", logging.INFO, __file__, 1,
                                   "alarm raised", (), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_includes_context(self):
        output = StructuredFormatter().format(self._record(context={"arming_status": "ARMED_HOME"}))

        self.assertIn("alarm raised", output)
        self.assertIn("Context: arming_status=ARMED_HOME", output)

    def test_context_can_be_suppressed(self):
        output = StructuredFormatter(include_context=False).format(self._record(context={"a": 1}))

        self.assertNotIn("Context", output)


class TestLoggingManager(unittest.TestCase):
    """Test cases for LoggingManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.previous_manager = logging_config.logging_manager

    def tearDown(self):
        """Clean up test fixtures."""
        logging_config.logging_manager.shutdown()
        logging_config.logging_manager = self.previous_manager
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.NOTSET)
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_construction_has_no_side_effects(self):
        log_dir = os.path.join(self.test_dir, "logs")
        manager = LoggingManager(log_dir)

        self.assertFalse(os.path.exists(log_dir))
        self.assertEqual(manager.handlers, [])

    def test_component_loggers_are_namespaced_and_cached(self):
        logger = get_logger("security_service")

        self.assertEqual(logger.name, "catpoint_security.security_service")
        self.assertIs(get_logger("security_service"), logger)

    def test_setup_logging_writes_files(self):
        log_dir = os.path.join(self.test_dir, "logs")
        manager = setup_logging("DEBUG", log_dir)

        logger = get_logger("test_component")
        logger.error("sensor exploded")
        for handler in manager.handlers:
            handler.flush()

        self.assertEqual(len(manager.handlers), 3)
        with open(os.path.join(log_dir, "errors.log")) as f:
            self.assertIn("sensor exploded", f.read())
        stats = manager.get_log_stats()
        self.assertEqual(stats["log_level"], "DEBUG")
        self.assertIn("security.log", stats["log_files"])

    def test_setup_logging_replaces_handlers(self):
        setup_logging("INFO")
        manager = setup_logging("WARNING")

        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        own = [h for h in package_logger.handlers if h in manager.handlers]
        self.assertEqual(len(own), 1)
        self.assertEqual(package_logger.level, logging.WARNING)

    def test_log_with_context(self):
        logger = get_logger("context_test")

        with self.assertLogs(logger, level=logging.INFO) as logs:
            logging_config.log_with_context(logger, logging.INFO, "armed", {"mode": "home"})

        self.assertEqual(logs.records[0].context, {"mode": "home"})


if __name__ == '__main__':
    unittest.main()
