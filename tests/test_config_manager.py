"""Unit tests for configuration manager."""

import unittest
import os
import json
import shutil
import tempfile
from unittest.mock import Mock
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.config_manager import ConfigManager
from catpoint_security.models.config import SecurityConfig
from catpoint_security.models.security import AlarmStatus, ArmingStatus, SensorType
from catpoint_security.services.exceptions import ConfigurationError


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, "test_config.json")
        self.config_manager = ConfigManager(self.config_path)

    def tearDown(self):
        """Clean up test fixtures."""
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)

    def test_initialization_writes_defaults(self):
        self.assertTrue(os.path.exists(self.config_path))
        config = self.config_manager.get_config()
        self.assertEqual(config.cat_confidence_threshold, 50.0)
        self.assertEqual(config.initial_arming_status, "DISARMED")
        self.assertTrue(self.config_manager.validate_config())

    def test_load_save_config(self):
        self.config_manager.update_config(cat_confidence_threshold=75.0)

        new_manager = ConfigManager(self.config_path)
        self.assertEqual(new_manager.get_config().cat_confidence_threshold, 75.0)

    def test_invalid_json_falls_back_to_defaults(self):
        with open(self.config_path, 'w') as f:
            f.write("{not json")

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config(), SecurityConfig())

    def test_unknown_keys_in_file_fall_back_to_defaults(self):
        with open(self.config_path, 'w') as f:
            json.dump({"cat_confidence_threshold": 60.0, "bogus": 1}, f)

        manager = ConfigManager(self.config_path)

        self.assertEqual(manager.get_config().cat_confidence_threshold, 50.0)

    def test_update_unknown_key_raises(self):
        with self.assertRaises(ConfigurationError):
            self.config_manager.update_config(volume=11)

    def test_validate_config(self):
        cases = {
            "cat_confidence_threshold": 150.0,
            "initial_arming_status": "ARMED_SOMEWHERE",
            "initial_alarm_status": "PANIC",
            "log_level": "CHATTY",
            "sensors": [{"name": "Door", "type": "TELEPORTER"}]
        }
        for key, value in cases.items():
            with self.subTest(key=key):
                self.config_manager.reset_to_defaults()
                self.config_manager.update_config(**{key: value})
                self.assertFalse(self.config_manager.validate_config())

    def test_change_callbacks(self):
        callback = Mock()
        self.config_manager.register_change_callback(callback)
        self.config_manager.register_change_callback(callback)

        self.config_manager.update_config(log_level="DEBUG")
        callback.assert_called_once_with(self.config_manager.get_config())

        self.config_manager.unregister_change_callback(callback)
        self.config_manager.update_config(log_level="INFO")
        callback.assert_called_once()

    def test_failing_callback_does_not_block_update(self):
        self.config_manager.register_change_callback(Mock(side_effect=RuntimeError("boom")))

        self.config_manager.update_config(cat_confidence_threshold=55.0)

        self.assertEqual(self.config_manager.get_config().cat_confidence_threshold, 55.0)

    def test_export_import(self):
        exported = self.config_manager.export_config()
        exported["cat_confidence_threshold"] = 65.0

        self.assertTrue(self.config_manager.import_config(exported))
        self.assertEqual(self.config_manager.get_config().cat_confidence_threshold, 65.0)

    def test_import_invalid_keeps_previous(self):
        self.assertFalse(self.config_manager.import_config({"cat_confidence_threshold": -1.0}))
        self.assertFalse(self.config_manager.import_config({"nonsense": True}))
        self.assertEqual(self.config_manager.get_config().cat_confidence_threshold, 50.0)

    def test_build_state_store(self):
        self.config_manager.update_config(
            initial_arming_status="ARMED_AWAY",
            initial_alarm_status="PENDING_ALARM",
            sensors=[{"name": "Front door", "type": "DOOR"}, {"name": "Hall", "type": "MOTION"}]
        )

        store = self.config_manager.build_state_store()

        self.assertEqual(store.get_arming_status(), ArmingStatus.ARMED_AWAY)
        self.assertEqual(store.get_alarm_status(), AlarmStatus.PENDING_ALARM)
        sensors = sorted(store.get_sensors())
        self.assertEqual([(s.name, s.sensor_type) for s in sensors],
                         [("Front door", SensorType.DOOR), ("Hall", SensorType.MOTION)])
        self.assertTrue(all(not s.active for s in sensors))

    def test_build_state_store_rejects_invalid_config(self):
        self.config_manager.update_config(initial_arming_status="NOPE")

        with self.assertRaises(ConfigurationError):
            self.config_manager.build_state_store()


if __name__ == '__main__':
    unittest.main()
