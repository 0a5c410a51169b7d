"""Unit tests for data models."""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.models.detection import BoundingBox, Detection
from catpoint_security.models.security import AlarmStatus, ArmingStatus, Sensor, SensorType


class TestSensor(unittest.TestCase):
    """Test cases for Sensor identity and ordering."""

    def test_identity_uses_sensor_id(self):
        a = Sensor("Door", SensorType.DOOR)
        b = Sensor("Door", SensorType.DOOR)

        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)

    def test_mutating_active_keeps_hash(self):
        sensor = Sensor("Door", SensorType.DOOR)
        sensors = {sensor}

        sensor.active = True

        self.assertIn(sensor, sensors)

    def test_sorts_by_name(self):
        sensors = [Sensor("Window", SensorType.WINDOW), Sensor("Door", SensorType.DOOR),
                   Sensor("Motion", SensorType.MOTION)]

        self.assertEqual([s.name for s in sorted(sensors)], ["Door", "Motion", "Window"])

    def test_defaults_inactive(self):
        self.assertFalse(Sensor("Door", SensorType.DOOR).active)


class TestStatusEnums(unittest.TestCase):
    """Test cases for status enums."""

    def test_descriptions(self):
        self.assertEqual(AlarmStatus.ALARM.description, "Awooga!")
        self.assertEqual(ArmingStatus.ARMED_HOME.description, "Armed - At Home")

    def test_is_armed(self):
        self.assertFalse(ArmingStatus.DISARMED.is_armed)
        self.assertTrue(ArmingStatus.ARMED_HOME.is_armed)
        self.assertTrue(ArmingStatus.ARMED_AWAY.is_armed)


class TestDetection(unittest.TestCase):
    """Test cases for detection models."""

    def test_bounding_box(self):
        box = BoundingBox(x=10, y=10, width=20, height=5, confidence=0.42)

        self.assertEqual(box.area(), 100)
        self.assertAlmostEqual(box.confidence_percent(), 42.0)

    def test_max_confidence(self):
        detection = Detection(frame_width=640, frame_height=480, bounding_boxes=[
            BoundingBox(0, 0, 10, 10, 0.3),
            BoundingBox(5, 5, 10, 10, 0.9)
        ])

        self.assertAlmostEqual(detection.max_confidence_percent(), 90.0)
        self.assertEqual(Detection(640, 480).max_confidence_percent(), 0.0)


if __name__ == '__main__':
    unittest.main()
