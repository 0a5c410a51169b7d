"""Data models for the security system."""

from .security import ArmingStatus, AlarmStatus, SensorType, Sensor
from .detection import BoundingBox, Detection
from .config import SecurityConfig

__all__ = ['ArmingStatus', 'AlarmStatus', 'SensorType', 'Sensor', 'BoundingBox', 'Detection', 'SecurityConfig']
