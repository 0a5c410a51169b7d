"""
Catpoint Security

Decision core of a home security monitor: turns sensor events, arming
changes and camera cat detections into an alarm status and notifies
status listeners.
"""

__version__ = "1.0.0"
__author__ = "Catpoint Security"

from .config_manager import ConfigManager
from .models import (
    ArmingStatus,
    AlarmStatus,
    SensorType,
    Sensor,
    BoundingBox,
    Detection,
    SecurityConfig
)
from .services import (
    StateStoreInterface,
    CatClassifierInterface,
    CatDetectorInterface,
    StatusListener,
    SecurityError,
    ConfigurationError,
    UntrackedSensorError,
    CatClassifierError,
    ListenerFailure,
    ListenerNotificationError,
    ErrorHandler,
    ErrorSeverity,
    SecurityService,
    InMemoryStateStore,
    RandomCatClassifier,
    DetectionCatClassifier,
    LoggingStatusListener,
    RecordingStatusListener
)

__all__ = [
    # Core
    'SecurityService',
    'ConfigManager',

    # Data models
    'ArmingStatus',
    'AlarmStatus',
    'SensorType',
    'Sensor',
    'BoundingBox',
    'Detection',
    'SecurityConfig',

    # Collaborator interfaces
    'StateStoreInterface',
    'CatClassifierInterface',
    'CatDetectorInterface',
    'StatusListener',

    # Collaborator implementations
    'InMemoryStateStore',
    'RandomCatClassifier',
    'DetectionCatClassifier',
    'LoggingStatusListener',
    'RecordingStatusListener',

    # Errors
    'SecurityError',
    'ConfigurationError',
    'UntrackedSensorError',
    'CatClassifierError',
    'ListenerFailure',
    'ListenerNotificationError',
    'ErrorHandler',
    'ErrorSeverity'
]
