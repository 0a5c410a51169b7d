"""Services for the security system."""

from .interfaces import (
    StateStoreInterface,
    CatClassifierInterface,
    CatDetectorInterface,
    StatusListener
)
from .exceptions import (
    SecurityError,
    ConfigurationError,
    UntrackedSensorError,
    CatClassifierError,
    ListenerFailure,
    ListenerNotificationError
)
from .error_handler import ErrorHandler, ErrorSeverity, ErrorRecord
from .security_service import SecurityService
from .state_store import InMemoryStateStore
from .image_service import RandomCatClassifier, DetectionCatClassifier
from .listeners import LoggingStatusListener, RecordingStatusListener

__all__ = [
    'StateStoreInterface',
    'CatClassifierInterface',
    'CatDetectorInterface',
    'StatusListener',
    'SecurityError',
    'ConfigurationError',
    'UntrackedSensorError',
    'CatClassifierError',
    'ListenerFailure',
    'ListenerNotificationError',
    'ErrorHandler',
    'ErrorSeverity',
    'ErrorRecord',
    'SecurityService',
    'InMemoryStateStore',
    'RandomCatClassifier',
    'DetectionCatClassifier',
    'LoggingStatusListener',
    'RecordingStatusListener'
]
