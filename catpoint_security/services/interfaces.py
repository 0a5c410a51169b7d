"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Any, List, Set

import numpy as np

from ..models.detection import Detection
from ..models.security import AlarmStatus, ArmingStatus, Sensor

NDArray = np.ndarray


class StateStoreInterface(ABC):
    """Interface for the store holding arming, alarm and sensor state."""

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get the current alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Persist a new alarm status."""
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get the current arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Persist a new arming status."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all tracked sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Start tracking a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Stop tracking a sensor."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist a tracked sensor's mutated state."""
        pass


class CatClassifierInterface(ABC):
    """Interface for deciding whether an image shows a cat."""

    @abstractmethod
    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """Return True if a cat is found with at least the given confidence (percent)."""
        pass


class CatDetectorInterface(ABC):
    """Interface for bounding-box cat detectors."""

    @abstractmethod
    def detect_cats(self, frame: NDArray) -> List[Detection]:
        """Detect cats in frame."""
        pass


class StatusListener:
    """Observer of security status changes.

    Callbacks run synchronously on the caller's stack. A listener must not
    call back into the service that is notifying it. The defaults do
    nothing, so observers override only what they need.
    """

    def alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        """Called after the alarm status was written to the store."""

    def cat_detected(self, cat_detected: bool) -> None:
        """Called after an image was classified and the alarm updated."""

    def sensor_status_changed(self) -> None:
        """Called once after the arming status changed and sensors were reset."""
