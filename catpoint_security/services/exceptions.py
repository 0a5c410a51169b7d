"""Exception hierarchy for the security system."""

from dataclasses import dataclass
from typing import Any, List


class SecurityError(Exception):
    """Base exception for all security system errors."""


class ConfigurationError(SecurityError):
    """Invalid or unknown configuration values."""


class UntrackedSensorError(SecurityError):
    """A sensor was used before being added to the state store."""

    def __init__(self, sensor: Any):
        self.sensor = sensor
        name = getattr(sensor, "name", sensor)
        super().__init__(f"Sensor is not tracked by the state store: {name}")


class CatClassifierError(SecurityError):
    """The cat classifier could not evaluate an image."""


@dataclass
class ListenerFailure:
    """A single failed listener callback."""
    listener: Any
    callback: str
    error: Exception


class ListenerNotificationError(SecurityError):
    """One or more status listeners raised while being notified.

    Every listener is still notified; the failures are collected and
    reported together once the operation has finished.
    """

    def __init__(self, failures: List[ListenerFailure]):
        self.failures = list(failures)
        summary = ", ".join(
            f"{type(f.listener).__name__}.{f.callback}: {f.error!r}" for f in self.failures
        )
        super().__init__(f"{len(self.failures)} listener callback(s) failed: {summary}")
