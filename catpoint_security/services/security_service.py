"""Security service: decides alarm status and notifies status listeners."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Set

from ..models.config import SecurityConfig
from ..models.security import AlarmStatus, ArmingStatus, Sensor
from ..logging_config import get_logger, log_with_context
from .error_decorators import log_execution_time
from .error_handler import ErrorHandler, ErrorSeverity
from .exceptions import (
    CatClassifierError,
    ListenerFailure,
    ListenerNotificationError,
    UntrackedSensorError,
)
from .interfaces import CatClassifierInterface, StateStoreInterface, StatusListener

logger = get_logger("security_service")


class SecurityService:
    """Receives sensor, arming and camera events and decides the alarm status.

    All state lives in the injected state store except the result of the
    most recent image classification, which is kept here so a later arming
    change can act on it.

    The service is synchronous and has no internal locking; hosts calling it
    from several threads must serialize access. Listeners are held in a set,
    so the order in which they are notified is unspecified. A listener that
    raises does not stop the broadcast: failures are collected and raised as
    one ``ListenerNotificationError`` when the public call finishes.
    """

    def __init__(self, state_store: StateStoreInterface,
                 cat_classifier: CatClassifierInterface,
                 config: Optional[SecurityConfig] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self._state_store = state_store
        self._cat_classifier = cat_classifier
        self._config = config or SecurityConfig()
        self.error_handler = error_handler or ErrorHandler()

        self._status_listeners: Set[StatusListener] = set()
        self._cat_spotted = False

        # Listener failures collected during the outermost public call
        self._operation_depth = 0
        self._listener_failures: List[ListenerFailure] = []

    @property
    def cat_spotted(self) -> bool:
        """Whether the most recently processed image contained a cat."""
        return self._cat_spotted

    @property
    def confidence_threshold(self) -> float:
        return self._config.cat_confidence_threshold

    # Listener management

    def add_status_listener(self, status_listener: StatusListener) -> None:
        self._status_listeners.add(status_listener)

    def remove_status_listener(self, status_listener: StatusListener) -> None:
        self._status_listeners.discard(status_listener)

    # State transitions

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Set the arming status, updating the alarm and resetting sensors.

        Arming resets every sensor to inactive through
        :meth:`change_sensor_activation`. Arming at home while the last image
        showed a cat raises the alarm.
        """
        with self._operation():
            logger.info(f"Arming status change requested: {arming_status.name}")
            if arming_status == ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                if self._cat_spotted and arming_status == ArmingStatus.ARMED_HOME:
                    self.set_alarm_status(AlarmStatus.ALARM)

                # Iterate a sorted copy; the store may change underneath
                for sensor in sorted(self.get_sensors()):
                    self.change_sensor_activation(sensor, False)

            self._state_store.set_arming_status(arming_status)
            self._notify("sensor_status_changed")

    def change_sensor_activation(self, sensor: Sensor, active: bool) -> None:
        """Change a tracked sensor's activation and update the alarm if needed.

        Raises:
            UntrackedSensorError: if the sensor was never added to the store.
        """
        with self._operation():
            tracked = self._tracked_sensor(sensor)

            if self.get_alarm_status() != AlarmStatus.ALARM:
                if active:
                    self._handle_sensor_activated()
                elif tracked.active:
                    self._handle_sensor_deactivated()

            logger.debug(f"Sensor {sensor.name} active={active}")
            sensor.active = active
            self._state_store.update_sensor(sensor)

    @log_execution_time("security_service")
    def process_image(self, current_camera_image: Any) -> None:
        """Classify a camera image and update the alarm status.

        Raises:
            CatClassifierError: if the classifier fails; no state changes.
        """
        with self._operation():
            try:
                cat = bool(self._cat_classifier.contains_cat(current_camera_image,
                                                             self.confidence_threshold))
            except Exception as e:
                self.error_handler.handle_error("cat_classifier", e, ErrorSeverity.HIGH)
                logger.error(f"Cat classification failed: {e}")
                if isinstance(e, CatClassifierError):
                    raise
                raise CatClassifierError(f"Cat classification failed: {e}") from e

            self._cat_detected(cat)

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Write the alarm status to the store and notify every listener."""
        with self._operation():
            log_with_context(logger, logging.INFO, f"Alarm status set to {alarm_status.name}",
                             {"arming_status": self.get_arming_status().name})
            self._state_store.set_alarm_status(alarm_status)
            self._notify("alarm_status_changed", alarm_status)

    def _cat_detected(self, cat: bool) -> None:
        self._cat_spotted = cat
        if cat and self.get_arming_status() == ArmingStatus.ARMED_HOME:
            self.set_alarm_status(AlarmStatus.ALARM)
        else:
            # Also clears a sensor-driven alarm
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        self._notify("cat_detected", cat)

    def _handle_sensor_activated(self) -> None:
        if self.get_arming_status() == ArmingStatus.DISARMED:
            return

        alarm_status = self.get_alarm_status()
        if alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self) -> None:
        if self.get_alarm_status() == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def _tracked_sensor(self, sensor: Sensor) -> Sensor:
        for tracked in self.get_sensors():
            if tracked == sensor:
                return tracked
        raise UntrackedSensorError(sensor)

    # Notification

    @contextmanager
    def _operation(self) -> Iterator[None]:
        """Scope a public call; raise collected listener failures at the outermost exit."""
        self._operation_depth += 1
        try:
            yield
        finally:
            self._operation_depth -= 1
            failures: List[ListenerFailure] = []
            if self._operation_depth == 0:
                failures, self._listener_failures = self._listener_failures, []
        if failures:
            raise ListenerNotificationError(failures)

    def _notify(self, callback_name: str, *args: Any) -> None:
        for status_listener in list(self._status_listeners):
            try:
                getattr(status_listener, callback_name)(*args)
            except Exception as e:
                logger.error(f"Status listener {type(status_listener).__name__}.{callback_name} failed: {e}",
                             exc_info=True)
                self.error_handler.handle_error("status_listener", e, ErrorSeverity.MEDIUM)
                self._listener_failures.append(ListenerFailure(status_listener, callback_name, e))

    # Store passthroughs

    def get_alarm_status(self) -> AlarmStatus:
        return self._state_store.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self._state_store.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self._state_store.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        self._state_store.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self._state_store.remove_sensor(sensor)
