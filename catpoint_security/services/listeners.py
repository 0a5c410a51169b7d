"""Ready-made status listeners."""

from typing import Any, List, Tuple

from ..models.security import AlarmStatus
from ..logging_config import get_logger
from .interfaces import StatusListener

logger = get_logger("listeners")


class LoggingStatusListener(StatusListener):
    """Writes every status notification to the log."""

    def alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        logger.info(f"Alarm status: {alarm_status.name} ({alarm_status.description})")

    def cat_detected(self, cat_detected: bool) -> None:
        if cat_detected:
            logger.info("DANGER - CAT DETECTED")
        else:
            logger.info("Camera clear - no cat detected")

    def sensor_status_changed(self) -> None:
        logger.info("Sensor status changed")


class RecordingStatusListener(StatusListener):
    """Keeps every notification in arrival order."""

    def __init__(self):
        self.events: List[Tuple[str, Any]] = []

    def alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        self.events.append(("alarm_status_changed", alarm_status))

    def cat_detected(self, cat_detected: bool) -> None:
        self.events.append(("cat_detected", cat_detected))

    def sensor_status_changed(self) -> None:
        self.events.append(("sensor_status_changed", None))

    @property
    def alarm_statuses(self) -> List[AlarmStatus]:
        return [value for name, value in self.events if name == "alarm_status_changed"]

    def clear(self) -> None:
        self.events.clear()
