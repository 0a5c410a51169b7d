"""In-memory state store implementation."""

import copy
from typing import Dict, Iterable, Set
from uuid import UUID

from ..models.security import AlarmStatus, ArmingStatus, Sensor
from ..logging_config import get_logger
from .exceptions import UntrackedSensorError
from .interfaces import StateStoreInterface

logger = get_logger("state_store")


class InMemoryStateStore(StateStoreInterface):
    """Non-persistent store keyed by sensor id.

    Writes are last-write-wins. ``get_sensors`` returns a new set on each
    call, so callers may iterate it while the store changes.
    """

    def __init__(self, arming_status: ArmingStatus = ArmingStatus.DISARMED,
                 alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
                 sensors: Iterable[Sensor] = ()):
        self._arming_status = arming_status
        self._alarm_status = alarm_status
        self._sensors: Dict[UUID, Sensor] = {}
        for sensor in sensors:
            self.add_sensor(sensor)

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def get_sensor(self, sensor: Sensor) -> Sensor:
        """Return the tracked instance equal to ``sensor``."""
        try:
            return self._sensors[sensor.sensor_id]
        except KeyError:
            raise UntrackedSensorError(sensor) from None

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.sensor_id] = sensor
        logger.debug(f"Sensor added: {sensor.name} ({sensor.sensor_type.name})")

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.sensor_id, None) is None:
            raise UntrackedSensorError(sensor)
        logger.debug(f"Sensor removed: {sensor.name}")

    def update_sensor(self, sensor: Sensor) -> None:
        if sensor.sensor_id not in self._sensors:
            raise UntrackedSensorError(sensor)
        self._sensors[sensor.sensor_id] = sensor

    def snapshot(self) -> Dict[str, object]:
        """Deep copy of the current state, for diagnostics."""
        return {
            "arming_status": self._arming_status,
            "alarm_status": self._alarm_status,
            "sensors": sorted(copy.deepcopy(list(self._sensors.values())))
        }
