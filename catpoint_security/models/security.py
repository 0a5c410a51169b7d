"""Security state models: arming status, alarm status and sensors."""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class ArmingStatus(Enum):
    """Whether the system is disarmed or armed."""
    DISARMED = "Disarmed"
    ARMED_HOME = "Armed - At Home"
    ARMED_AWAY = "Armed - Away"

    @property
    def description(self) -> str:
        return self.value

    @property
    def is_armed(self) -> bool:
        return self is not ArmingStatus.DISARMED


class AlarmStatus(Enum):
    """Current severity of the alarm."""
    NO_ALARM = "Cool and Good"
    PENDING_ALARM = "I'm in Danger..."
    ALARM = "Awooga!"

    @property
    def description(self) -> str:
        return self.value


class SensorType(Enum):
    """Kinds of binary sensors the system monitors."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


@dataclass(eq=False)
class Sensor:
    """A binary sensor tracked by the state store.

    Identity is the generated ``sensor_id``: two sensors with the same name
    and type are still distinct. Sensors sort by name, then id.
    """
    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.sensor_id == other.sensor_id

    def __hash__(self) -> int:
        return hash(self.sensor_id)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return (self.name, str(self.sensor_id)) < (other.name, str(other.sensor_id))
