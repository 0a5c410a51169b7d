"""Configuration management with JSON file persistence."""

import json
import os
from dataclasses import asdict, fields
from typing import Optional, Dict, Any, Callable, List

from .models.config import SecurityConfig
from .models.security import AlarmStatus, ArmingStatus, Sensor, SensorType
from .config.defaults import DEFAULT_CONFIG, DEFAULT_PATHS, SYSTEM_CONSTANTS, VALID_LOG_LEVELS
from .logging_config import get_logger
from .services.exceptions import ConfigurationError
from .services.state_store import InMemoryStateStore

logger = get_logger("config_manager")


class ConfigManager:
    """Manages security configuration with file persistence and change callbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_PATHS["config_file"]
        self._config: Optional[SecurityConfig] = None
        self._config_change_callbacks: List[Callable[[SecurityConfig], None]] = []

        self.load_config()

    def load_config(self) -> SecurityConfig:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    config_dict = json.load(f)
                self._config = SecurityConfig(**config_dict)
            except (json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}. Using defaults.")
                self._config = SecurityConfig()
        else:
            self._config = SecurityConfig()
            self.save_config()

        return self._config

    def save_config(self) -> None:
        """Save current configuration to file."""
        if self._config is None:
            return

        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.export_config(), f, indent=2)

    def get_config(self) -> SecurityConfig:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values.

        Raises:
            ConfigurationError: for keys that are not configuration fields.
        """
        config = self.get_config()

        known = {f.name for f in fields(SecurityConfig)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key, value in kwargs.items():
            setattr(config, key, value)

        self.save_config()
        self._notify_callbacks()

    def validate_config(self) -> bool:
        """Validate current configuration."""
        if self._config is None:
            return False

        threshold = self._config.cat_confidence_threshold
        if not isinstance(threshold, (int, float)) or not (
                SYSTEM_CONSTANTS["MIN_CONFIDENCE_THRESHOLD"] <= threshold
                <= SYSTEM_CONSTANTS["MAX_CONFIDENCE_THRESHOLD"]):
            return False

        if self._config.initial_arming_status not in ArmingStatus.__members__:
            return False
        if self._config.initial_alarm_status not in AlarmStatus.__members__:
            return False

        if str(self._config.log_level).upper() not in VALID_LOG_LEVELS:
            return False

        for sensor in self._config.sensors:
            if not isinstance(sensor, dict) or not sensor.get("name"):
                return False
            if sensor.get("type") not in SensorType.__members__:
                return False

        return True

    def register_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        """Register a callback invoked after each configuration change."""
        if callback not in self._config_change_callbacks:
            self._config_change_callbacks.append(callback)

    def unregister_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        """Remove a previously registered change callback."""
        if callback in self._config_change_callbacks:
            self._config_change_callbacks.remove(callback)

    def _notify_callbacks(self) -> None:
        for callback in self._config_change_callbacks:
            try:
                callback(self._config)
            except Exception as e:
                logger.error(f"Error in config change callback: {e}", exc_info=True)

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self._config = SecurityConfig(**json.loads(json.dumps(DEFAULT_CONFIG)))
        self.save_config()
        self._notify_callbacks()

    def export_config(self) -> Dict[str, Any]:
        """Export the current configuration as a plain dictionary."""
        return asdict(self.get_config())

    def import_config(self, config_dict: Dict[str, Any]) -> bool:
        """Replace the configuration; the previous one is kept if the new one is invalid."""
        previous = self._config
        try:
            self._config = SecurityConfig(**config_dict)
        except TypeError as e:
            logger.error(f"Error importing config: {e}")
            return False

        if not self.validate_config():
            logger.error("Imported configuration failed validation")
            self._config = previous
            return False

        self.save_config()
        self._notify_callbacks()
        return True

    def build_state_store(self) -> InMemoryStateStore:
        """Create an in-memory store seeded with the configured state and sensors.

        Raises:
            ConfigurationError: if the configuration is invalid.
        """
        if not self.validate_config():
            raise ConfigurationError(f"Invalid configuration in {self.config_path}")

        config = self.get_config()
        sensors = [
            Sensor(name=entry["name"], sensor_type=SensorType[entry["type"]])
            for entry in config.sensors
        ]
        return InMemoryStateStore(
            arming_status=ArmingStatus[config.initial_arming_status],
            alarm_status=AlarmStatus[config.initial_alarm_status],
            sensors=sensors
        )
