"""Default configuration values and constants."""

from typing import Dict, Any

# Default system configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Image classification
    "cat_confidence_threshold": 50.0,

    # Initial state
    "initial_arming_status": "DISARMED",
    "initial_alarm_status": "NO_ALARM",

    # Logging
    "log_level": "INFO",
    "log_dir": None,

    # Preset sensors
    "sensors": []
}

# System constants
SYSTEM_CONSTANTS = {
    "CAT_CONFIDENCE_THRESHOLD": 50.0,  # Percent
    "MIN_CONFIDENCE_THRESHOLD": 0.0,
    "MAX_CONFIDENCE_THRESHOLD": 100.0,
    "LOG_ROTATION_SIZE_MB": 10,
    "LOG_BACKUP_COUNT": 5
}

# File paths and directories
DEFAULT_PATHS = {
    "config_file": "security_config.json",
    "logs_dir": "logs"
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
