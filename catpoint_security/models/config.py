"""Configuration data models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class SecurityConfig:
    """Security system configuration settings."""
    # Image classification
    cat_confidence_threshold: float = 50.0  # percent, 0-100

    # Initial state for a fresh in-memory store
    initial_arming_status: str = "DISARMED"
    initial_alarm_status: str = "NO_ALARM"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Preset sensors, e.g. {"name": "Front door", "type": "DOOR"}
    sensors: List[Dict[str, str]] = field(default_factory=list)
