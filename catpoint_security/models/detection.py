"""Detection data models consumed by the classifier adapters."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class BoundingBox:
    """Represents a bounding box around a detected object."""
    x: int
    y: int
    width: int
    height: int
    confidence: float  # 0.0 - 1.0

    def area(self) -> int:
        """Calculate the area of the bounding box."""
        return self.width * self.height

    def confidence_percent(self) -> float:
        """Confidence on the 0-100 scale used for classifier thresholds."""
        return self.confidence * 100.0


@dataclass
class Detection:
    """Raw detection result produced by a cat detector for one frame."""
    frame_width: int
    frame_height: int
    bounding_boxes: List[BoundingBox] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    def max_confidence_percent(self) -> float:
        """Highest box confidence in percent, 0.0 when nothing was found."""
        if not self.bounding_boxes:
            return 0.0
        return max(box.confidence_percent() for box in self.bounding_boxes)
