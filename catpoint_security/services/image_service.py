"""Cat classifier implementations."""

from typing import Any, Optional

import numpy as np

from ..logging_config import get_logger
from .exceptions import CatClassifierError
from .interfaces import CatClassifierInterface, CatDetectorInterface

logger = get_logger("image_service")


def validate_frame(image: Any) -> np.ndarray:
    """Return ``image`` if it is a usable frame, else raise CatClassifierError."""
    if image is None:
        raise CatClassifierError("No image provided")
    if not isinstance(image, np.ndarray):
        raise CatClassifierError(f"Expected a numpy array, got {type(image).__name__}")
    if image.ndim not in (2, 3) or image.size == 0:
        raise CatClassifierError(f"Malformed image with shape {image.shape}")
    return image


class RandomCatClassifier(CatClassifierInterface):
    """Fake classifier that reports a cat at random.

    Useful for demos and for exercising listeners without a real model. The
    threshold and the image content are ignored.
    """

    def __init__(self, probability: float = 0.5, seed: Optional[int] = None):
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be between 0 and 1")
        self.probability = probability
        self._rng = np.random.default_rng(seed)

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        result = bool(self._rng.random() < self.probability)
        logger.debug(f"Random classification: cat={result}")
        return result


class DetectionCatClassifier(CatClassifierInterface):
    """Adapts a bounding-box detector to the yes/no classifier interface.

    A cat is reported when any box has a confidence (0-1) that, as a
    percentage, reaches the requested threshold.
    """

    def __init__(self, detector: CatDetectorInterface):
        self.detector = detector

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        frame = validate_frame(image)

        try:
            detections = self.detector.detect_cats(frame)
        except CatClassifierError:
            raise
        except Exception as e:
            raise CatClassifierError(f"Detector failed: {e}") from e

        best = max((d.max_confidence_percent() for d in detections), default=0.0)
        result = best >= confidence_threshold
        logger.debug(f"Best cat confidence {best:.1f}% (threshold {confidence_threshold:.1f}%): cat={result}")
        return result
