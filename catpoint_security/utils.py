"""Utility functions for the security system."""

import os
from datetime import datetime

import cv2
import numpy as np

from .services.exceptions import CatClassifierError


def load_image(image_path: str) -> np.ndarray:
    """Read an image file into a BGR numpy array."""
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Image not found: {image_path}")

    image = cv2.imread(image_path, cv2.IMREAD_COLOR)
    if image is None:
        raise CatClassifierError(f"Could not decode image: {image_path}")
    return image


def format_timestamp(dt: datetime) -> str:
    """Format datetime for consistent display."""
    return dt.strftime("%Y-%m-%d %H:%M:%S")
