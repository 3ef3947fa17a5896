# renderer/tone_mapping.py
import math
import numpy as np

from lumen.core.interval import Interval

# Largest value below 1.0 used before scaling, so 1.0 maps to 255 instead of 256.
INTENSITY_MAX = 0.999
INTENSITY = Interval(0.0, INTENSITY_MAX)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 encoding of a single linear channel. Non-positive values map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def encode_image(accumulated: np.ndarray) -> np.ndarray:
    """
    Gamma-correct a linear radiance image and quantize it to 8 bits.

    accumulated is a float array of shape (height, width, 3) holding averaged
    per-pixel colors. Returns a uint8 array of the same shape.
    """
    linear = np.clip(accumulated, 0.0, None)
    mapped = np.sqrt(linear)
    output = (256 * np.clip(mapped, INTENSITY.min, INTENSITY.max)).astype(np.uint8)
    return output


def encode_color(r: float, g: float, b: float):
    """Scalar counterpart of encode_image for a single pixel."""
    return tuple(int(256 * INTENSITY.clamp(linear_to_gamma(c))) for c in (r, g, b))
