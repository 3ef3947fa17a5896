# renderer/ppm.py
import logging
import os
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)


def format_ppm(pixels: np.ndarray) -> str:
    """
    Serialize an (height, width, 3) array of 8-bit RGB values as plain-text PPM (P3).

    Pixels are written row by row, top to bottom, one "r g b" triplet per line.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected an array of shape (height, width, 3), got {pixels.shape}")

    height, width, _ = pixels.shape
    lines = [f"P3\n{width} {height}\n255"]
    for r, g, b in pixels.reshape(-1, 3):
        lines.append(f"{int(r)} {int(g)} {int(b)}")
    return "\n".join(lines) + "\n"


def write_ppm(path: Union[str, os.PathLike], pixels: np.ndarray) -> None:
    """Write the image to path in one go. OSError propagates to the caller."""
    data = format_ppm(pixels)
    with open(path, "w", encoding="ascii") as f:
        f.write(data)
    logger.info("Written to: %s", path)
