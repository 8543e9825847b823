"""Escape-time palettes shared by the blue and grayscale outputs."""

from __future__ import annotations

import numpy as np

BAND_PERIOD = 64
BAND_STEP = 4


def banding(count) -> np.ndarray:
    """Map escape counts onto one of 64 repeating intensity bands."""

    # mod before scaling keeps the value below 256
    bands = np.asarray(count, dtype=np.uint64) % BAND_PERIOD
    return (bands * BAND_STEP).astype(np.uint8)


def blue_palette(count) -> np.ndarray:
    """Color counts as ``(a, a, 255)``; the last axis holds the channels."""

    a = banding(count)
    return np.stack((a, a, np.full_like(a, 255)), axis=-1)


def gray_palette(count) -> np.ndarray:
    """Color counts as ``(b, b, b)``; the last axis holds the channels."""

    b = banding(count)
    return np.stack((b, b, b), axis=-1)
