"""
test_palette.py
"""
import numpy as np
import pytest

from julia import banding, blue_palette, gray_palette


@pytest.mark.parametrize('count', [0, 1, 5, 63, 64, 127, 2000, 2**32 - 1])
def test_palettes_are_periodic(count):
    assert tuple(blue_palette(count)) == tuple(blue_palette(count + 64))
    assert tuple(gray_palette(count)) == tuple(gray_palette(count + 64))


@pytest.mark.parametrize('count', [0, 3, 63, 64, 65, 2000])
def test_channels_derive_from_the_same_band(count):
    blue = blue_palette(count)
    gray = gray_palette(count)
    assert blue[0] == gray[0]
    assert blue[2] == 255
    assert gray[0] == gray[1] == gray[2]


def test_banding_values():
    assert banding(0) == 0
    assert banding(1) == 4
    assert banding(63) == 252
    assert banding(64) == 0
    assert banding(2000) == (2000 % 64) * 4


def test_palettes_over_arrays():
    counts = np.arange(130, dtype=np.uint32).reshape(10, 13)
    blue = blue_palette(counts)
    gray = gray_palette(counts)
    assert blue.shape == (10, 13, 3)
    assert gray.dtype == np.uint8
    np.testing.assert_array_equal(blue[..., 0], (counts % 64) * 4)
    np.testing.assert_array_equal(blue[..., 2], 255)
    np.testing.assert_array_equal(gray[..., 2], gray[..., 0])
