"""
test_output.py
"""
import numpy as np
import PIL.Image
import pytest

from julia import RenderParameters, render_frame, write_render, write_single_image


@pytest.fixture
def result():
    params = RenderParameters(width=8, height=6, constant=complex(-0.8, 0.156), max_iterations=40)
    return render_frame(params)


def test_write_render_names_and_contents(result, tmp_path):
    blue_path, gray_path = write_render(result, tmp_path / "out")
    assert blue_path.name == "fractal-blue.png"
    assert gray_path.name == "fractal-white.png"

    with PIL.Image.open(blue_path) as image:
        assert image.size == (8, 6)
        np.testing.assert_array_equal(np.asarray(image), result.blue)
    with PIL.Image.open(gray_path) as image:
        np.testing.assert_array_equal(np.asarray(image), result.gray)


def test_write_render_format_alias(result, tmp_path):
    blue_path, _ = write_render(result, tmp_path, ".TIF")
    assert blue_path.suffix == ".tif"
    with PIL.Image.open(blue_path) as image:
        assert image.format == "TIFF"


def test_unwritable_destination_is_fatal(result, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        write_single_image(result.blue, blocker / "fractal-blue.png", "png")
