"""Persist rendered buffers as raster images."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import PIL.Image

from .renderer import RenderResult

BLUE_STEM = "fractal-blue"
GRAY_STEM = "fractal-white"


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def normalize_format(image_format: str | None) -> str:
    image_format = (image_format or "png").lower().lstrip(".")
    return image_format or "png"


def write_single_image(buffer: np.ndarray, output_path: Path, image_format: str) -> None:
    """Write an RGB ``buffer`` to ``output_path`` using the provided format."""

    pil_format = _pil_format_name(image_format)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image = PIL.Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
    image.save(str(output_path), format=pil_format)


def write_render(result: RenderResult, output_dir: Path, image_format: str = "png") -> tuple[Path, Path]:
    """Write the blue and grayscale buffers of ``result`` into ``output_dir``."""

    image_format = normalize_format(image_format)
    output_dir = Path(output_dir).expanduser()
    blue_path = output_dir / f"{BLUE_STEM}.{image_format}"
    gray_path = output_dir / f"{GRAY_STEM}.{image_format}"
    write_single_image(result.blue, blue_path, image_format)
    write_single_image(result.gray, gray_path, image_format)
    return blue_path, gray_path
