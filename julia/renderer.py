"""Rendering primitives for Julia set frames."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np
import tensorflow as tf

from .palette import blue_palette, gray_palette

PLANE_SPAN = 3.0
PLANE_ORIGIN = -1.5


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of a Julia set."""

    width: int
    height: int
    constant: complex
    max_iterations: int = 2000
    escape_radius: float = 2.0

    @property
    def scale_x(self) -> np.float32:
        return np.float32(PLANE_SPAN) / np.float32(self.width)

    @property
    def scale_y(self) -> np.float32:
        return np.float32(PLANE_SPAN) / np.float32(self.height)


@dataclass(frozen=True)
class RenderResult:
    """Iteration field of a render and the two buffers colorized from it."""

    iterations: np.ndarray
    blue: np.ndarray
    gray: np.ndarray


def map_pixel(params: RenderParameters, x: int, y: int) -> np.complex64:
    """Map pixel ``(x, y)`` to its point on the complex plane."""

    real = np.float32(x) * params.scale_x + np.float32(PLANE_ORIGIN)
    imag = np.float32(y) * params.scale_y + np.float32(PLANE_ORIGIN)
    return np.complex64(complex(real, imag))


def plane_axes(params: RenderParameters) -> tuple[np.ndarray, np.ndarray]:
    """Return the real coordinate of every column and the imaginary coordinate of every row."""

    origin = np.float32(PLANE_ORIGIN)
    real_axis = np.arange(params.width, dtype=np.float32) * params.scale_x + origin
    imag_axis = np.arange(params.height, dtype=np.float32) * params.scale_y + origin
    return real_axis, imag_axis


def escape_count(z0: complex, c: complex, max_iterations: int, escape_radius: float) -> int:
    """Count the steps of ``z <- z*z + c`` taken before ``|z|`` reaches ``escape_radius``.

    The count is capped at ``max_iterations``; a start point already outside the
    radius yields 0.
    """

    zr = np.float32(np.real(z0))
    zi = np.float32(np.imag(z0))
    cr = np.float32(np.real(c))
    ci = np.float32(np.imag(c))
    radius_sq = _radius_sq(escape_radius)
    two = np.float32(2.0)

    i = 0
    # z may overflow to inf or nan on the step that escapes
    with np.errstate(over="ignore", invalid="ignore"):
        while i < max_iterations and _norm_sq(zr, zi) < radius_sq:
            zr, zi = zr * zr - zi * zi + cr, two * zr * zi + ci
            i += 1
    return i


def _radius_sq(escape_radius: float) -> np.float64:
    radius = np.float64(np.float32(escape_radius))
    return radius * radius


def _norm_sq(zr: np.float32, zi: np.float32) -> np.float64:
    """Squared magnitude of a float32 point, taken in float64 so it cannot overflow."""

    zr = np.float64(zr)
    zi = np.float64(zi)
    return zr * zr + zi * zi


def _tf_norm_sq(zr: tf.Tensor, zi: tf.Tensor) -> tf.Tensor:
    zr = tf.cast(zr, tf.float64)
    zi = tf.cast(zi, tf.float64)
    return zr * zr + zi * zi


@tf.function
def _julia_step(
    zr: tf.Tensor,
    zi: tf.Tensor,
    ns: tf.Tensor,
    active: tf.Tensor,
    cr: tf.Tensor,
    ci: tf.Tensor,
    radius_sq: tf.Tensor,
) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
    """Perform a single Julia iteration for points that have not escaped."""

    zr_new = zr * zr - zi * zi + cr
    zi_new = tf.constant(2.0, dtype=tf.float32) * zr * zi + ci
    zr = tf.where(active, zr_new, zr)
    zi = tf.where(active, zi_new, zi)
    ns = ns + tf.cast(active, tf.int32)
    new_active = tf.logical_and(active, _tf_norm_sq(zr, zi) < radius_sq)
    return zr, zi, ns, new_active


@tf.function
def _julia_run(
    zr: tf.Tensor,
    zi: tf.Tensor,
    cr: tf.Tensor,
    ci: tf.Tensor,
    radius_sq: tf.Tensor,
    max_iterations: tf.Tensor,
) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
    """Iterate the Julia recurrence using a TensorFlow while loop."""

    max_iterations = tf.cast(max_iterations, tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    ns = tf.zeros_like(zr, tf.int32)
    active = _tf_norm_sq(zr, zi) < radius_sq

    def cond(i, zr, zi, ns, active):
        return tf.logical_and(tf.less(i, max_iterations), tf.reduce_any(active))

    def body(i, zr, zi, ns, active):
        zr, zi, ns, active = _julia_step(zr, zi, ns, active, cr, ci, radius_sq)
        return i + 1, zr, zi, ns, active

    return tf.while_loop(cond, body, (i, zr, zi, ns, active))


def _render_band(
    params: RenderParameters,
    real_axis: np.ndarray,
    imag_band: np.ndarray,
    device: Optional[str],
) -> np.ndarray:
    """Compute the iteration counts of the rows whose imaginary coordinates are ``imag_band``."""

    with tf.device(device if device is not None else "/CPU:0"):
        X, Y = tf.meshgrid(
            tf.convert_to_tensor(real_axis, dtype=tf.float32),
            tf.convert_to_tensor(imag_band, dtype=tf.float32),
        )
        cr = tf.constant(np.float32(params.constant.real), dtype=tf.float32)
        ci = tf.constant(np.float32(params.constant.imag), dtype=tf.float32)
        radius_sq = tf.constant(_radius_sq(params.escape_radius), dtype=tf.float64)
        max_iterations = tf.constant(params.max_iterations, dtype=tf.int32)

        _, _, _, ns, _ = _julia_run(X, Y, cr, ci, radius_sq, max_iterations)

    return ns.numpy().astype(np.uint32)


def render_counts(params: RenderParameters, *, device: Optional[str] = None, workers: int = 1) -> np.ndarray:
    """Compute the escape count of every pixel as a ``(height, width)`` array.

    Rows are split into ``workers`` contiguous bands rendered concurrently; each
    band fills only its own slice of the result.
    """

    real_axis, imag_axis = plane_axes(params)
    counts = np.empty((params.height, params.width), dtype=np.uint32)
    workers = max(1, min(int(workers), params.height))
    bands = np.array_split(np.arange(params.height), workers)

    def fill(rows: np.ndarray) -> None:
        start, stop = int(rows[0]), int(rows[-1]) + 1
        counts[start:stop] = _render_band(params, real_axis, imag_axis[start:stop], device)

    if workers == 1:
        fill(bands[0])
        return counts

    with ThreadPoolExecutor(max_workers=workers) as executor:
        for future in [executor.submit(fill, rows) for rows in bands]:
            future.result()
    return counts


def render_frame(params: RenderParameters, *, device: Optional[str] = None, workers: int = 1) -> RenderResult:
    """Render a Julia frame into its blue and grayscale buffers."""

    iterations = render_counts(params, device=device, workers=workers)
    return RenderResult(
        iterations=iterations,
        blue=blue_palette(iterations),
        gray=gray_palette(iterations),
    )
