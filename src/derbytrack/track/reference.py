"""Reference-point generation from canvas size and regulation offsets."""

from __future__ import annotations

import math
from dataclasses import dataclass

from derbytrack.track.models import (
    DEFAULT_TRACK_WIDTH,
    Point,
    ReferencePoints,
    TrackDimensions,
    TrackScale,
)
from derbytrack.utils.exceptions import TrackGeometryError

TRACK_ASPECT_RATIO = 100.0 / 66.0


@dataclass(frozen=True)
class CanvasSize:
    """Display and buffer size for a track canvas.

    Args:
        style_width: Layout width [css px].
        style_height: Layout height [css px].
        buffer_width: Backing buffer width [device px].
        buffer_height: Backing buffer height [device px].
    """

    style_width: float
    style_height: float
    buffer_width: float
    buffer_height: float


def _validate_canvas(canvas_width: float, canvas_height: float) -> None:
    """Validate canvas dimensions.

    Args:
        canvas_width: Canvas width [px].
        canvas_height: Canvas height [px].

    Raises:
        derbytrack.utils.exceptions.TrackGeometryError: If either dimension
            is not a positive finite number.
    """
    for name, value in (("canvas_width", canvas_width), ("canvas_height", canvas_height)):
        if not math.isfinite(value) or value <= 0.0:
            msg = f"{name} must be positive and finite, got {value!r}"
            raise TrackGeometryError(msg)


def build_track_scale(
    canvas_width: float,
    track_width: float = DEFAULT_TRACK_WIDTH,
) -> TrackScale:
    """Derive the pixel-per-meter scale from the canvas width.

    Args:
        canvas_width: Canvas width [px].
        track_width: Real-world width the canvas spans [m].

    Returns:
        Scale mapping meters to pixels.

    Raises:
        derbytrack.utils.exceptions.TrackGeometryError: If the resulting
            scale is not strictly positive.
    """
    if track_width <= 0.0:
        msg = "track_width must be positive"
        raise TrackGeometryError(msg)
    return TrackScale(pixels_per_meter=canvas_width / track_width)


def initialize_points(
    canvas_width: float,
    canvas_height: float,
    dimensions: TrackDimensions | None = None,
    revision: int = 0,
) -> ReferencePoints:
    """Compute all twelve reference points for one canvas size.

    The whole set is rebuilt on every call; callers replace their previous
    set rather than patching it.

    Args:
        canvas_width: Canvas width [px].
        canvas_height: Canvas height [px].
        dimensions: Regulation offsets. Defaults to :class:`TrackDimensions`.
        revision: Revision number stored on the result.

    Returns:
        Reference points in pixel space.

    Raises:
        derbytrack.utils.exceptions.TrackGeometryError: If the canvas size
            is invalid.
        derbytrack.utils.exceptions.ConfigurationError: If ``dimensions``
            fail validation.
    """
    _validate_canvas(canvas_width, canvas_height)
    dims = dimensions or TrackDimensions()
    dims.validate()

    scale = build_track_scale(canvas_width, dims.track_width)
    s = scale.pixels_per_meter
    cx = canvas_width / 2.0
    cy = canvas_height / 2.0
    right = cx + dims.center_point_offset * s
    left = cx - dims.center_point_offset * s

    return ReferencePoints(
        A=Point(right, cy),
        B=Point(left, cy),
        C=Point(right, cy - dims.inner_vertical_offset * s),
        D=Point(right, cy + dims.inner_vertical_offset * s),
        E=Point(left, cy - dims.inner_vertical_offset * s),
        F=Point(left, cy + dims.inner_vertical_offset * s),
        G=Point(right, cy - dims.turn_center_offset * s),
        H=Point(left, cy + dims.turn_center_offset * s),
        I=Point(right, cy - dims.outer_vertical_offset_wide * s),
        J=Point(right, cy + dims.outer_vertical_offset_narrow * s),
        K=Point(left, cy - dims.outer_vertical_offset_narrow * s),
        L=Point(left, cy + dims.outer_vertical_offset_wide * s),
        scale=scale,
        revision=revision,
    )


def canvas_size(
    container_width: float,
    container_height: float,
    pixel_ratio: float = 1.0,
) -> CanvasSize:
    """Fit the track aspect ratio into a container.

    Args:
        container_width: Available width [css px].
        container_height: Available height [css px].
        pixel_ratio: Device pixel ratio applied to the backing buffer.

    Returns:
        Largest canvas with a 100:66 aspect ratio that fits the container.

    Raises:
        derbytrack.utils.exceptions.TrackGeometryError: If any input is not
            strictly positive.
    """
    _validate_canvas(container_width, container_height)
    if pixel_ratio <= 0.0:
        msg = "pixel_ratio must be positive"
        raise TrackGeometryError(msg)

    style_width = container_width
    style_height = container_width / TRACK_ASPECT_RATIO
    if style_height > container_height:
        style_height = container_height
        style_width = container_height * TRACK_ASPECT_RATIO

    return CanvasSize(
        style_width=style_width,
        style_height=style_height,
        buffer_width=style_width * pixel_ratio,
        buffer_height=style_height * pixel_ratio,
    )
