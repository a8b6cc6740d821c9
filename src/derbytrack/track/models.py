"""Track model value types: points, scale, regulation dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from derbytrack.utils.constants import METERS_PER_FOOT
from derbytrack.utils.exceptions import ConfigurationError, TrackGeometryError

DEFAULT_TRACK_WIDTH = 35.1
DEFAULT_CENTER_POINT_OFFSET = 5.33
DEFAULT_INNER_VERTICAL_OFFSET = 3.81
DEFAULT_TURN_CENTER_OFFSET = 0.3
DEFAULT_OUTER_VERTICAL_OFFSET_WIDE = 8.38
DEFAULT_OUTER_VERTICAL_OFFSET_NARROW = 7.78

REFERENCE_LABELS = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L")


@dataclass(frozen=True)
class Point:
    """Planar pixel coordinate. ``y`` grows downward, as on a canvas.

    Args:
        x: Horizontal coordinate [px].
        y: Vertical coordinate [px].
    """

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        """Return a point shifted by ``(dx, dy)``.

        Args:
            dx: Horizontal shift [px].
            dy: Vertical shift [px].

        Returns:
            Shifted point.
        """
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class TrackScale:
    """Pixel-per-meter ratio shared by every point of one frame.

    Args:
        pixels_per_meter: Conversion factor from meters to pixels [px/m].
    """

    pixels_per_meter: float

    def __post_init__(self) -> None:
        """Reject non-positive or non-finite scales.

        Raises:
            derbytrack.utils.exceptions.TrackGeometryError: If the scale is
                not a strictly positive finite number.
        """
        if not math.isfinite(self.pixels_per_meter) or self.pixels_per_meter <= 0.0:
            msg = f"pixels_per_meter must be positive and finite, got {self.pixels_per_meter!r}"
            raise TrackGeometryError(msg)

    def to_pixels(self, meters: float) -> float:
        """Convert a real-world length to pixels.

        Args:
            meters: Length [m].

        Returns:
            Length [px].
        """
        return meters * self.pixels_per_meter

    def feet_to_pixels(self, feet: float) -> float:
        """Convert a length in feet to pixels.

        Args:
            feet: Length [ft].

        Returns:
            Length [px].
        """
        return self.to_pixels(feet * METERS_PER_FOOT)

    def to_meters(self, pixels: float) -> float:
        """Convert a pixel length back to meters.

        Args:
            pixels: Length [px].

        Returns:
            Length [m].
        """
        return pixels / self.pixels_per_meter


@dataclass(frozen=True)
class TrackDimensions:
    """Regulation offsets that place the reference points.

    All values are measured from the canvas center in meters. The outer
    boundary uses two vertical offsets because the track is wider at the
    end of each straight than at its start.

    Args:
        track_width: Total drawn track width used to derive the scale [m].
        center_point_offset: Horizontal distance from center to each turn
            center [m].
        inner_vertical_offset: Vertical distance from a turn center to the
            inner boundary straights [m].
        turn_center_offset: Vertical shift of the outer turn centers [m].
        outer_vertical_offset_wide: Outer straight offset at the wide end [m].
        outer_vertical_offset_narrow: Outer straight offset at the narrow
            end [m].
    """

    track_width: float = DEFAULT_TRACK_WIDTH
    center_point_offset: float = DEFAULT_CENTER_POINT_OFFSET
    inner_vertical_offset: float = DEFAULT_INNER_VERTICAL_OFFSET
    turn_center_offset: float = DEFAULT_TURN_CENTER_OFFSET
    outer_vertical_offset_wide: float = DEFAULT_OUTER_VERTICAL_OFFSET_WIDE
    outer_vertical_offset_narrow: float = DEFAULT_OUTER_VERTICAL_OFFSET_NARROW

    def validate(self) -> None:
        """Validate regulation offsets.

        Raises:
            derbytrack.utils.exceptions.ConfigurationError: If an offset is
                non-positive or the outer boundary does not enclose the inner
                boundary.
        """
        for name in (
            "track_width",
            "center_point_offset",
            "inner_vertical_offset",
            "outer_vertical_offset_wide",
            "outer_vertical_offset_narrow",
        ):
            if getattr(self, name) <= 0.0:
                msg = f"{name} must be positive"
                raise ConfigurationError(msg)
        if self.turn_center_offset < 0.0:
            msg = "turn_center_offset must be non-negative"
            raise ConfigurationError(msg)
        if self.outer_vertical_offset_narrow <= self.inner_vertical_offset:
            msg = "outer_vertical_offset_narrow must exceed inner_vertical_offset"
            raise ConfigurationError(msg)
        if self.outer_vertical_offset_wide < self.outer_vertical_offset_narrow:
            msg = "outer_vertical_offset_wide must not be smaller than outer_vertical_offset_narrow"
            raise ConfigurationError(msg)
        if 2.0 * self.center_point_offset >= self.track_width:
            msg = "center_point_offset must leave room for the turns inside track_width"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class ReferencePoints:
    """The twelve labeled points that determine every track curve.

    ``A``/``B`` are the right/left inner turn centers and ``G``/``H`` the
    right/left outer turn centers. ``C``/``D``/``E``/``F`` end the inner
    straights and ``I``/``J``/``K``/``L`` end the outer straights.

    Args:
        A: Right inner turn center.
        B: Left inner turn center.
        C: Inner top straight, right end.
        D: Inner bottom straight, right end.
        E: Inner top straight, left end.
        F: Inner bottom straight, left end.
        G: Right outer turn center.
        H: Left outer turn center.
        I: Outer top straight, right end.
        J: Outer bottom straight, right end.
        K: Outer top straight, left end.
        L: Outer bottom straight, left end.
        scale: Scale the points were computed with.
        revision: Counter incremented on every rebuild.
    """

    A: Point
    B: Point
    C: Point
    D: Point
    E: Point
    F: Point
    G: Point
    H: Point
    I: Point  # noqa: E741
    J: Point
    K: Point
    L: Point
    scale: TrackScale
    revision: int = 0

    def __getitem__(self, label: str) -> Point:
        """Look up a reference point by its label.

        Args:
            label: One of ``A`` through ``L``.

        Returns:
            The labeled point.

        Raises:
            KeyError: If ``label`` is not a reference label.
        """
        if label not in REFERENCE_LABELS:
            raise KeyError(label)
        point: Point = getattr(self, label)
        return point

    def as_dict(self) -> dict[str, Point]:
        """Return the label-to-point mapping.

        Returns:
            Dictionary keyed by reference label in canonical order.
        """
        return {label: self[label] for label in REFERENCE_LABELS}

    @property
    def center(self) -> Point:
        """Track center, midway between the inner turn centers.

        Returns:
            Center point [px].
        """
        return Point(0.5 * (self.A.x + self.B.x), 0.5 * (self.A.y + self.B.y))

    @property
    def inner_radius(self) -> float:
        """Radius of the inner boundary turns [px].

        Returns:
            Distance from ``A`` to the inner straight end ``C``.
        """
        return abs(self.C.y - self.A.y)

    @property
    def outer_radius(self) -> float:
        """Radius of the outer boundary turns [px].

        Returns:
            Distance from ``G`` to the outer straight end ``I``.
        """
        return abs(self.I.y - self.G.y)


class Zone(IntEnum):
    """Track zone identifiers, numbered in skating order."""

    OUTSIDE = 0
    STRAIGHT1 = 1
    TURN1 = 2
    STRAIGHT2 = 3
    TURN2 = 4


ZONE_ORDER = (Zone.STRAIGHT1, Zone.TURN1, Zone.STRAIGHT2, Zone.TURN2)
