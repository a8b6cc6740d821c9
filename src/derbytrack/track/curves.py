"""Line/arc curve primitives with flattening and containment tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property

import numpy as np
import numpy.typing as npt
from matplotlib.path import Path as MplPath

from derbytrack.track.models import Point
from derbytrack.utils.constants import DEFAULT_ARC_RESOLUTION, SMALL_EPS
from derbytrack.utils.exceptions import TrackGeometryError

FloatArray = npt.NDArray[np.float64]
BoolArray = npt.NDArray[np.bool_]

TWO_PI = 2.0 * math.pi


def distance(first: Point, second: Point) -> float:
    """Euclidean distance between two points.

    Args:
        first: First point.
        second: Second point.

    Returns:
        Distance [px].
    """
    return math.hypot(first.x - second.x, first.y - second.y)


def normalize_angle(angle: float) -> float:
    """Wrap an angle into ``[0, 2*pi)``.

    Args:
        angle: Angle [rad].

    Returns:
        Equivalent angle in ``[0, 2*pi)`` [rad].
    """
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    return 0.0 if wrapped >= TWO_PI else wrapped


def is_angle_between(angle: float, start: float, end: float) -> bool:
    """Check whether ``angle`` lies on the increasing sweep from start to end.

    Args:
        angle: Angle to test [rad].
        start: Sweep start angle [rad].
        end: Sweep end angle [rad].

    Returns:
        ``True`` when ``angle`` is reached by rotating from ``start`` towards
        increasing angles before passing ``end``.
    """
    return normalize_angle(angle - start) <= normalize_angle(end - start)


@dataclass(frozen=True)
class LineSegment:
    """Straight segment between two points.

    Args:
        start: Segment start.
        end: Segment end.
    """

    start: Point
    end: Point

    @property
    def length(self) -> float:
        """Segment length [px].

        Returns:
            Distance between the end points.
        """
        return distance(self.start, self.end)

    def sample(self, arc_resolution: int = DEFAULT_ARC_RESOLUTION) -> FloatArray:
        """Return the segment vertices.

        Args:
            arc_resolution: Unused for straight segments; accepted so all
                primitives share one sampling signature.

        Returns:
            ``(2, 2)`` array of start and end coordinates.
        """
        del arc_resolution
        return np.array(
            [[self.start.x, self.start.y], [self.end.x, self.end.y]],
            dtype=np.float64,
        )

    def distance_to(self, point: Point) -> float:
        """Shortest distance from a point to the segment.

        Args:
            point: Query point.

        Returns:
            Distance [px].
        """
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        length_sq = dx * dx + dy * dy
        if length_sq <= SMALL_EPS:
            return distance(point, self.start)
        t = ((point.x - self.start.x) * dx + (point.y - self.start.y) * dy) / length_sq
        t = min(1.0, max(0.0, t))
        return distance(point, Point(self.start.x + t * dx, self.start.y + t * dy))


@dataclass(frozen=True)
class ArcSegment:
    """Circular arc swept from ``start_angle`` by a signed ``sweep``.

    Angles follow ``atan2(dy, dx)`` in pixel space, so a positive sweep turns
    clockwise on screen.

    Args:
        center: Arc center.
        radius: Arc radius [px].
        start_angle: Angle of the first arc point [rad].
        sweep: Signed angular extent [rad]; magnitude at most ``2*pi``.
    """

    center: Point
    radius: float
    start_angle: float
    sweep: float

    def __post_init__(self) -> None:
        """Validate radius and sweep.

        Raises:
            derbytrack.utils.exceptions.TrackGeometryError: If the radius is
                negative or either value is non-finite.
        """
        if not math.isfinite(self.radius) or self.radius < 0.0:
            msg = f"arc radius must be non-negative and finite, got {self.radius!r}"
            raise TrackGeometryError(msg)
        if not math.isfinite(self.sweep) or not math.isfinite(self.start_angle):
            msg = "arc angles must be finite"
            raise TrackGeometryError(msg)

    @property
    def end_angle(self) -> float:
        """Angle of the last arc point [rad].

        Returns:
            ``start_angle + sweep``.
        """
        return self.start_angle + self.sweep

    @property
    def start(self) -> Point:
        """First arc point.

        Returns:
            Point at ``start_angle``.
        """
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point:
        """Last arc point.

        Returns:
            Point at ``end_angle``.
        """
        return self.point_at(self.end_angle)

    @property
    def length(self) -> float:
        """Arc length [px].

        Returns:
            ``radius * |sweep|``.
        """
        return self.radius * abs(self.sweep)

    def point_at(self, angle: float) -> Point:
        """Point on the arc's circle at a given angle.

        Args:
            angle: Polar angle around ``center`` [rad].

        Returns:
            Point at ``radius`` from the center.
        """
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def covers_angle(self, angle: float) -> bool:
        """Check whether a polar angle falls inside the swept range.

        Args:
            angle: Polar angle around ``center`` [rad].

        Returns:
            ``True`` if the arc passes through ``angle``.
        """
        if abs(self.sweep) >= TWO_PI - SMALL_EPS:
            return True
        if self.sweep >= 0.0:
            return is_angle_between(angle, self.start_angle, self.end_angle)
        return is_angle_between(angle, self.end_angle, self.start_angle)

    def sample(self, arc_resolution: int = DEFAULT_ARC_RESOLUTION) -> FloatArray:
        """Flatten the arc into a polyline.

        Args:
            arc_resolution: Number of chords per half circle.

        Returns:
            ``(n, 2)`` array of arc vertices, start and end included.
        """
        count = max(2, math.ceil(abs(self.sweep) / math.pi * arc_resolution) + 1)
        angles = np.linspace(self.start_angle, self.end_angle, count, dtype=np.float64)
        xs = self.center.x + self.radius * np.cos(angles)
        ys = self.center.y + self.radius * np.sin(angles)
        return np.column_stack([xs, ys])

    def distance_to(self, point: Point) -> float:
        """Shortest distance from a point to the arc.

        Args:
            point: Query point.

        Returns:
            Distance [px].
        """
        to_center = distance(point, self.center)
        if to_center <= SMALL_EPS:
            return self.radius
        angle = math.atan2(point.y - self.center.y, point.x - self.center.x)
        if self.covers_angle(angle):
            return abs(to_center - self.radius)
        return min(distance(point, self.start), distance(point, self.end))


Segment = LineSegment | ArcSegment


def line(start: Point, end: Point) -> LineSegment:
    """Build a straight segment.

    Args:
        start: Segment start.
        end: Segment end.

    Returns:
        Line segment from ``start`` to ``end``.
    """
    return LineSegment(start=start, end=end)


def arc_between(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    anticlockwise: bool = False,
) -> ArcSegment:
    """Build an arc with canvas ``arc()`` sweep semantics.

    Without ``anticlockwise`` the arc turns towards increasing angles (screen
    clockwise) until it reaches ``end_angle``; with it, towards decreasing
    angles. A requested turn of a full circle or more yields a full circle.

    Args:
        center: Arc center.
        radius: Arc radius [px].
        start_angle: Start angle [rad].
        end_angle: End angle [rad].
        anticlockwise: Sweep towards decreasing angles.

    Returns:
        Arc segment with the resolved signed sweep.
    """
    if anticlockwise:
        delta = start_angle - end_angle
        sweep = -TWO_PI if delta >= TWO_PI else -normalize_angle(delta)
    else:
        delta = end_angle - start_angle
        sweep = TWO_PI if delta >= TWO_PI else normalize_angle(delta)
    return ArcSegment(center=center, radius=radius, start_angle=start_angle, sweep=sweep)


@dataclass(frozen=True)
class Curve:
    """Ordered sequence of line and arc primitives.

    A closed curve bounds a region; containment uses the flattened polyline
    with ``matplotlib.path.Path``. Renderers can draw ``segments`` directly
    or use ``vertices``.

    Args:
        segments: Primitives in drawing order. Gaps between consecutive
            primitives are bridged by straight lines.
        closed: Whether the last vertex connects back to the first.
        arc_resolution: Chords per half circle used when flattening arcs.
    """

    segments: tuple[Segment, ...]
    closed: bool = True
    arc_resolution: int = DEFAULT_ARC_RESOLUTION

    def __post_init__(self) -> None:
        """Validate the primitive sequence.

        Raises:
            derbytrack.utils.exceptions.TrackGeometryError: If the curve has
                no segments or a non-positive arc resolution.
        """
        if not self.segments:
            msg = "curve must contain at least one segment"
            raise TrackGeometryError(msg)
        if self.arc_resolution < 1:
            msg = "arc_resolution must be at least 1"
            raise TrackGeometryError(msg)

    @cached_property
    def vertices(self) -> FloatArray:
        """Flattened polyline of the curve.

        Returns:
            ``(n, 2)`` vertex array without consecutive duplicates.
        """
        stacked = np.concatenate(
            [segment.sample(self.arc_resolution) for segment in self.segments],
            axis=0,
        )
        step = np.hypot(*np.diff(stacked, axis=0).T)
        keep = np.concatenate([[True], step > SMALL_EPS])
        return np.asarray(stacked[keep], dtype=np.float64)

    @cached_property
    def path(self) -> MplPath:
        """Matplotlib path over the flattened vertices.

        Returns:
            Path used for point-in-region tests.
        """
        return MplPath(self.vertices)

    @property
    def start(self) -> Point:
        """First point of the curve.

        Returns:
            Start of the first segment.
        """
        return self.segments[0].start

    @property
    def end(self) -> Point:
        """Last point of the curve before any closing line.

        Returns:
            End of the last segment.
        """
        return self.segments[-1].end

    @property
    def length(self) -> float:
        """Total drawn length including bridging and closing lines [px].

        Returns:
            Perimeter for closed curves, path length otherwise.
        """
        total = 0.0
        previous: Point | None = None
        for segment in self.segments:
            if previous is not None:
                total += distance(previous, segment.start)
            total += segment.length
            previous = segment.end
        if self.closed:
            total += distance(self.end, self.start)
        return total

    def _connectors(self) -> list[LineSegment]:
        """Implicit straight lines joining consecutive primitives.

        Returns:
            Bridging lines plus the closing line for closed curves.
        """
        connectors: list[LineSegment] = []
        for current, following in zip(self.segments, self.segments[1:]):
            if distance(current.end, following.start) > SMALL_EPS:
                connectors.append(line(current.end, following.start))
        if self.closed and distance(self.end, self.start) > SMALL_EPS:
            connectors.append(line(self.end, self.start))
        return connectors

    def contains_points(self, points: npt.ArrayLike) -> BoolArray:
        """Vectorized point-in-region test.

        Args:
            points: ``(n, 2)`` array-like of ``(x, y)`` coordinates.

        Returns:
            Boolean array, ``True`` where a point lies inside the region.
        """
        xy = np.atleast_2d(np.asarray(points, dtype=np.float64))
        return np.asarray(self.path.contains_points(xy), dtype=np.bool_)

    def contains(self, point: Point) -> bool:
        """Point-in-region test for a single point.

        Args:
            point: Query point.

        Returns:
            ``True`` if ``point`` lies inside the region.
        """
        return bool(self.contains_points([[point.x, point.y]])[0])

    def distance_to(self, point: Point) -> float:
        """Shortest distance from a point to the drawn curve.

        Args:
            point: Query point.

        Returns:
            Distance to the nearest primitive or connecting line [px].
        """
        pieces: list[Segment] = [*self.segments, *self._connectors()]
        return min(piece.distance_to(point) for piece in pieces)
