"""Boundary and zone curve construction from reference points."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from derbytrack.track.curves import BoolArray, Curve, arc_between, line
from derbytrack.track.models import Point, ReferencePoints, Zone
from derbytrack.utils.constants import DEFAULT_ARC_RESOLUTION
from derbytrack.utils.exceptions import TrackGeometryError

HALF_PI = 0.5 * math.pi


def _midpoint(first: Point, second: Point) -> Point:
    """Midpoint between two points.

    Args:
        first: First point.
        second: Second point.

    Returns:
        Point halfway between ``first`` and ``second``.
    """
    return Point(0.5 * (first.x + second.x), 0.5 * (first.y + second.y))


@dataclass(frozen=True)
class TrackSurface:
    """Annular skating surface between the outer and inner boundary.

    Args:
        outer: Outer boundary curve.
        inner: Inner boundary curve.
    """

    outer: Curve
    inner: Curve

    def contains_points(self, points: npt.ArrayLike) -> BoolArray:
        """Vectorized test for points on the skating surface.

        Args:
            points: ``(n, 2)`` array-like of coordinates.

        Returns:
            ``True`` where a point is inside outer and not inside inner.
        """
        xy = np.atleast_2d(np.asarray(points, dtype=np.float64))
        return np.asarray(
            self.outer.contains_points(xy) & ~self.inner.contains_points(xy),
            dtype=np.bool_,
        )

    def contains(self, point: Point) -> bool:
        """Test a single point against the skating surface.

        Args:
            point: Query point.

        Returns:
            ``True`` if ``point`` lies between the boundaries.
        """
        return bool(self.contains_points([[point.x, point.y]])[0])


@dataclass(frozen=True)
class TrackBoundaries:
    """All curves derived from one reference-point set.

    Args:
        points: Reference points the curves were built from.
        inner: Inner boundary (infield edge).
        outer: Outer boundary.
        straight1: Top straight zone.
        turn1: Left turn zone.
        straight2: Bottom straight zone.
        turn2: Right turn zone.
        mid_track: Centerline halfway between inner and outer boundary.
        pivot_line: Open segment across the top straight at its right end.
        jammer_line: Open segment across the top straight at its left end.
    """

    points: ReferencePoints
    inner: Curve
    outer: Curve
    straight1: Curve
    turn1: Curve
    straight2: Curve
    turn2: Curve
    mid_track: Curve
    pivot_line: Curve
    jammer_line: Curve

    @property
    def track_surface(self) -> TrackSurface:
        """Skating surface used for whole-track containment.

        Returns:
            Annulus between ``outer`` and ``inner``.
        """
        return TrackSurface(outer=self.outer, inner=self.inner)

    def zone_curve(self, zone: Zone) -> Curve:
        """Look up the region curve of a track zone.

        Args:
            zone: One of the four on-track zones.

        Returns:
            Closed curve bounding that zone.

        Raises:
            derbytrack.utils.exceptions.TrackGeometryError: If ``zone`` is
                ``Zone.OUTSIDE``, which has no region.
        """
        curves = {
            Zone.STRAIGHT1: self.straight1,
            Zone.TURN1: self.turn1,
            Zone.STRAIGHT2: self.straight2,
            Zone.TURN2: self.turn2,
        }
        if zone not in curves:
            msg = f"zone {zone!r} has no curve"
            raise TrackGeometryError(msg)
        return curves[Zone(zone)]


def build_inner_boundary(points: ReferencePoints, arc_resolution: int) -> Curve:
    """Build the inner boundary: top/bottom straights joined by inner arcs.

    Args:
        points: Reference points.
        arc_resolution: Chords per half circle.

    Returns:
        Closed inner boundary curve.
    """
    p = points
    return Curve(
        segments=(
            line(p.C, p.E),
            arc_between(p.B, abs(p.E.y - p.B.y), -HALF_PI, HALF_PI, anticlockwise=True),
            line(p.F, p.D),
            arc_between(p.A, abs(p.C.y - p.A.y), HALF_PI, -HALF_PI, anticlockwise=True),
        ),
        arc_resolution=arc_resolution,
    )


def build_outer_boundary(points: ReferencePoints, arc_resolution: int) -> Curve:
    """Build the outer boundary around the outer turn centers.

    Args:
        points: Reference points.
        arc_resolution: Chords per half circle.

    Returns:
        Closed outer boundary curve.
    """
    p = points
    return Curve(
        segments=(
            line(p.I, p.K),
            arc_between(p.H, abs(p.K.y - p.H.y), -HALF_PI, HALF_PI, anticlockwise=True),
            line(p.L, p.J),
            arc_between(p.G, abs(p.I.y - p.G.y), HALF_PI, -HALF_PI, anticlockwise=True),
        ),
        arc_resolution=arc_resolution,
    )


def build_zone_curve(points: ReferencePoints, zone: Zone, arc_resolution: int) -> Curve:
    """Build the region curve for one zone.

    Straights are quadrilaterals joining the inner and outer straight ends.
    Turns run along the inner arc and back along the outer arc in the
    opposite sense, which encloses the annular wedge between them.

    Args:
        points: Reference points.
        zone: Zone to build.
        arc_resolution: Chords per half circle.

    Returns:
        Closed zone curve.

    Raises:
        derbytrack.utils.exceptions.TrackGeometryError: If ``zone`` is
            ``Zone.OUTSIDE``.
    """
    p = points
    if zone == Zone.STRAIGHT1:
        segments = (line(p.I, p.C), line(p.C, p.E), line(p.E, p.K))
    elif zone == Zone.STRAIGHT2:
        segments = (line(p.D, p.J), line(p.J, p.L), line(p.L, p.F))
    elif zone == Zone.TURN1:
        segments = (
            line(p.K, p.E),
            arc_between(p.B, abs(p.E.y - p.B.y), -HALF_PI, HALF_PI, anticlockwise=True),
            line(p.F, p.L),
            arc_between(p.H, abs(p.K.y - p.H.y), HALF_PI, -HALF_PI, anticlockwise=False),
        )
    elif zone == Zone.TURN2:
        segments = (
            line(p.I, p.C),
            arc_between(p.A, abs(p.C.y - p.A.y), -HALF_PI, HALF_PI, anticlockwise=False),
            line(p.D, p.J),
            arc_between(p.G, abs(p.I.y - p.G.y), HALF_PI, -HALF_PI, anticlockwise=True),
        )
    else:
        msg = f"zone {zone!r} has no curve"
        raise TrackGeometryError(msg)
    return Curve(segments=segments, arc_resolution=arc_resolution)


def build_mid_track(points: ReferencePoints, arc_resolution: int) -> Curve:
    """Build the centerline halfway between the inner and outer boundary.

    Args:
        points: Reference points.
        arc_resolution: Chords per half circle.

    Returns:
        Closed centerline curve.
    """
    p = points
    left_radius = 0.5 * (abs(p.E.y - p.B.y) + abs(p.K.y - p.H.y))
    right_radius = 0.5 * (abs(p.C.y - p.A.y) + abs(p.I.y - p.G.y))
    return Curve(
        segments=(
            line(_midpoint(p.C, p.I), _midpoint(p.E, p.K)),
            arc_between(_midpoint(p.B, p.H), left_radius, -HALF_PI, HALF_PI, anticlockwise=True),
            line(_midpoint(p.F, p.L), _midpoint(p.D, p.J)),
            arc_between(_midpoint(p.A, p.G), right_radius, HALF_PI, -HALF_PI, anticlockwise=True),
        ),
        arc_resolution=arc_resolution,
    )


def build_track_boundaries(
    points: ReferencePoints,
    arc_resolution: int = DEFAULT_ARC_RESOLUTION,
) -> TrackBoundaries:
    """Build every track curve from one reference-point set.

    Pure and idempotent: the same points always yield equal curves.

    Args:
        points: Reference points for the current canvas.
        arc_resolution: Chords per half circle used for containment tests.

    Returns:
        Complete, immutable set of boundary and zone curves.
    """
    p = points
    return TrackBoundaries(
        points=points,
        inner=build_inner_boundary(points, arc_resolution),
        outer=build_outer_boundary(points, arc_resolution),
        straight1=build_zone_curve(points, Zone.STRAIGHT1, arc_resolution),
        turn1=build_zone_curve(points, Zone.TURN1, arc_resolution),
        straight2=build_zone_curve(points, Zone.STRAIGHT2, arc_resolution),
        turn2=build_zone_curve(points, Zone.TURN2, arc_resolution),
        mid_track=build_mid_track(points, arc_resolution),
        pivot_line=Curve(segments=(line(p.I, p.C),), closed=False, arc_resolution=arc_resolution),
        jammer_line=Curve(segments=(line(p.K, p.E),), closed=False, arc_resolution=arc_resolution),
    )
