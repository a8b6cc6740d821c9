"""Projection of positions onto the inner and outer boundary."""

from __future__ import annotations

import math
from dataclasses import dataclass

from derbytrack.track.models import Point, ReferencePoints


@dataclass(frozen=True)
class BoundaryProjection:
    """Inner and outer boundary points across the track from a position.

    Args:
        inner: Projection onto the inner boundary.
        outer: Projection onto the outer boundary.
    """

    inner: Point
    outer: Point

    @property
    def midpoint(self) -> Point:
        """Point halfway across the track.

        Returns:
            Midpoint of ``inner`` and ``outer``.
        """
        return Point(0.5 * (self.inner.x + self.outer.x), 0.5 * (self.inner.y + self.outer.y))

    @property
    def width(self) -> float:
        """Track width at this cross-section [px].

        Returns:
            Distance between ``inner`` and ``outer``.
        """
        return math.hypot(self.outer.x - self.inner.x, self.outer.y - self.inner.y)


def is_turn_regime(points: ReferencePoints, x: float) -> bool:
    """Check whether an x-coordinate lies beyond the straights.

    The straights cover the closed interval ``[B.x, A.x]``; a position
    exactly on either end is projected as a straight.

    Args:
        points: Reference points.
        x: Horizontal coordinate [px].

    Returns:
        ``True`` for ``x < B.x`` or ``x > A.x``.
    """
    return x < points.B.x or x > points.A.x


def _line_y_at(start: Point, end: Point, x: float) -> float:
    """Evaluate the line through two points at a given x.

    Args:
        start: First point of the line.
        end: Second point of the line.
        x: Horizontal coordinate [px].

    Returns:
        Vertical coordinate of the line at ``x`` [px].
    """
    slope = (end.y - start.y) / (end.x - start.x)
    return start.y + slope * (x - start.x)


def project_on_turn(points: ReferencePoints, angle: float, right_side: bool) -> BoundaryProjection:
    """Place inner and outer boundary points at one polar angle of a turn.

    Args:
        points: Reference points.
        angle: Polar angle around the inner turn center [rad].
        right_side: Use the right turn (``A``/``G``) instead of the left
            turn (``B``/``H``).

    Returns:
        Inner point at the inner radius and outer point at the outer radius.
    """
    inner_center = points.A if right_side else points.B
    outer_center = points.G if right_side else points.H
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return BoundaryProjection(
        inner=Point(
            inner_center.x + points.inner_radius * cos_a,
            inner_center.y + points.inner_radius * sin_a,
        ),
        outer=Point(
            outer_center.x + points.outer_radius * cos_a,
            outer_center.y + points.outer_radius * sin_a,
        ),
    )


def project_on_straight(points: ReferencePoints, x: float, top: bool) -> BoundaryProjection:
    """Evaluate the top or bottom boundary lines at one x-coordinate.

    Args:
        points: Reference points.
        x: Horizontal coordinate [px].
        top: Use the top straight (``C``-``E``, ``I``-``K``) instead of the
            bottom one (``D``-``F``, ``J``-``L``).

    Returns:
        Points directly above or below ``x`` on both boundary lines.
    """
    p = points
    if top:
        inner_start, inner_end, outer_start, outer_end = p.C, p.E, p.I, p.K
    else:
        inner_start, inner_end, outer_start, outer_end = p.D, p.F, p.J, p.L
    return BoundaryProjection(
        inner=Point(x, _line_y_at(inner_start, inner_end, x)),
        outer=Point(x, _line_y_at(outer_start, outer_end, x)),
    )


def project_to_boundaries(points: ReferencePoints, position: Point) -> BoundaryProjection:
    """Project a position onto the inner and outer boundary.

    In the turns both projections share the polar angle of the position
    around the inner turn center on that side, placed at the inner radius
    around ``A``/``B`` and at the outer radius around ``G``/``H``. On the
    straights the projection keeps the position's x and evaluates the top
    or bottom boundary lines there. This is a vertical rather than a true
    perpendicular projection; the straights run close to horizontal.

    Args:
        points: Reference points for the current canvas.
        position: Query position [px].

    Returns:
        Inner and outer boundary points.
    """
    p = points
    x, y = position.x, position.y
    if is_turn_regime(p, x):
        right_side = x > p.A.x
        inner_center = p.A if right_side else p.B
        angle = math.atan2(y - inner_center.y, x - inner_center.x)
        return project_on_turn(p, angle, right_side)
    return project_on_straight(p, x, top=y < p.A.y)
