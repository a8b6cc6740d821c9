"""Point classification: in-bounds status and track zone."""

from __future__ import annotations

import numpy as np

from derbytrack.track.boundaries import TrackBoundaries
from derbytrack.track.models import ZONE_ORDER, Point, Zone
from derbytrack.utils.constants import BOUNDARY_TOLERANCE


def sample_points(position: Point, radius: float) -> list[Point]:
    """Center plus the four axis-aligned points on a skater's outline.

    Args:
        position: Skater center.
        radius: Skater radius [px].

    Returns:
        Center, right, left, bottom and top sample points.
    """
    return [
        position,
        position.offset(radius, 0.0),
        position.offset(-radius, 0.0),
        position.offset(0.0, radius),
        position.offset(0.0, -radius),
    ]


def is_in_bounds(boundaries: TrackBoundaries, position: Point, radius: float = 0.0) -> bool:
    """Check whether a skater is fully on the skating surface.

    Every sample must be strictly inside the outer boundary and strictly
    outside the inner boundary. A sample lying on either boundary line counts
    as touching it and makes the skater out of bounds.

    Args:
        boundaries: Current track curves.
        position: Skater center [px].
        radius: Skater radius [px].

    Returns:
        ``True`` when all samples are on the surface and off both lines.
    """
    samples = sample_points(position, abs(radius))
    xy = np.array([[point.x, point.y] for point in samples], dtype=np.float64)
    if not np.all(boundaries.outer.contains_points(xy)):
        return False
    if np.any(boundaries.inner.contains_points(xy)):
        return False
    for point in samples:
        if boundaries.outer.distance_to(point) <= BOUNDARY_TOLERANCE:
            return False
        if boundaries.inner.distance_to(point) <= BOUNDARY_TOLERANCE:
            return False
    return True


def classify_zone(boundaries: TrackBoundaries, position: Point) -> Zone:
    """Classify a position into a track zone.

    Zones are tested as straight1, turn1, straight2, turn2; the first match
    wins, so points on a shared edge belong to the earlier zone.

    Args:
        boundaries: Current track curves.
        position: Query position [px].

    Returns:
        Matching zone, or ``Zone.OUTSIDE`` when no zone contains the point.
    """
    for zone in ZONE_ORDER:
        if boundaries.zone_curve(zone).contains(position):
            return zone
    return Zone.OUTSIDE
