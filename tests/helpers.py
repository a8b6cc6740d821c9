"""Shared test helpers."""

from __future__ import annotations

from derbytrack.pack.models import OfficialRole, Skater, SkaterRole
from derbytrack.track.geometry import TrackGeometry, TrackSnapshot

CANVAS_WIDTH = 351.0
CANVAS_HEIGHT = 232.0
SKATER_RADIUS_METERS = 0.3


def standard_geometry() -> TrackGeometry:
    """Create geometry for a canvas scaled to roughly 10 px per meter.

    Returns:
        Track geometry for a ``351 x 232`` canvas.
    """
    return TrackGeometry(CANVAS_WIDTH, CANVAS_HEIGHT)


def standard_snapshot() -> TrackSnapshot:
    """Create the snapshot of :func:`standard_geometry`.

    Returns:
        Track snapshot at roughly 10 px per meter.
    """
    return standard_geometry().snapshot


def skater_at(
    snapshot: TrackSnapshot,
    skater_id: str,
    meters: float,
    across: float = 0.5,
    role: SkaterRole | OfficialRole = SkaterRole.BLOCKER,
    team: str | None = None,
    radius_meters: float = SKATER_RADIUS_METERS,
) -> Skater:
    """Place a skater at a track position given in meters.

    Args:
        snapshot: Track geometry.
        skater_id: Skater identifier.
        meters: Distance along the centerline from the pivot line [m].
        across: Fraction of the way from the inner to the outer boundary.
        role: Skater role.
        team: Optional team identifier.
        radius_meters: Skater radius [m].

    Returns:
        Skater positioned in pixel space.
    """
    scale = snapshot.scale
    section = snapshot.axis.boundary_points_at(scale.to_pixels(meters))
    return Skater(
        skater_id=skater_id,
        x=section.inner.x + across * (section.outer.x - section.inner.x),
        y=section.inner.y + across * (section.outer.y - section.inner.y),
        radius=scale.to_pixels(radius_meters),
        role=role,
        team=team,
    )
