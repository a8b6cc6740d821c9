"""Track geometry facade with atomic rebuild on resize."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from derbytrack.track.boundaries import TrackBoundaries, build_track_boundaries
from derbytrack.track.centerline import TrackAxis, build_track_axis
from derbytrack.track.classifier import classify_zone, is_in_bounds
from derbytrack.track.models import Point, ReferencePoints, TrackDimensions, TrackScale, Zone
from derbytrack.track.projection import BoundaryProjection, project_to_boundaries
from derbytrack.track.reference import initialize_points
from derbytrack.utils.constants import DEFAULT_ARC_RESOLUTION

logger = logging.getLogger(__name__)


class Positioned(Protocol):
    """Anything with a center and a radius in pixel space."""

    @property
    def x(self) -> float:
        """Horizontal center coordinate [px].

        Returns:
            Center x.
        """
        ...

    @property
    def y(self) -> float:
        """Vertical center coordinate [px].

        Returns:
            Center y.
        """
        ...

    @property
    def radius(self) -> float:
        """Outline radius [px].

        Returns:
            Radius.
        """
        ...


@dataclass(frozen=True)
class TrackSnapshot:
    """Immutable geometry for one canvas size.

    Args:
        points: Reference points.
        boundaries: Curves built from ``points``.
        axis: Track-relative axis built from ``points``.
    """

    points: ReferencePoints
    boundaries: TrackBoundaries
    axis: TrackAxis

    @property
    def scale(self) -> TrackScale:
        """Scale shared by every curve of this snapshot.

        Returns:
            Pixel-per-meter scale.
        """
        return self.points.scale

    @property
    def revision(self) -> int:
        """Rebuild counter of this snapshot.

        Returns:
            Revision stored on the reference points.
        """
        return self.points.revision


@dataclass(frozen=True)
class SkaterDescription:
    """Per-query derived attributes of one skater.

    Args:
        zone: Track zone of the skater center.
        in_bounds: Whether the whole outline is on the skating surface.
        projection: Inner and outer boundary projection of the center.
        track_position: Position along the centerline [px].
    """

    zone: Zone
    in_bounds: bool
    projection: BoundaryProjection
    track_position: float


def build_track_snapshot(
    canvas_width: float,
    canvas_height: float,
    dimensions: TrackDimensions | None = None,
    revision: int = 0,
    arc_resolution: int = DEFAULT_ARC_RESOLUTION,
) -> TrackSnapshot:
    """Build points, curves and axis for one canvas size.

    Args:
        canvas_width: Canvas width [px].
        canvas_height: Canvas height [px].
        dimensions: Regulation offsets. Defaults to :class:`TrackDimensions`.
        revision: Revision number for the new snapshot.
        arc_resolution: Chords per half circle for curve flattening.

    Returns:
        Complete geometry snapshot.
    """
    points = initialize_points(canvas_width, canvas_height, dimensions, revision=revision)
    return TrackSnapshot(
        points=points,
        boundaries=build_track_boundaries(points, arc_resolution=arc_resolution),
        axis=build_track_axis(points),
    )


class TrackGeometry:
    """Current track geometry, replaced as a whole on every resize.

    Queries read ``snapshot`` once, so a resize between two calls never mixes
    old and new curves inside one call.

    Args:
        canvas_width: Initial canvas width [px].
        canvas_height: Initial canvas height [px].
        dimensions: Regulation offsets. Defaults to :class:`TrackDimensions`.
        arc_resolution: Chords per half circle for curve flattening.
    """

    def __init__(
        self,
        canvas_width: float,
        canvas_height: float,
        dimensions: TrackDimensions | None = None,
        arc_resolution: int = DEFAULT_ARC_RESOLUTION,
    ) -> None:
        """Build the initial snapshot.

        Args:
            canvas_width: Initial canvas width [px].
            canvas_height: Initial canvas height [px].
            dimensions: Regulation offsets.
            arc_resolution: Chords per half circle for curve flattening.
        """
        self._dimensions = dimensions or TrackDimensions()
        self._arc_resolution = arc_resolution
        self._snapshot = build_track_snapshot(
            canvas_width,
            canvas_height,
            self._dimensions,
            revision=0,
            arc_resolution=arc_resolution,
        )

    @property
    def snapshot(self) -> TrackSnapshot:
        """Geometry for the current canvas size.

        Returns:
            Latest complete snapshot.
        """
        return self._snapshot

    def resize(self, canvas_width: float, canvas_height: float) -> TrackSnapshot:
        """Rebuild every point and curve for a new canvas size.

        The new snapshot is fully built before it replaces the old one. If
        building fails, the previous snapshot stays in place.

        Args:
            canvas_width: New canvas width [px].
            canvas_height: New canvas height [px].

        Returns:
            The new snapshot.
        """
        snapshot = build_track_snapshot(
            canvas_width,
            canvas_height,
            self._dimensions,
            revision=self._snapshot.revision + 1,
            arc_resolution=self._arc_resolution,
        )
        self._snapshot = snapshot
        logger.debug(
            "Track rebuilt for %.1fx%.1f canvas (revision %d, %.3f px/m)",
            canvas_width,
            canvas_height,
            snapshot.revision,
            snapshot.scale.pixels_per_meter,
        )
        return snapshot

    def zone_of(self, position: Point) -> Zone:
        """Classify a position into a track zone.

        Args:
            position: Query position [px].

        Returns:
            Track zone.
        """
        return classify_zone(self._snapshot.boundaries, position)

    def in_bounds(self, position: Point, radius: float = 0.0) -> bool:
        """Check whether a circular outline is fully on the skating surface.

        Args:
            position: Outline center [px].
            radius: Outline radius [px].

        Returns:
            In-bounds status.
        """
        return is_in_bounds(self._snapshot.boundaries, position, radius)

    def project(self, position: Point) -> BoundaryProjection:
        """Project a position onto the inner and outer boundary.

        Args:
            position: Query position [px].

        Returns:
            Boundary projection.
        """
        return project_to_boundaries(self._snapshot.points, position)

    def track_position(self, position: Point) -> float:
        """Map a position onto the track-relative axis.

        Args:
            position: Query position [px].

        Returns:
            Track position [px].
        """
        return self._snapshot.axis.position_of(position)

    def describe(self, skater: Positioned) -> SkaterDescription:
        """Derive zone, bounds, projection and track position in one pass.

        Args:
            skater: Object exposing ``x``, ``y`` and ``radius``.

        Returns:
            Derived attributes computed against a single snapshot.
        """
        snapshot = self._snapshot
        position = Point(skater.x, skater.y)
        return SkaterDescription(
            zone=classify_zone(snapshot.boundaries, position),
            in_bounds=is_in_bounds(snapshot.boundaries, position, skater.radius),
            projection=project_to_boundaries(snapshot.points, position),
            track_position=snapshot.axis.position_of(position),
        )
