"""Track model, boundary curves, classification and projection."""

from derbytrack.track.boundaries import TrackBoundaries, TrackSurface, build_track_boundaries
from derbytrack.track.centerline import TrackAxis, TrackSection, build_track_axis
from derbytrack.track.classifier import classify_zone, is_in_bounds
from derbytrack.track.curves import ArcSegment, Curve, LineSegment, arc_between, line
from derbytrack.track.geometry import (
    SkaterDescription,
    TrackGeometry,
    TrackSnapshot,
    build_track_snapshot,
)
from derbytrack.track.models import (
    ZONE_ORDER,
    Point,
    ReferencePoints,
    TrackDimensions,
    TrackScale,
    Zone,
)
from derbytrack.track.projection import BoundaryProjection, project_to_boundaries
from derbytrack.track.reference import CanvasSize, build_track_scale, canvas_size, initialize_points

__all__ = [
    "ZONE_ORDER",
    "ArcSegment",
    "BoundaryProjection",
    "CanvasSize",
    "Curve",
    "LineSegment",
    "Point",
    "ReferencePoints",
    "SkaterDescription",
    "TrackAxis",
    "TrackBoundaries",
    "TrackDimensions",
    "TrackGeometry",
    "TrackScale",
    "TrackSection",
    "TrackSnapshot",
    "TrackSurface",
    "Zone",
    "arc_between",
    "build_track_axis",
    "build_track_boundaries",
    "build_track_scale",
    "build_track_snapshot",
    "canvas_size",
    "classify_zone",
    "initialize_points",
    "is_in_bounds",
    "line",
    "project_to_boundaries",
]
