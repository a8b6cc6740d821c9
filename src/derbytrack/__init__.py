"""Roller-derby track geometry, zone classification and pack evaluation."""

from derbytrack.pack import PackResult, PackRules, Skater, SkaterRole, compute_pack
from derbytrack.track import TrackGeometry, TrackSnapshot, Zone

__all__ = [
    "PackResult",
    "PackRules",
    "Skater",
    "SkaterRole",
    "TrackGeometry",
    "TrackSnapshot",
    "Zone",
    "compute_pack",
]
