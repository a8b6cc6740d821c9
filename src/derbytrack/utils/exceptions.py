"""Custom exceptions for track geometry and pack evaluation."""


class DerbyTrackError(Exception):
    """Base exception for derby track errors."""


class ConfigurationError(DerbyTrackError):
    """Raised when track dimensions or pack rules are invalid."""


class TrackGeometryError(DerbyTrackError):
    """Raised when track scale, canvas size, or curve input is invalid."""
