"""Domain level exceptions shared across BadgeRotator modules."""

from __future__ import annotations

__all__ = [
    "AppError",
    "StartupError",
    "RemoteError",
    "RemoteTransportError",
    "RemoteAuthenticationError",
    "SnapshotError",
    "SnapshotFormatError",
    "InvalidOperatorInput",
    "PresetNotFoundError",
]


class AppError(Exception):
    """Base class for application specific errors."""


class StartupError(AppError):
    """Raised when the service cannot prepare its local state directory."""


class RemoteError(AppError):
    """Base class for remote assignment service failures."""


class RemoteTransportError(RemoteError):
    """Raised when a remote call fails to complete."""


class RemoteAuthenticationError(RemoteError):
    """Raised when the remote service answers as if the session is not logged in."""


class SnapshotError(AppError):
    """Base class for snapshot persistence failures."""


class SnapshotFormatError(SnapshotError):
    """Raised when a snapshot file cannot be parsed."""


class InvalidOperatorInput(AppError):
    """Raised when a control surface request is rejected."""


class PresetNotFoundError(InvalidOperatorInput):
    """Raised when none of the requested presets exist."""
