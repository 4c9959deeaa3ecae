"""
Exceptions raised around the tracking core.

The numeric pipeline itself never raises once tracking has started. These
errors come from the collaborators that gate it: sensor permission,
sensor availability and recorded input files.
"""


class TrackingError(Exception):
    """Base class for all tracking errors."""


class PermissionDenied(TrackingError):
    """The user or platform refused access to the motion sensors."""


class PermissionRequestFailed(TrackingError):
    """The platform permission request itself failed."""


class SensorUnavailable(TrackingError):
    """The device has no accelerometer or orientation sensor."""


class RecordingFormatError(TrackingError):
    """A recorded sample file is missing required columns."""
