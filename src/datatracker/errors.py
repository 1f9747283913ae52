"""Errors raised by DataTracker, Modifier and ReadOnlyView.

Listener exceptions are never wrapped: they propagate out of the release
that triggered them unchanged.
"""


class DataTrackerError(Exception):
    """Base class for all datatracker errors."""


class AliasingViolation(DataTrackerError, RuntimeError):
    """A borrow was requested while an incompatible one is live.

    Release the outstanding Modifier (or leave the view's ``with`` block)
    and retry.
    """


class GuardReleasedError(DataTrackerError, RuntimeError):
    """A Modifier was used after it was released."""


class TrackerDisposedError(DataTrackerError, RuntimeError):
    """A DataTracker was used after dispose()."""


class ValueOperationError(DataTrackerError):
    """Duplicating or comparing the tracked value raised.

    The original exception is available as ``__cause__``.
    """
