"""datatracker: track changes to an owned value and notify listeners."""

from importlib.metadata import version as _version

__version__ = _version("datatracker")

from datatracker.errors import (
    DataTrackerError,
    AliasingViolation,
    GuardReleasedError,
    TrackerDisposedError,
    ValueOperationError,
)
from datatracker._registry import ListenerRegistry, OnChanged
from datatracker.modifier import Modifier
from datatracker.view import ReadOnlyView
from datatracker.tracker import DataTracker
# textual NOT auto-imported — opt-in only

__all__ = [
    "DataTracker",
    "Modifier",
    "ReadOnlyView",
    "ListenerRegistry",
    "OnChanged",
    "DataTrackerError",
    "AliasingViolation",
    "GuardReleasedError",
    "TrackerDisposedError",
    "ValueOperationError",
]
