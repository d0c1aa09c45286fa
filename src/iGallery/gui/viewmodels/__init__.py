from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .selection import SelectionSet

__all__ = [
    "BaseViewModel",
    "ObservableProperty",
    "SelectionSet",
    "Signal",
]
