"""Public interface for the three-pane browser."""

from .browser import MillerBrowser, MillerBrowserError
from .listing import DirectoryLister
from .rotator import PaneRotator
from .state import Entry, NavigationState, Pane

__version__ = "0.1.0"
__all__ = [
    "DirectoryLister",
    "Entry",
    "MillerBrowser",
    "MillerBrowserError",
    "NavigationState",
    "Pane",
    "PaneRotator",
    "__version__",
]
