"""Expert viewpoints and viewpoint selection."""

from planwright.planning.viewpoints.base import Viewpoint
from planwright.planning.viewpoints.registry import VIEWPOINTS, get_viewpoint, list_viewpoints
from planwright.planning.viewpoints.selector import detect_viewpoint, select_viewpoint

__all__ = [
    "Viewpoint",
    "VIEWPOINTS",
    "get_viewpoint",
    "list_viewpoints",
    "detect_viewpoint",
    "select_viewpoint",
]
