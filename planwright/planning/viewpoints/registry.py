# planwright/planning/viewpoints/registry.py
"""Immutable viewpoint catalog."""

from types import MappingProxyType
from typing import Mapping

from planwright.errors import UnknownViewpoint
from planwright.planning.viewpoints.architect import ArchitectViewpoint
from planwright.planning.viewpoints.backend import BackendViewpoint
from planwright.planning.viewpoints.base import Viewpoint
from planwright.planning.viewpoints.devops import DevOpsViewpoint
from planwright.planning.viewpoints.frontend import FrontendViewpoint
from planwright.planning.viewpoints.qa import QAViewpoint
from planwright.planning.viewpoints.security import SecurityViewpoint

VIEWPOINTS: Mapping[str, Viewpoint] = MappingProxyType(
    {
        viewpoint.name: viewpoint
        for viewpoint in (
            ArchitectViewpoint(),
            FrontendViewpoint(),
            BackendViewpoint(),
            SecurityViewpoint(),
            DevOpsViewpoint(),
            QAViewpoint(),
        )
    }
)


def list_viewpoints() -> list[str]:
    """Catalog names in declaration order."""
    return list(VIEWPOINTS)


def get_viewpoint(name: str) -> Viewpoint:
    """
    Look up a viewpoint by name (case-insensitive).

    Raises:
        UnknownViewpoint: If the name is not in the catalog
    """
    key = name.strip().lower()
    if key not in VIEWPOINTS:
        raise UnknownViewpoint(name, list_viewpoints())
    return VIEWPOINTS[key]
