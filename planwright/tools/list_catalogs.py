# planwright/tools/list_catalogs.py
"""
list_viewpoints and list_strategies tool implementations.

Both catalogs are static.
"""

from planwright.models.responses import CatalogEntry, CatalogResponse
from planwright.planning.synthesis import STRATEGY_ALIASES, STRATEGY_DESCRIPTIONS, list_strategies
from planwright.planning.viewpoints import get_viewpoint, list_viewpoints


async def list_viewpoints_tool() -> dict:
    """
    List available viewpoints.

    Returns:
        CatalogResponse as dict
    """
    items = [
        CatalogEntry(name=name, description=get_viewpoint(name).description)
        for name in list_viewpoints()
    ]
    return CatalogResponse(items=items, total=len(items)).model_dump()


async def list_strategies_tool() -> dict:
    """
    List available strategies with their aliases.

    Returns:
        CatalogResponse as dict
    """
    items = [
        CatalogEntry(
            name=name,
            description=STRATEGY_DESCRIPTIONS.get(name, ""),
            aliases=[alias for alias, target in STRATEGY_ALIASES.items() if target == name],
        )
        for name in list_strategies()
    ]
    return CatalogResponse(items=items, total=len(items)).model_dump()
