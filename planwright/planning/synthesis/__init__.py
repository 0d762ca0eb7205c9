"""Phase and task synthesis strategies."""

from planwright.planning.synthesis.strategies import (
    STRATEGIES,
    STRATEGY_ALIASES,
    STRATEGY_DESCRIPTIONS,
    list_strategies,
    pack_sprints,
    resolve_strategy,
    synthesize,
)

__all__ = [
    "STRATEGIES",
    "STRATEGY_ALIASES",
    "STRATEGY_DESCRIPTIONS",
    "list_strategies",
    "pack_sprints",
    "resolve_strategy",
    "synthesize",
]
