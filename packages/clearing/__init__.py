"""Selection of relevant, current and reusable clearing decisions."""
from .config import FilterConfig, configure_logging, load_config
from .filter import (
    ClearingDecisionFilter,
    current_decisions_by_item,
    filter_current_decisions,
    filter_current_reusable_decisions,
    filter_relevant_decisions,
    get_decision_of,
    reusable_decisions_by_item,
)
from .model import (
    ClearingDecision,
    ClearingDecisionLike,
    DecisionScope,
    DecisionType,
    UnhandledDecisionScopeError,
)

__all__ = [
    "ClearingDecision",
    "ClearingDecisionFilter",
    "ClearingDecisionLike",
    "DecisionScope",
    "DecisionType",
    "FilterConfig",
    "UnhandledDecisionScopeError",
    "configure_logging",
    "current_decisions_by_item",
    "filter_current_decisions",
    "filter_current_reusable_decisions",
    "filter_relevant_decisions",
    "get_decision_of",
    "load_config",
    "reusable_decisions_by_item",
]
