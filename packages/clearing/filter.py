"""Select the relevant, current and reusable clearing decisions for upload tree items.

Decisions arrive in chronological order, oldest first, so the last decision
seen for an item is the newest one. Relevant item-scoped decisions outrank
repository-scoped decisions for the same item regardless of their age.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, TypeVar

from .model import ClearingDecisionLike, DecisionScope, UnhandledDecisionScopeError

LOGGER = logging.getLogger("clearing.filter")

D = TypeVar("D", bound=ClearingDecisionLike)

# Precedence weights for current decisions; newer wins on equal weight.
_OTHER_FOLDER_ITEM = 0
_REPO = 1
_SAME_FOLDER_ITEM = 2


class ClearingDecisionFilter:
    """Stateless filter over sequences of clearing decisions."""

    def filter_relevant_decisions(self, decisions: Iterable[D]) -> List[D]:
        """Keep repository-scoped decisions and item-scoped ones from the same folder."""

        relevant = [decision for decision in decisions if _is_relevant(decision)]
        LOGGER.debug("Kept %d relevant clearing decisions", len(relevant))
        return relevant

    def current_decisions_by_item(self, decisions: Iterable[D]) -> Dict[Hashable, D]:
        """Map each upload tree id to its current decision.

        The newest relevant item-scoped decision wins. Without one, the newest
        repository-scoped decision wins. Item-scoped decisions from another
        folder carry no weight and only win when nothing else exists.
        """

        current: Dict[Hashable, D] = {}
        weights: Dict[Hashable, int] = {}
        for decision in decisions:
            if _is_item_scoped(decision):
                weight = _SAME_FOLDER_ITEM if decision.same_folder else _OTHER_FOLDER_ITEM
            else:
                weight = _REPO
            item_id = decision.upload_tree_id
            if weight < weights.get(item_id, weight):
                continue
            current[item_id] = decision
            weights[item_id] = weight
        _log_selection("current", current)
        return current

    def filter_current_decisions(self, decisions: Iterable[D]) -> List[D]:
        return list(self.current_decisions_by_item(decisions).values())

    def reusable_decisions_by_item(self, decisions: Iterable[D]) -> Dict[Hashable, D]:
        """Map each upload tree id to its newest repository-scoped decision.

        Item-scoped decisions depend on the folder they were made in, so they
        are never reused and their ``same_folder`` flag is never read.
        """

        reusable: Dict[Hashable, D] = {}
        for decision in decisions:
            if _is_item_scoped(decision):
                continue
            reusable[decision.upload_tree_id] = decision
        _log_selection("reusable", reusable)
        return reusable

    def filter_current_reusable_decisions(self, decisions: Iterable[D]) -> List[D]:
        return list(self.reusable_decisions_by_item(decisions).values())

    @staticmethod
    def get_decision_of(decision_map: Mapping[Hashable, D], item_id: Hashable) -> Optional[D]:
        return decision_map.get(item_id)


_DEFAULT_FILTER = ClearingDecisionFilter()


def filter_relevant_decisions(decisions: Iterable[D]) -> List[D]:
    return _DEFAULT_FILTER.filter_relevant_decisions(decisions)


def filter_current_decisions(decisions: Iterable[D]) -> List[D]:
    return _DEFAULT_FILTER.filter_current_decisions(decisions)


def filter_current_reusable_decisions(decisions: Iterable[D]) -> List[D]:
    return _DEFAULT_FILTER.filter_current_reusable_decisions(decisions)


def current_decisions_by_item(decisions: Iterable[D]) -> Dict[Hashable, D]:
    return _DEFAULT_FILTER.current_decisions_by_item(decisions)


def reusable_decisions_by_item(decisions: Iterable[D]) -> Dict[Hashable, D]:
    return _DEFAULT_FILTER.reusable_decisions_by_item(decisions)


def get_decision_of(decision_map: Mapping[Hashable, D], item_id: Hashable) -> Optional[D]:
    """Return the decision recorded for ``item_id`` or ``None``."""

    return ClearingDecisionFilter.get_decision_of(decision_map, item_id)


# Helpers ------------------------------------------------------------------ #


def _is_relevant(decision: ClearingDecisionLike) -> bool:
    try:
        scope = DecisionScope.coerce(decision.scope)
    except UnhandledDecisionScopeError:
        return False
    if scope is DecisionScope.REPO:
        return True
    return bool(decision.same_folder)


def _is_item_scoped(decision: ClearingDecisionLike) -> bool:
    try:
        scope = DecisionScope.coerce(decision.scope)
    except UnhandledDecisionScopeError as exc:
        LOGGER.warning(
            "Rejecting clearing decision for item %s with scope %r",
            decision.upload_tree_id,
            exc.scope,
        )
        raise
    return scope is DecisionScope.ITEM


def _log_selection(kind: str, selected: Mapping[Hashable, ClearingDecisionLike]) -> None:
    if not LOGGER.isEnabledFor(logging.DEBUG):
        return
    LOGGER.debug("Selected %d %s clearing decisions", len(selected), kind)
    for item_id, decision in selected.items():
        to_dict = getattr(decision, "to_dict", None)
        LOGGER.debug("Item %s -> %s", item_id, to_dict() if callable(to_dict) else decision)


__all__ = [
    "ClearingDecisionFilter",
    "UnhandledDecisionScopeError",
    "current_decisions_by_item",
    "filter_current_decisions",
    "filter_current_reusable_decisions",
    "filter_relevant_decisions",
    "get_decision_of",
    "reusable_decisions_by_item",
]
