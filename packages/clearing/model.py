"""Core data structures for clearing decisions."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Dict, Hashable, Optional, Protocol, Tuple


class UnhandledDecisionScopeError(ValueError):
    """Raised when a decision carries a scope that is neither ITEM nor REPO."""

    def __init__(self, scope: object) -> None:
        super().__init__(f"unhandled clearing decision scope '{scope}'")
        self.scope = scope


class DecisionScope(IntEnum):
    """Where a clearing decision applies: the single item or the whole repository."""

    ITEM = 0
    REPO = 1

    @classmethod
    def coerce(cls, value: object) -> "DecisionScope":
        """Map a stored scope representation onto a member."""

        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise UnhandledDecisionScopeError(value)


class DecisionType(IntEnum):
    """Kind of judgment a clearing decision records."""

    TO_BE_DISCUSSED = 3
    IRRELEVANT = 4
    IDENTIFIED = 5
    DO_NOT_USE = 6
    NON_FUNCTIONAL = 7


class ClearingDecisionLike(Protocol):
    """Read-only view the decision filter needs from a decision."""

    @property
    def scope(self) -> object: ...

    @property
    def same_folder(self) -> bool: ...

    @property
    def upload_tree_id(self) -> Hashable: ...


@dataclass(frozen=True)
class ClearingDecision:
    """A recorded judgment about the licenses of one upload tree item."""

    upload_tree_id: int
    scope: object
    same_folder: bool = False
    clearing_id: Optional[int] = None
    pfile_id: Optional[int] = None
    decision_type: Optional[DecisionType] = None
    user_name: Optional[str] = None
    date_added: Optional[datetime] = None
    same_upload: Optional[bool] = None
    positive_licenses: Tuple[str, ...] = ()
    negative_licenses: Tuple[str, ...] = ()
    comment: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        """Return a compact JSON-serialisable representation."""

        scope = self.scope.name if isinstance(self.scope, DecisionScope) else self.scope
        decision_type = self.decision_type.name if self.decision_type is not None else None
        payload: Dict[str, object] = {
            "upload_tree_id": self.upload_tree_id,
            "scope": scope,
            "same_folder": self.same_folder,
            "clearing_id": self.clearing_id,
            "pfile_id": self.pfile_id,
            "decision_type": decision_type,
            "user_name": self.user_name,
            "date_added": self.date_added.isoformat() if self.date_added else None,
            "same_upload": self.same_upload,
            "positive_licenses": list(self.positive_licenses) or None,
            "negative_licenses": list(self.negative_licenses) or None,
            "comment": self.comment,
        }
        return {key: value for key, value in payload.items() if value is not None}


__all__ = [
    "ClearingDecision",
    "ClearingDecisionLike",
    "DecisionScope",
    "DecisionType",
    "UnhandledDecisionScopeError",
]
