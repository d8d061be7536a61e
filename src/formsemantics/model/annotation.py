"""Pipeline-internal annotation, region and pattern records.

All records are immutable. Stages that refine a record return a new one, so
every stage can be run and tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .evidence import Evidence, EvidenceCode
from .node import Rect


@dataclass(frozen=True)
class RoleAssignment:
    """One role hypothesis for a node."""

    role: str
    confidence: float
    evidence: tuple[Evidence, ...] = ()

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

    def with_evidence(self, *items: Evidence) -> RoleAssignment:
        """Copy with evidence appended."""
        return replace(self, evidence=self.evidence + items)

    def boosted(self, delta: float, ceiling: float = 1.0) -> RoleAssignment:
        """Copy with confidence raised by ``delta``, capped at ``ceiling``.

        A negative delta is ignored; confidence never decreases.
        """
        return replace(self, confidence=min(ceiling, self.confidence + max(0.0, delta)))

    def has_evidence(self, code: EvidenceCode) -> bool:
        return any(item.code == code for item in self.evidence)


def sort_roles(roles: tuple[RoleAssignment, ...]) -> tuple[RoleAssignment, ...]:
    """Order roles by descending confidence, keeping insertion order on ties."""
    return tuple(sorted(roles, key=lambda r: r.confidence, reverse=True))


@dataclass(frozen=True)
class NodeAnnotation:
    """Role hypotheses for one normalized node.

    ``roles`` is kept sorted by descending confidence, so ``roles[0]`` is the
    authoritative role for every downstream stage.
    """

    node_id: str
    roles: tuple[RoleAssignment, ...] = ()
    hints: dict[str, Any] | None = field(default=None, hash=False, compare=True)
    tags: tuple[str, ...] | None = None

    @property
    def top(self) -> RoleAssignment | None:
        return self.roles[0] if self.roles else None

    @property
    def top_role(self) -> str | None:
        top = self.top
        return top.role if top else None

    @property
    def top_confidence(self) -> float:
        top = self.top
        return top.confidence if top else 0.0

    def with_roles(self, roles: tuple[RoleAssignment, ...]) -> NodeAnnotation:
        """Copy with new roles, re-sorted by descending confidence."""
        return replace(self, roles=sort_roles(roles))


@dataclass(frozen=True)
class DetectedRegion:
    """A coarse layout region inferred from node positions."""

    name: str
    bounds: Rect
    confidence: float | None = None
    node_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class DetectedPattern:
    """A multi-node interaction relationship."""

    name: str
    confidence: float
    node_ids: tuple[str, ...] = ()
    evidence: tuple[Evidence, ...] = ()
