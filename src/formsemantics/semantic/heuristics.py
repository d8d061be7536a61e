"""Text and layout heuristics - third pipeline stage.

The scorer never changes a node's role and never lowers confidence. It only
adds corroborating evidence and, for primary-action captions, a small boost.
It returns new annotations; its inputs are left untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..model.annotation import NodeAnnotation, RoleAssignment
from ..model.evidence import Evidence, EvidenceCode
from ..model.node import NormalizedNode
from .role_tables import ACTION_ROLE

logger = logging.getLogger(__name__)

ACTION_KEYWORDS = frozenset(
    k.casefold()
    for k in (
        "OK", "Cancel", "Save", "Close", "Submit", "Apply", "Delete",
        "Add", "Remove", "Edit", "New", "Open", "Exit", "Yes", "No",
        "Next", "Back", "Finish", "Refresh", "Search", "Find", "Export",
        "Import", "Print", "Help",
    )
)

PRIMARY_ACTION_KEYWORDS = frozenset(
    k.casefold() for k in ("OK", "Save", "Submit", "Apply", "Finish", "Next")
)


@dataclass(frozen=True)
class HeuristicSettings:
    """Tunable constants for the heuristic passes."""

    primary_action_boost: float = 0.03
    compact_max_height: int = 40
    compact_max_width: int = 200


class HeuristicRoleScorer:
    """Refines classifier output with text and layout signals."""

    def __init__(
        self,
        settings: HeuristicSettings | None = None,
        action_keywords: Iterable[str] = ACTION_KEYWORDS,
        primary_action_keywords: Iterable[str] = PRIMARY_ACTION_KEYWORDS,
    ) -> None:
        self.settings = settings or HeuristicSettings()
        self.action_keywords = frozenset(k.casefold() for k in action_keywords)
        self.primary_action_keywords = frozenset(k.casefold() for k in primary_action_keywords)

    def score(
        self, annotations: Sequence[NodeAnnotation], nodes: Iterable[NormalizedNode]
    ) -> list[NodeAnnotation]:
        """Return refined copies of ``annotations``, joined to nodes by id.

        Annotations whose node id is not among ``nodes`` are returned unchanged.
        """
        node_map: dict[str, NormalizedNode] = {}
        for node in nodes:
            node_map.setdefault(node.id, node)

        result: list[NodeAnnotation] = []
        refined = 0
        for annotation in annotations:
            node = node_map.get(annotation.node_id)
            if node is None or not annotation.roles:
                result.append(annotation)
                continue

            scored = self._apply_layout(self._apply_text(annotation, node), node)
            if scored is not annotation:
                refined += 1
            result.append(scored)

        logger.debug("Heuristics refined %d of %d annotations", refined, len(result))
        return result

    def _apply_text(self, annotation: NodeAnnotation, node: NormalizedNode) -> NodeAnnotation:
        if not node.text:
            return annotation

        text = node.text.strip()
        key = text.casefold()
        if key not in self.action_keywords or annotation.top_role != ACTION_ROLE:
            return annotation

        top = annotation.roles[0]
        if key in self.primary_action_keywords:
            top = top.boosted(self.settings.primary_action_boost).with_evidence(
                Evidence(EvidenceCode.PRIMARY_ACTION_KEYWORD, text)
            )
        else:
            top = top.with_evidence(Evidence(EvidenceCode.ACTION_KEYWORD, text))

        return self._replace_top(annotation, top)

    def _apply_layout(self, annotation: NodeAnnotation, node: NormalizedNode) -> NodeAnnotation:
        if node.w <= 0 or node.h <= 0 or node.abs_y <= 0:
            return annotation
        if annotation.top_role != ACTION_ROLE:
            return annotation
        if node.h > self.settings.compact_max_height or node.w > self.settings.compact_max_width:
            return annotation

        top = annotation.roles[0].with_evidence(Evidence(EvidenceCode.COMPACT_BOUNDS))
        return self._replace_top(annotation, top)

    @staticmethod
    def _replace_top(annotation: NodeAnnotation, top: RoleAssignment) -> NodeAnnotation:
        return annotation.with_roles((top,) + annotation.roles[1:])


def score(
    annotations: Sequence[NodeAnnotation], nodes: Iterable[NormalizedNode]
) -> list[NodeAnnotation]:
    """Score with default heuristics."""
    return HeuristicRoleScorer().score(annotations, nodes)
