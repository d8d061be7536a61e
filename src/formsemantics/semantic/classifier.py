"""Type-based role classification - second pipeline stage."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..model.annotation import NodeAnnotation, RoleAssignment
from ..model.evidence import Evidence, EvidenceCode
from ..model.node import NormalizedNode
from .role_tables import (
    UNKNOWN_CONFIDENCE,
    UNKNOWN_ROLE,
    VENDOR_KIND_ROLES,
    WIDGET_TYPE_ROLES,
    RoleTable,
)

logger = logging.getLogger(__name__)


class TypeRoleClassifier:
    """Assigns one initial role to every node from static lookup tables.

    Resolution order, first match wins:

    1. the node's vendor kind in the vendor table
    2. the short (last dotted segment) type name in the widget-type table
    3. ``Unknown`` at 0.10

    Example:
        ```python
        annotations = TypeRoleClassifier().classify(nodes)
        assert len(annotations) == len(nodes)
        ```
    """

    def __init__(
        self,
        vendor_table: RoleTable = VENDOR_KIND_ROLES,
        type_table: RoleTable = WIDGET_TYPE_ROLES,
    ) -> None:
        self.vendor_table = vendor_table
        self.type_table = type_table

    def classify(self, nodes: Iterable[NormalizedNode]) -> list[NodeAnnotation]:
        """Produce exactly one annotation, holding one role, per node."""
        annotations = [
            NodeAnnotation(node_id=node.id, roles=(self.classify_node(node),)) for node in nodes
        ]
        logger.debug("Classified %d nodes", len(annotations))
        return annotations

    def classify_node(self, node: NormalizedNode) -> RoleAssignment:
        entry = self.vendor_table.lookup(node.vendor_kind)
        if entry is not None:
            return RoleAssignment(
                entry.role,
                entry.confidence,
                (Evidence(EvidenceCode.VENDOR_KIND, node.vendor_kind or ""),),
            )

        type_evidence = (Evidence(EvidenceCode.TYPE, node.type),)

        entry = self.type_table.lookup(node.short_type)
        if entry is not None:
            return RoleAssignment(entry.role, entry.confidence, type_evidence)

        return RoleAssignment(UNKNOWN_ROLE, UNKNOWN_CONFIDENCE, type_evidence)


def classify(nodes: Iterable[NormalizedNode]) -> list[NodeAnnotation]:
    """Classify with the built-in tables."""
    return TypeRoleClassifier().classify(nodes)
