"""Tree normalization - first pipeline stage.

Turns the untyped ``nodes`` array of a UI dump bundle into typed ``RawNode``
trees in a single parse pass, then flattens them depth-first into
``NormalizedNode`` records with absolute form-space coordinates.

Malformed entries (array members that are not JSON objects) are skipped
silently. Missing fields get fixed defaults: bounds components ``0``,
``visible``/``enabled`` ``True``, ``text`` absent.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from ..diagnostics import PipelineWarnings
from ..model.node import NormalizedNode, RawNode, Rect

logger = logging.getLogger(__name__)

DEFAULT_VENDOR_METADATA_KEYS: tuple[str, ...] = ("devexpress",)


def as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0
    if isinstance(value, float):
        # NaN and infinities have no integer value
        return int(round(value)) if math.isfinite(value) else 0
    return 0


def as_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    return None


def as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


class TreeNormalizer:
    """Parses and flattens captured control trees.

    Example:
        ```python
        normalizer = TreeNormalizer()
        nodes = normalizer.normalize(bundle["nodes"])
        ```
    """

    def __init__(
        self,
        vendor_metadata_keys: Sequence[str] = DEFAULT_VENDOR_METADATA_KEYS,
        warnings: PipelineWarnings | None = None,
    ) -> None:
        """Initialize the normalizer.

        Args:
            vendor_metadata_keys: Metadata sections probed, in order, for a ``kind`` string
            warnings: Optional collector for fallback-id diagnostics
        """
        self.vendor_metadata_keys = tuple(vendor_metadata_keys)
        self.warnings = warnings

    def normalize(self, items: Any, parent_x: int = 0, parent_y: int = 0) -> list[NormalizedNode]:
        """Parse and flatten a node array.

        Args:
            items: The raw ``nodes`` array (anything else yields an empty result)
            parent_x: Absolute X of the containing element
            parent_y: Absolute Y of the containing element

        Returns:
            Depth-first ordered normalized nodes
        """
        return self.flatten(self.parse(items), parent_x, parent_y)

    def parse(self, items: Any) -> list[RawNode]:
        """Convert a raw node array into typed trees, skipping non-object members."""
        if not isinstance(items, list):
            return []

        roots: list[RawNode] = []
        for item in items:
            if not isinstance(item, Mapping):
                logger.debug("Skipping malformed node entry of type %s", type(item).__name__)
                continue
            roots.append(self._parse_node(item))
        return roots

    def flatten(
        self, roots: Sequence[RawNode], parent_x: int = 0, parent_y: int = 0
    ) -> list[NormalizedNode]:
        """Flatten typed trees depth-first, resolving absolute positions."""
        result: list[NormalizedNode] = []
        self._flatten_into(result, roots, parent_x, parent_y)
        logger.debug("Normalized %d nodes", len(result))
        return result

    def _flatten_into(
        self,
        result: list[NormalizedNode],
        nodes: Sequence[RawNode],
        parent_x: int,
        parent_y: int,
    ) -> None:
        for node in nodes:
            abs_x = parent_x + node.bounds.x
            abs_y = parent_y + node.bounds.y

            node_id = node.id
            if not node_id:
                node_id = f"node-{len(result)}"
                if self.warnings is not None:
                    self.warnings.add_warning(
                        "FALLBACK_NODE_ID",
                        f"Node of type '{node.type}' has no id; assigned '{node_id}'",
                    )

            result.append(
                NormalizedNode(
                    id=node_id,
                    type=node.type,
                    name=node.name,
                    text=node.text,
                    visible=node.visible,
                    enabled=node.enabled,
                    abs_x=abs_x,
                    abs_y=abs_y,
                    w=node.bounds.w,
                    h=node.bounds.h,
                    vendor_kind=node.vendor_kind,
                )
            )

            # Children are positioned relative to this node's absolute origin
            self._flatten_into(result, node.children, abs_x, abs_y)

    def _parse_node(self, obj: Mapping[str, Any]) -> RawNode:
        bounds = obj.get("bounds")
        if not isinstance(bounds, Mapping):
            bounds = {}

        return RawNode(
            id=as_str(obj.get("id")),
            type=as_str(obj.get("type")) or "",
            name=as_str(obj.get("name")) or "",
            text=as_str(obj.get("text")),
            visible=as_bool(obj.get("visible"), True),
            enabled=as_bool(obj.get("enabled"), True),
            bounds=Rect(
                as_int(bounds.get("x")),
                as_int(bounds.get("y")),
                as_int(bounds.get("w")),
                as_int(bounds.get("h")),
            ),
            vendor_kind=self._vendor_kind(obj.get("metadata")),
            children=tuple(self.parse(obj.get("children"))),
        )

    def _vendor_kind(self, metadata: Any) -> str | None:
        if not isinstance(metadata, Mapping):
            return None

        for key in self.vendor_metadata_keys:
            section = metadata.get(key)
            if isinstance(section, Mapping):
                kind = section.get("kind")
                if isinstance(kind, str) and kind:
                    return kind
        return None


def normalize_nodes(items: Any, parent_x: int = 0, parent_y: int = 0) -> list[NormalizedNode]:
    """Normalize a raw node array with default settings."""
    return TreeNormalizer().normalize(items, parent_x, parent_y)
