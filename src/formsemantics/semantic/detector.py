"""Region and pattern detection - fourth pipeline stage.

Deterministic spatial heuristics over the normalized nodes and the refined
annotations. Ties are broken by input order: the first node encountered wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..model.annotation import DetectedPattern, DetectedRegion, NodeAnnotation
from ..model.evidence import Evidence, EvidenceCode
from ..model.node import NormalizedNode, Rect
from .role_tables import ACTION_ROLE

logger = logging.getLogger(__name__)

ACTION_BAR = "ActionBar"
CONTENT_AREA = "ContentArea"
PRIMARY_SECONDARY_ACTIONS = "PrimarySecondaryActions"


@dataclass(frozen=True)
class DetectionThresholds:
    """Constants for the spatial heuristics."""

    action_bar_max_height: int = 50
    action_bar_min_y_ratio: float = 0.8
    action_bar_confidence: float = 0.75
    content_min_width_ratio: float = 0.5
    content_min_height_ratio: float = 0.3
    content_confidence: float = 0.80
    action_pair_confidence: float = 0.75


class RegionPatternDetector:
    """Detects layout regions and multi-node interaction patterns.

    Example:
        ```python
        detector = RegionPatternDetector()
        regions = detector.detect_regions(nodes, form_width=800, form_height=600)
        patterns = detector.detect_patterns(annotations)
        ```
    """

    def __init__(self, thresholds: DetectionThresholds | None = None) -> None:
        self.thresholds = thresholds or DetectionThresholds()

    def detect_regions(
        self, nodes: Sequence[NormalizedNode], form_width: int, form_height: int
    ) -> list[DetectedRegion]:
        """Detect the action bar and content area, in that order."""
        regions: list[DetectedRegion] = []
        if not nodes:
            return regions

        action_bar = self._detect_action_bar(nodes, form_height)
        if action_bar is not None:
            regions.append(action_bar)

        content = self._detect_content_area(nodes, form_width, form_height)
        if content is not None:
            regions.append(content)

        logger.debug("Detected %d regions", len(regions))
        return regions

    def detect_patterns(self, annotations: Sequence[NodeAnnotation]) -> list[DetectedPattern]:
        """Detect the primary/secondary action pair."""
        patterns: list[DetectedPattern] = []

        pair = self._detect_action_pair(annotations)
        if pair is not None:
            patterns.append(pair)

        logger.debug("Detected %d patterns", len(patterns))
        return patterns

    def _detect_action_bar(
        self, nodes: Sequence[NormalizedNode], form_height: int
    ) -> DetectedRegion | None:
        t = self.thresholds
        min_y = form_height * t.action_bar_min_y_ratio
        candidates = [n for n in nodes if n.h <= t.action_bar_max_height and n.abs_y > min_y]
        if not candidates:
            return None

        return DetectedRegion(
            name=ACTION_BAR,
            bounds=Rect.union(n.bounds for n in candidates),
            confidence=t.action_bar_confidence,
            node_ids=tuple(n.id for n in candidates),
        )

    def _detect_content_area(
        self, nodes: Sequence[NormalizedNode], form_width: int, form_height: int
    ) -> DetectedRegion | None:
        t = self.thresholds
        candidates = [
            n
            for n in nodes
            if n.w > form_width * t.content_min_width_ratio
            and n.h > form_height * t.content_min_height_ratio
        ]
        if not candidates:
            return None

        # max() keeps the first of equally large candidates
        content = max(candidates, key=lambda n: n.area)
        return DetectedRegion(
            name=CONTENT_AREA,
            bounds=content.bounds,
            confidence=t.content_confidence,
            node_ids=(content.id,),
        )

    def _detect_action_pair(self, annotations: Sequence[NodeAnnotation]) -> DetectedPattern | None:
        actions = [a for a in annotations if a.top_role == ACTION_ROLE]
        if len(actions) < 2:
            return None

        primary = max(actions, key=lambda a: a.top_confidence)
        # Annotations sharing the primary's id cannot form a distinct pair
        remainder = [a for a in actions if a.node_id != primary.node_id]
        if not remainder:
            return None
        secondary = max(remainder, key=lambda a: a.top_confidence)

        return DetectedPattern(
            name=PRIMARY_SECONDARY_ACTIONS,
            confidence=self.thresholds.action_pair_confidence,
            node_ids=(primary.node_id, secondary.node_id),
            evidence=(Evidence(EvidenceCode.ACTION_COUNT, str(len(actions))),),
        )


def detect_regions(
    nodes: Sequence[NormalizedNode], form_width: int, form_height: int
) -> list[DetectedRegion]:
    return RegionPatternDetector().detect_regions(nodes, form_width, form_height)


def detect_patterns(annotations: Sequence[NodeAnnotation]) -> list[DetectedPattern]:
    return RegionPatternDetector().detect_patterns(annotations)
