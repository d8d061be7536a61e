"""Bundle assembly - final pipeline stage.

Converts the pipeline's internal records into the wire models, rendering
structured evidence to display strings. Empty region, pattern and warning
lists are left out of the document entirely.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..model.annotation import DetectedPattern, DetectedRegion, NodeAnnotation
from ..model.bundle import (
    Annotation,
    BundleRect,
    FormInfo,
    RoleConfidence,
    SemanticBundle,
    SemanticPattern,
    SemanticRegion,
)


class BundleAssembler:
    """Builds a ``SemanticBundle`` from one run's results."""

    def __init__(self, semantic_version: str = "1.0") -> None:
        self.semantic_version = semantic_version

    def assemble(
        self,
        form: FormInfo,
        source_schema_version: str,
        annotations: Sequence[NodeAnnotation],
        regions: Sequence[DetectedRegion] = (),
        patterns: Sequence[DetectedPattern] = (),
        warnings: Iterable[str] = (),
    ) -> SemanticBundle:
        """Assemble the output document.

        Args:
            form: Form descriptor echoed from the input
            source_schema_version: The input bundle's schemaVersion
            annotations: One annotation per normalized node
            regions: Detected regions
            patterns: Detected patterns
            warnings: Rendered diagnostics

        Returns:
            The assembled bundle
        """
        warning_list = list(warnings)
        return SemanticBundle(
            semantic_version=self.semantic_version,
            source_schema_version=source_schema_version,
            form=form,
            annotations=[to_annotation(a) for a in annotations],
            regions=[to_region(r) for r in regions] or None,
            patterns=[to_pattern(p) for p in patterns] or None,
            warnings=warning_list or None,
        )


def to_annotation(annotation: NodeAnnotation) -> Annotation:
    return Annotation(
        node_id=annotation.node_id,
        roles=[
            RoleConfidence(
                role=r.role,
                confidence=r.confidence,
                evidence=[e.render() for e in r.evidence],
            )
            for r in annotation.roles
        ],
        hints=dict(annotation.hints) if annotation.hints is not None else None,
        tags=list(annotation.tags) if annotation.tags is not None else None,
    )


def to_region(region: DetectedRegion) -> SemanticRegion:
    b = region.bounds
    return SemanticRegion(
        name=region.name,
        bounds=BundleRect(x=b.x, y=b.y, w=b.w, h=b.h),
        confidence=region.confidence,
        node_ids=list(region.node_ids) or None,
    )


def to_pattern(pattern: DetectedPattern) -> SemanticPattern:
    return SemanticPattern(
        name=pattern.name,
        confidence=pattern.confidence,
        node_ids=list(pattern.node_ids) or None,
        evidence=[e.render() for e in pattern.evidence] or None,
    )
