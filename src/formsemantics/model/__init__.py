"""Data contracts shared by the pipeline stages and the bundle writer."""

from .annotation import (
    DetectedPattern,
    DetectedRegion,
    NodeAnnotation,
    RoleAssignment,
    sort_roles,
)
from .bundle import (
    Annotation,
    BundleRect,
    FormInfo,
    RoleConfidence,
    SemanticBundle,
    SemanticPattern,
    SemanticRegion,
)
from .evidence import Evidence, EvidenceCode
from .node import NormalizedNode, RawNode, Rect

__all__ = [
    "Annotation",
    "BundleRect",
    "DetectedPattern",
    "DetectedRegion",
    "Evidence",
    "EvidenceCode",
    "FormInfo",
    "NodeAnnotation",
    "NormalizedNode",
    "RawNode",
    "Rect",
    "RoleAssignment",
    "RoleConfidence",
    "SemanticBundle",
    "SemanticPattern",
    "SemanticRegion",
    "sort_roles",
]
