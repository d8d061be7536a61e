"""Semantic annotation pipeline for captured UI control trees.

Stages, leaves first: tree normalization, type-based role classification,
heuristic scoring, region/pattern detection and bundle assembly.
"""

from .assembler import BundleAssembler
from .classifier import TypeRoleClassifier, classify
from .detector import (
    ACTION_BAR,
    CONTENT_AREA,
    PRIMARY_SECONDARY_ACTIONS,
    DetectionThresholds,
    RegionPatternDetector,
    detect_patterns,
    detect_regions,
)
from .heuristics import HeuristicRoleScorer, HeuristicSettings, score
from .normalizer import TreeNormalizer, normalize_nodes
from .pipeline import PipelineResult, SemanticPipeline, parse_form
from .role_tables import (
    ACTION_ROLE,
    UNKNOWN_ROLE,
    VENDOR_KIND_ROLES,
    WIDGET_TYPE_ROLES,
    RoleEntry,
    RoleTable,
)

__all__ = [
    "ACTION_BAR",
    "ACTION_ROLE",
    "CONTENT_AREA",
    "PRIMARY_SECONDARY_ACTIONS",
    "UNKNOWN_ROLE",
    "VENDOR_KIND_ROLES",
    "WIDGET_TYPE_ROLES",
    "BundleAssembler",
    "DetectionThresholds",
    "HeuristicRoleScorer",
    "HeuristicSettings",
    "PipelineResult",
    "RegionPatternDetector",
    "RoleEntry",
    "RoleTable",
    "SemanticPipeline",
    "TreeNormalizer",
    "TypeRoleClassifier",
    "classify",
    "detect_patterns",
    "detect_regions",
    "normalize_nodes",
    "parse_form",
    "score",
]
