"""formsemantics - semantic annotation of captured UI control trees.

Given a UI dump bundle (a form's widget hierarchy with bounds and optional
vendor metadata), the pipeline normalizes the tree, assigns each node ranked
roles with confidence and evidence, and detects layout regions and
multi-node interaction patterns.

Usage:
    from formsemantics import SemanticPipeline, UiDumpBundleReader, SemanticBundleWriter

    document = UiDumpBundleReader().read_file("form.json")
    result = SemanticPipeline().run(document)
    SemanticBundleWriter().write(result.bundle, "out/")
"""

__version__ = "0.1.0"

from .base_exceptions import FormSemanticsException
from .bundle_exceptions import (
    BundleException,
    BundleReadException,
    BundleWriteException,
    IncompatibleSchemaVersionException,
    MissingBundleFieldException,
)
from .diagnostics import PipelineWarning, PipelineWarnings, WarningSeverity
from .io import SemanticBundleWriter, UiDumpBundleReader
from .model import (
    Annotation,
    NodeAnnotation,
    NormalizedNode,
    RoleAssignment,
    RoleConfidence,
    SemanticBundle,
    SemanticPattern,
    SemanticRegion,
)
from .semantic import (
    BundleAssembler,
    HeuristicRoleScorer,
    PipelineResult,
    RegionPatternDetector,
    SemanticPipeline,
    TreeNormalizer,
    TypeRoleClassifier,
)
from .versioning import SchemaVersion, SchemaVersionPolicy

__all__ = [
    "__version__",
    "Annotation",
    "BundleAssembler",
    "BundleException",
    "BundleReadException",
    "BundleWriteException",
    "FormSemanticsException",
    "HeuristicRoleScorer",
    "IncompatibleSchemaVersionException",
    "MissingBundleFieldException",
    "NodeAnnotation",
    "NormalizedNode",
    "PipelineResult",
    "PipelineWarning",
    "PipelineWarnings",
    "RegionPatternDetector",
    "RoleAssignment",
    "RoleConfidence",
    "SchemaVersion",
    "SchemaVersionPolicy",
    "SemanticBundle",
    "SemanticBundleWriter",
    "SemanticPattern",
    "SemanticPipeline",
    "SemanticRegion",
    "TreeNormalizer",
    "TypeRoleClassifier",
    "UiDumpBundleReader",
    "WarningSeverity",
]
