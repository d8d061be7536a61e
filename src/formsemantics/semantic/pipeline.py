"""Semantic pipeline - runs every stage over one UI dump bundle.

Each stage depends only on the previous stage's output::

    normalize -> classify -> score -> detect regions/patterns -> assemble

Only the bundle's top-level fields can fail a run. Once normalization
succeeds, the remaining stages are total over their input.
"""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..bundle_exceptions import MissingBundleFieldException
from ..config import SemanticSettings, get_settings
from ..diagnostics import PipelineWarnings
from ..logging import LogContext, PerformanceLogger, get_logger
from ..model.annotation import DetectedPattern, DetectedRegion, NodeAnnotation
from ..model.bundle import FormInfo, SemanticBundle
from ..model.node import NormalizedNode
from ..versioning import SchemaVersionPolicy
from .assembler import BundleAssembler
from .classifier import TypeRoleClassifier
from .detector import RegionPatternDetector
from .heuristics import HeuristicRoleScorer
from .normalizer import TreeNormalizer, as_int, as_str

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """Everything one run produced, for callers that need more than the bundle."""

    bundle: SemanticBundle
    nodes: list[NormalizedNode] = field(default_factory=list)
    annotations: list[NodeAnnotation] = field(default_factory=list)
    regions: list[DetectedRegion] = field(default_factory=list)
    patterns: list[DetectedPattern] = field(default_factory=list)
    warnings: PipelineWarnings = field(default_factory=PipelineWarnings)
    timings: dict[str, Any] = field(default_factory=dict)


def parse_form(document: Mapping[str, Any]) -> FormInfo:
    """Read the ``form`` descriptor.

    Raises:
        MissingBundleFieldException: If ``form`` is missing or not an object
    """
    form = document.get("form")
    if not isinstance(form, Mapping):
        raise MissingBundleFieldException("form")

    dpi = form.get("dpi")
    return FormInfo(
        name=as_str(form.get("name")) or "",
        type=as_str(form.get("type")) or "",
        width=as_int(form.get("width")),
        height=as_int(form.get("height")),
        dpi=as_int(dpi) if dpi is not None else None,
    )


class SemanticPipeline:
    """Runs the annotation pipeline over parsed UI dump bundles.

    A pipeline holds no per-run state, so one instance can process any number
    of bundles.

    Example:
        ```python
        pipeline = SemanticPipeline()
        result = pipeline.run(UiDumpBundleReader().read_file("form.json"))
        SemanticBundleWriter().write(result.bundle, "out/")
        ```
    """

    def __init__(
        self,
        settings: SemanticSettings | None = None,
        classifier: TypeRoleClassifier | None = None,
        scorer: HeuristicRoleScorer | None = None,
        detector: RegionPatternDetector | None = None,
        allow_higher_major: bool | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Settings to use; defaults to the global settings
            classifier: Role classifier; defaults to the built-in tables
            scorer: Heuristic scorer; defaults to built-in keywords and thresholds
            detector: Region/pattern detector; defaults to built-in thresholds
            allow_higher_major: Override for ``settings.allow_higher_major``
        """
        self.settings = settings or get_settings()
        self.policy = SchemaVersionPolicy(self.settings.consumer_schema_version)
        self.classifier = classifier or TypeRoleClassifier()
        self.scorer = scorer or HeuristicRoleScorer()
        self.detector = detector or RegionPatternDetector()
        self.assembler = BundleAssembler(self.settings.semantic_version)
        self.allow_higher_major = (
            self.settings.allow_higher_major if allow_higher_major is None else allow_higher_major
        )

    def run(self, document: Mapping[str, Any]) -> PipelineResult:
        """Annotate one parsed UI dump bundle.

        Args:
            document: Parsed bundle with ``schemaVersion``, ``form`` and ``nodes``

        Returns:
            PipelineResult holding the assembled bundle and intermediate results

        Raises:
            MissingBundleFieldException: If ``form`` or ``schemaVersion`` is missing
            IncompatibleSchemaVersionException: If the schemaVersion is rejected
        """
        warnings = PipelineWarnings()

        form = parse_form(document)
        schema_version = self._check_version(document, warnings)

        raw_nodes = document.get("nodes")
        if raw_nodes is not None and not isinstance(raw_nodes, list):
            warnings.add_warning("NODES_NOT_ARRAY", "'nodes' is not an array; treated as empty")

        with LogContext(logger, form=form.name) as run_logger:
            performance = PerformanceLogger(run_logger)

            start = time.perf_counter()
            normalizer = TreeNormalizer(self.settings.vendor_metadata_keys, warnings)
            nodes = normalizer.normalize(raw_nodes)
            self._check_duplicate_ids(nodes, warnings)
            performance.log_timing("normalize", time.perf_counter() - start, nodes=len(nodes))

            start = time.perf_counter()
            annotations = self.classifier.classify(nodes)
            performance.log_timing("classify", time.perf_counter() - start)

            start = time.perf_counter()
            annotations = self.scorer.score(annotations, nodes)
            performance.log_timing("score", time.perf_counter() - start)

            start = time.perf_counter()
            regions = self.detector.detect_regions(nodes, form.width, form.height)
            patterns = self.detector.detect_patterns(annotations)
            performance.log_timing("detect", time.perf_counter() - start)

            bundle = self.assembler.assemble(
                form=form,
                source_schema_version=schema_version,
                annotations=annotations,
                regions=regions,
                patterns=patterns,
                warnings=warnings.to_string_list(),
            )

            timings = performance.get_stats()
            run_logger.info(
                "pipeline_completed",
                nodes=len(nodes),
                annotations=len(annotations),
                regions=len(regions),
                patterns=len(patterns),
                warnings=len(warnings),
                seconds={stage: stats["total"] for stage, stats in timings.items()},
            )

        return PipelineResult(
            bundle=bundle,
            nodes=nodes,
            annotations=annotations,
            regions=regions,
            patterns=patterns,
            warnings=warnings,
            timings=timings,
        )

    def _check_version(self, document: Mapping[str, Any], warnings: PipelineWarnings) -> str:
        raw = document.get("schemaVersion")
        if raw is None:
            raise MissingBundleFieldException("schemaVersion")

        version_text = str(raw)
        parsed = self.policy.validate(version_text, self.allow_higher_major)
        consumer = self.policy.consumer_version

        if parsed.major > consumer.major:
            warnings.add_warning(
                "HIGHER_MAJOR_ACCEPTED",
                f"schemaVersion {version_text} is newer than {consumer}; accepted by override",
            )
        elif parsed.minor > consumer.minor:
            warnings.add_info(
                "NEWER_MINOR_VERSION",
                f"schemaVersion {version_text} has a newer minor version than {consumer}",
            )

        return version_text

    @staticmethod
    def _check_duplicate_ids(nodes: list[NormalizedNode], warnings: PipelineWarnings) -> None:
        counts = Counter(node.id for node in nodes)
        for node_id, count in counts.items():
            if count > 1:
                warnings.add_warning(
                    "DUPLICATE_NODE_ID", f"Node id '{node_id}' appears {count} times"
                )
