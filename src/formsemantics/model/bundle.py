"""
Semantic Bundle Wire Models

Pydantic models for the semantic bundle document written by the pipeline.
Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FormInfo(BaseModel):
    """Descriptor of the captured form, echoed from the input bundle."""

    name: str = Field(description="Form name")
    type: str = Field(description="Fully-qualified form type name")
    width: int = Field(description="Form width in pixels")
    height: int = Field(description="Form height in pixels")
    dpi: int | None = Field(None, description="Capture DPI, when known")

    model_config = {"populate_by_name": True}


class BundleRect(BaseModel):
    """Axis-aligned rectangle in form-space pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class RoleConfidence(BaseModel):
    """A role with its confidence and rendered evidence trail."""

    role: str = Field(description="Semantic role tag, e.g. 'Action'")
    confidence: float = Field(ge=0.0, le=1.0, description="Certainty in [0, 1]")
    evidence: list[str] = Field(
        default_factory=list, description="Human-readable justifications, in order"
    )


class Annotation(BaseModel):
    """Role hypotheses for one node, highest confidence first."""

    node_id: str = Field(alias="nodeId", description="Id of the annotated node")
    roles: list[RoleConfidence] = Field(description="Roles sorted by descending confidence")
    hints: dict[str, Any] | None = Field(None, description="Reserved for future heuristics")
    tags: list[str] | None = Field(None, description="Reserved for future heuristics")

    model_config = {"populate_by_name": True}


class SemanticRegion(BaseModel):
    """A coarse layout region."""

    name: str = Field(description="Region name, e.g. 'ActionBar'")
    bounds: BundleRect = Field(description="Union bounds of the member nodes")
    confidence: float | None = Field(None, ge=0.0, le=1.0)
    node_ids: list[str] | None = Field(None, alias="nodeIds")

    model_config = {"populate_by_name": True}


class SemanticPattern(BaseModel):
    """A multi-node interaction pattern."""

    name: str = Field(description="Pattern name, e.g. 'PrimarySecondaryActions'")
    confidence: float = Field(ge=0.0, le=1.0)
    node_ids: list[str] | None = Field(None, alias="nodeIds")
    evidence: list[str] | None = None

    model_config = {"populate_by_name": True}


class SemanticBundle(BaseModel):
    """Root document produced by one pipeline run."""

    semantic_version: str = Field(alias="semanticVersion")
    source_schema_version: str = Field(alias="sourceSchemaVersion")
    form: FormInfo
    annotations: list[Annotation]
    regions: list[SemanticRegion] | None = None
    patterns: list[SemanticPattern] | None = None
    warnings: list[str] | None = None

    model_config = {"populate_by_name": True}

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def get_annotation(self, node_id: str) -> Annotation | None:
        """First annotation for ``node_id``, if any."""
        return next((a for a in self.annotations if a.node_id == node_id), None)

    def get_region(self, name: str) -> SemanticRegion | None:
        return next((r for r in self.regions or [] if r.name == name), None)

    def get_pattern(self, name: str) -> SemanticPattern | None:
        return next((p for p in self.patterns or [] if p.name == name), None)
