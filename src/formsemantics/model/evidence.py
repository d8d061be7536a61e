"""Structured evidence attached to role assignments and patterns.

Evidence is kept as ``(code, value)`` pairs so tests and consumers can check
it without substring matching; it is rendered to display strings only when a
bundle is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EvidenceCode(str, Enum):
    """Kinds of evidence the pipeline emits."""

    VENDOR_KIND = "vendor.kind"
    TYPE = "type"
    ACTION_KEYWORD = "text.action-keyword"
    PRIMARY_ACTION_KEYWORD = "text.primary-action-keyword"
    COMPACT_BOUNDS = "bounds.compact"
    ACTION_COUNT = "pattern.action-count"


_TEMPLATES: dict[EvidenceCode, str] = {
    EvidenceCode.VENDOR_KIND: "vendor.kind={value}",
    EvidenceCode.TYPE: "type={value}",
    EvidenceCode.ACTION_KEYWORD: "text='{value}' matches action keyword",
    EvidenceCode.PRIMARY_ACTION_KEYWORD: "text='{value}' matches primary action keyword",
    EvidenceCode.COMPACT_BOUNDS: "bounds=compact-button-region",
    EvidenceCode.ACTION_COUNT: "Two or more action-role nodes detected",
}


@dataclass(frozen=True)
class Evidence:
    """A single justification for a score."""

    code: EvidenceCode
    value: str = ""

    def render(self) -> str:
        """Human-readable form written to the semantic bundle."""
        return _TEMPLATES[self.code].format(value=self.value)

    def __str__(self) -> str:
        return self.render()
