"""Non-fatal diagnostics collected while a pipeline run degrades gracefully."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class WarningSeverity(str, Enum):
    """Severity of a pipeline diagnostic."""

    INFO = "Info"
    WARNING = "Warning"


@dataclass(frozen=True)
class PipelineWarning:
    """Single diagnostic entry emitted during a run."""

    severity: WarningSeverity
    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.code}: {self.message}"


@dataclass
class PipelineWarnings:
    """Accumulates diagnostics instead of raising."""

    items: list[PipelineWarning] = field(default_factory=list)

    def add_info(self, code: str, message: str) -> None:
        self.items.append(PipelineWarning(WarningSeverity.INFO, code, message))

    def add_warning(self, code: str, message: str) -> None:
        self.items.append(PipelineWarning(WarningSeverity.WARNING, code, message))

    def codes(self) -> list[str]:
        return [item.code for item in self.items]

    def to_string_list(self) -> list[str]:
        return [str(item) for item in self.items]

    def __iter__(self) -> Iterator[PipelineWarning]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
