"""Semantic bundle writer."""

from __future__ import annotations

import logging
from pathlib import Path

from ..bundle_exceptions import BundleWriteException
from ..model.bundle import SemanticBundle

logger = logging.getLogger(__name__)

SEMANTIC_FILE_NAME = "semantic.json"


class SemanticBundleWriter:
    """Serializes a ``SemanticBundle`` to ``semantic.json``."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def dumps(self, bundle: SemanticBundle) -> str:
        """Render the bundle as JSON text, omitting absent optional fields."""
        return bundle.to_json(indent=self.indent)

    def write(self, bundle: SemanticBundle, output_directory: str | Path) -> Path:
        """Write ``semantic.json`` into ``output_directory``, creating it if needed.

        Returns:
            Path of the written file

        Raises:
            BundleWriteException: If the directory is blank or the write fails
        """
        if not str(output_directory).strip():
            raise BundleWriteException(str(output_directory), "output directory is empty")

        directory = Path(output_directory)
        output_path = directory / SEMANTIC_FILE_NAME
        try:
            directory.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.dumps(bundle), encoding="utf-8")
        except OSError as e:
            raise BundleWriteException(str(output_path), str(e)) from e

        logger.debug("Wrote semantic bundle to %s", output_path)
        return output_path
