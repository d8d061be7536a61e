"""UI dump bundle reader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..bundle_exceptions import BundleReadException

logger = logging.getLogger(__name__)


class UiDumpBundleReader:
    """Reads a UI dump bundle (``form.json``) into a plain dict.

    Structural checks beyond "is a JSON object" are left to the pipeline,
    which fails fast on missing required fields.
    """

    def read_file(self, path: str | Path) -> dict[str, Any]:
        """Read and parse a bundle file.

        Raises:
            BundleReadException: If the file is missing, unreadable or not a JSON object
        """
        path = Path(path)
        if not path.is_file():
            raise BundleReadException(str(path), "file not found")

        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise BundleReadException(str(path), str(e)) from e

        document = self.read_text(text, source=str(path))
        logger.debug("Read bundle %s (%d bytes)", path, len(text))
        return document

    def read_text(self, text: str, source: str = "<text>") -> dict[str, Any]:
        """Parse bundle JSON text.

        Raises:
            BundleReadException: If the text is blank, invalid JSON or not an object
        """
        if not text or not text.strip():
            raise BundleReadException(source, "JSON text is empty")

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise BundleReadException(source, f"invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise BundleReadException(source, "top-level JSON value is not an object")

        return document
