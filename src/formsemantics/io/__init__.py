"""Reading UI dump bundles and writing semantic bundles."""

from .reader import UiDumpBundleReader
from .writer import SEMANTIC_FILE_NAME, SemanticBundleWriter

__all__ = ["SEMANTIC_FILE_NAME", "SemanticBundleWriter", "UiDumpBundleReader"]
