"""Bundle exceptions.

This module contains exceptions for reading UI dump bundles, checking
their schema version, and writing semantic bundles.
"""

from .base_exceptions import FormSemanticsException


class BundleException(FormSemanticsException):
    """Base exception for bundle errors."""

    pass


class BundleReadException(BundleException):
    """Raised when a UI dump bundle cannot be read or parsed."""

    def __init__(self, source: str, reason: str, **kwargs) -> None:
        """Initialize with source details."""
        super().__init__(
            f"Cannot read bundle '{source}': {reason}",
            error_code="BUNDLE_READ_ERROR",
            context={"source": source, "reason": reason, **kwargs},
        )


class MissingBundleFieldException(BundleException):
    """Raised when a required top-level bundle field is missing."""

    def __init__(self, field_name: str, **kwargs) -> None:
        """Initialize with the missing field name."""
        super().__init__(
            f"Missing required field '{field_name}' in bundle",
            error_code="MISSING_BUNDLE_FIELD",
            context={"field": field_name, **kwargs},
        )


class IncompatibleSchemaVersionException(BundleException):
    """Raised when a bundle's schemaVersion is rejected by the consumer."""

    def __init__(self, bundle_version: str, consumer_version: str, **kwargs) -> None:
        """Initialize with both versions."""
        super().__init__(
            f"Bundle schemaVersion '{bundle_version}' is incompatible with "
            f"consumer version '{consumer_version}'",
            error_code="INCOMPATIBLE_SCHEMA_VERSION",
            context={
                "bundle_version": bundle_version,
                "consumer_version": consumer_version,
                **kwargs,
            },
        )


class BundleWriteException(BundleException):
    """Raised when a semantic bundle cannot be written."""

    def __init__(self, destination: str, reason: str, **kwargs) -> None:
        """Initialize with destination details."""
        super().__init__(
            f"Cannot write semantic bundle to '{destination}': {reason}",
            error_code="BUNDLE_WRITE_ERROR",
            context={"destination": destination, "reason": reason, **kwargs},
        )
