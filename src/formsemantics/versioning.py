"""Schema version compatibility policy for UI dump bundles.

A consumer accepts any bundle whose MAJOR component equals its own. A higher
MAJOR is rejected unless explicitly allowed; MINOR differences are always
accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

from .bundle_exceptions import IncompatibleSchemaVersionException


@dataclass(frozen=True)
class SchemaVersion:
    """A parsed ``MAJOR.MINOR`` version."""

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str | None) -> SchemaVersion | None:
        """Parse ``MAJOR.MINOR[.anything]``.

        Returns:
            SchemaVersion, or None when the text is blank or malformed
        """
        if not text or not text.strip():
            return None

        parts = text.strip().split(".")
        if len(parts) < 2:
            return None

        try:
            return cls(int(parts[0]), int(parts[1]))
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class SchemaVersionPolicy:
    """Decides whether a bundle's schemaVersion can be consumed.

    Example:
        ```python
        policy = SchemaVersionPolicy("1.0")
        policy.is_compatible("1.3")                           # True
        policy.is_compatible("2.0")                           # False
        policy.is_compatible("2.0", allow_higher_major=True)  # True
        ```
    """

    def __init__(self, consumer_version: str = "1.0") -> None:
        parsed = SchemaVersion.parse(consumer_version)
        if parsed is None:
            raise ValueError(f"Invalid consumer schema version: {consumer_version!r}")
        self.consumer_version = parsed

    def is_compatible(self, bundle_version: str | None, allow_higher_major: bool = False) -> bool:
        """Check a bundle version against the consumer version.

        Args:
            bundle_version: The bundle's schemaVersion string
            allow_higher_major: Accept a newer MAJOR than the consumer's

        Returns:
            True if the bundle can be consumed
        """
        parsed = SchemaVersion.parse(bundle_version)
        if parsed is None:
            return False

        if parsed.major > self.consumer_version.major:
            return allow_higher_major

        return parsed.major == self.consumer_version.major

    def validate(self, bundle_version: str | None, allow_higher_major: bool = False) -> SchemaVersion:
        """Validate a bundle version.

        Returns:
            The parsed bundle version

        Raises:
            IncompatibleSchemaVersionException: If the version is rejected
        """
        parsed = SchemaVersion.parse(bundle_version)
        if parsed is None or not self.is_compatible(bundle_version, allow_higher_major):
            raise IncompatibleSchemaVersionException(
                str(bundle_version), str(self.consumer_version)
            )
        return parsed
