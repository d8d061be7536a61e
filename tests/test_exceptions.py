"""Tests for the exception hierarchy."""

from formsemantics.base_exceptions import FormSemanticsException
from formsemantics.bundle_exceptions import (
    BundleReadException,
    IncompatibleSchemaVersionException,
    MissingBundleFieldException,
)


class TestFormSemanticsException:
    """Tests for the root exception."""

    def test_str_includes_code(self):
        assert str(FormSemanticsException("boom", error_code="X")) == "[X] boom"
        assert str(FormSemanticsException("boom")) == "boom"

    def test_with_source_records_bundle(self):
        error = MissingBundleFieldException("form").with_source("in/form.json")

        assert error.source == "in/form.json"
        assert error.context == {"field": "form", "source": "in/form.json"}

    def test_with_source_keeps_existing_source(self):
        error = BundleReadException("a.json", "file not found")

        assert error.with_source("b.json") is error
        assert error.source == "a.json"

    def test_source_unknown_by_default(self):
        error = IncompatibleSchemaVersionException("2.0", "1.0")

        assert error.source is None
        assert error.error_code == "INCOMPATIBLE_SCHEMA_VERSION"
