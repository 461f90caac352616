"""Unit tests for case-insensitive variant lookup."""

import pytest

from oscalviz.common.exceptions import UnknownFormatError, UnknownVariantError
from oscalviz.common.variants import lookup_variant
from oscalviz.models.enums import (
    AssessmentStatus,
    FindingClassification,
    OscalFormat,
    ValidationRuleSeverity,
    ValidationRuleType,
)


@pytest.mark.unit
class TestOscalFormat:
    """Test cases for OscalFormat parsing."""

    @pytest.mark.parametrize("raw", ["json", "JSON", "Json", " json "])
    def test_case_insensitive(self, raw):
        """Test any casing resolves to the same member."""
        assert OscalFormat.from_string(raw) is OscalFormat.JSON

    def test_all_formats(self):
        """Test every format resolves."""
        assert OscalFormat.from_string("xml") is OscalFormat.XML
        assert OscalFormat.from_string("YAML") is OscalFormat.YAML

    def test_unknown_format(self):
        """Test unknown format raises with the offending input."""
        with pytest.raises(UnknownFormatError) as exc_info:
            OscalFormat.from_string("toml")

        assert str(exc_info.value) == "Unknown format: toml"
        assert exc_info.value.raw == "toml"
        assert exc_info.value.kind == "format"

    def test_none_is_unknown(self):
        """Test None is rejected rather than passed through."""
        with pytest.raises(UnknownFormatError, match="Unknown format: None"):
            OscalFormat.from_string(None)

    def test_str_is_value(self):
        """Test str() renders the wire value."""
        assert str(OscalFormat.YAML) == "yaml"


@pytest.mark.unit
class TestValidationRuleVariants:
    """Test cases for validation rule severity and type parsing."""

    def test_severity_lookup(self):
        """Test severities resolve case-insensitively."""
        assert ValidationRuleSeverity.from_string("Warning") is ValidationRuleSeverity.WARNING
        assert ValidationRuleSeverity.from_string("ERROR") is ValidationRuleSeverity.ERROR

    def test_severity_unknown_message(self):
        """Test severity error message format."""
        with pytest.raises(UnknownVariantError, match="Unknown validation rule severity: fatal"):
            ValidationRuleSeverity.from_string("fatal")

    def test_type_lookup_by_value(self):
        """Test rule types resolve by hyphenated value."""
        assert ValidationRuleType.from_string("id-reference") is ValidationRuleType.ID_REFERENCE
        assert ValidationRuleType.from_string("Cross-Field") is ValidationRuleType.CROSS_FIELD

    def test_type_lookup_by_name(self):
        """Test rule types also resolve by member name."""
        assert ValidationRuleType.from_string("DATA_TYPE") is ValidationRuleType.DATA_TYPE

    def test_type_unknown_message(self):
        """Test rule type error message format."""
        with pytest.raises(UnknownVariantError) as exc_info:
            ValidationRuleType.from_string("regex")

        assert exc_info.value.message == "Unknown validation rule type: regex"
        assert exc_info.value.to_dict()["error"] == "UNKNOWN_VARIANT"


@pytest.mark.unit
class TestAssessmentVariants:
    """Test cases for classification and status parsing."""

    def test_classification_values(self):
        """Test classification values match assessment results vocabulary."""
        assert FindingClassification.from_string("not-satisfied") is FindingClassification.NOT_SATISFIED
        assert FindingClassification.from_string("Satisfied") is FindingClassification.SATISFIED

    def test_status_by_value_and_name(self):
        """Test statuses resolve by display value and member name."""
        assert AssessmentStatus.from_string("notapplicable") is AssessmentStatus.NOT_APPLICABLE
        assert AssessmentStatus.from_string("partially_satisfied") is AssessmentStatus.PARTIALLY_SATISFIED

    def test_member_passes_through(self):
        """Test an existing member is returned unchanged."""
        assert lookup_variant(
            FindingClassification, FindingClassification.UNDETERMINED, "finding classification"
        ) is FindingClassification.UNDETERMINED

    def test_non_string_rejected(self):
        """Test non-string input raises."""
        with pytest.raises(UnknownVariantError, match="Unknown assessment status: 3"):
            AssessmentStatus.from_string(3)
