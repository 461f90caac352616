"""Closed variant sets used across OSCAL documents and results."""

from oscalviz.common.exceptions import UnknownFormatError, UnknownVariantError
from oscalviz.common.variants import VariantEnum


class OscalFormat(VariantEnum):
    """Serialization format of an OSCAL document."""

    XML = "xml"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def variant_kind(cls) -> str:
        return "format"

    @classmethod
    def variant_error(cls) -> type[UnknownVariantError]:
        return UnknownFormatError


class ValidationRuleSeverity(VariantEnum):
    """Severity of a validation rule."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def variant_kind(cls) -> str:
        return "validation rule severity"


class ValidationRuleType(VariantEnum):
    """Kind of check a validation rule performs."""

    REQUIRED_FIELD = "required-field"
    PATTERN_MATCH = "pattern-match"
    ALLOWED_VALUES = "allowed-values"
    CARDINALITY = "cardinality"
    CROSS_FIELD = "cross-field"
    ID_REFERENCE = "id-reference"
    DATA_TYPE = "data-type"
    CUSTOM = "custom"

    @classmethod
    def variant_kind(cls) -> str:
        return "validation rule type"


class FindingClassification(VariantEnum):
    """Outcome recorded by a finding or observation against a control."""

    SATISFIED = "satisfied"
    NOT_SATISFIED = "not-satisfied"
    UNDETERMINED = "undetermined"

    @classmethod
    def variant_kind(cls) -> str:
        return "finding classification"


class AssessmentStatus(VariantEnum):
    """Derived satisfaction state of an assessed control."""

    SATISFIED = "Satisfied"
    NOT_SATISFIED = "NotSatisfied"
    PARTIALLY_SATISFIED = "PartiallySatisfied"
    NOT_APPLICABLE = "NotApplicable"

    @classmethod
    def variant_kind(cls) -> str:
        return "assessment status"
