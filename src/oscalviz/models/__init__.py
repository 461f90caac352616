"""Value objects for catalogs, profiles and assessment results."""

from oscalviz.models.assessment import (
    AssessedControl,
    ControlFamilyAssessment,
    Finding,
    Observation,
)
from oscalviz.models.enums import (
    AssessmentStatus,
    FindingClassification,
    OscalFormat,
    ValidationRuleSeverity,
    ValidationRuleType,
)
from oscalviz.models.profile import (
    Catalog,
    Import,
    ImportInfo,
    Profile,
    ResolvedProfile,
)

__all__ = [
    # Profiles
    "Catalog",
    "Import",
    "ImportInfo",
    "Profile",
    "ResolvedProfile",
    # Assessment results
    "AssessedControl",
    "ControlFamilyAssessment",
    "Finding",
    "Observation",
    # Variants
    "AssessmentStatus",
    "FindingClassification",
    "OscalFormat",
    "ValidationRuleSeverity",
    "ValidationRuleType",
]
