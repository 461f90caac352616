"""Visualization result schemas.

Response payloads for profile and assessment results visualization,
serialized by the calling API layer.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from oscalviz.models.enums import AssessmentStatus, FindingClassification


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class VisualizationResultBase(BaseModel):
    """Fields shared by all visualization results."""

    success: bool
    message: str
    timestamp: str = Field(default_factory=_utc_timestamp)


# =============================================================================
# Profile
# =============================================================================


class ProfileInfo(BaseModel):
    """Profile document metadata."""

    model_config = ConfigDict(from_attributes=True)

    uuid: str | None = None
    title: str | None = None
    version: str | None = None
    oscal_version: str | None = None
    last_modified: str | None = None
    published: str | None = None


class ImportInfoResponse(BaseModel):
    """Selection made by one profile import."""

    href: str
    include_all_ids: list[str] = Field(default_factory=list)
    exclude_ids: list[str] = Field(default_factory=list)
    estimated_control_count: int = Field(default=0, ge=0)


class ControlSummary(BaseModel):
    """Totals over the resolved profile."""

    total_included_controls: int = Field(default=0, ge=0)
    total_excluded_controls: int = Field(default=0, ge=0)
    unique_families: int = Field(default=0, ge=0)


class ControlFamilyInfo(BaseModel):
    """Included and excluded controls of one family."""

    family_id: str
    family_name: str
    included_count: int = Field(default=0, ge=0)
    excluded_count: int = Field(default=0, ge=0)
    included_controls: list[str] = Field(default_factory=list)
    excluded_controls: list[str] = Field(default_factory=list)


class ProfileVisualizationResult(VisualizationResultBase):
    """Profile analysis for visualization."""

    profile_info: ProfileInfo | None = None
    merge_policy: str | None = None
    imports: list[ImportInfoResponse] = Field(default_factory=list)
    resolved_control_ids: list[str] = Field(default_factory=list)
    control_summary: ControlSummary | None = None
    controls_by_family: dict[str, ControlFamilyInfo] = Field(default_factory=dict)


# =============================================================================
# Assessment results
# =============================================================================


class AssessmentInfo(BaseModel):
    """Assessment results document metadata."""

    uuid: str | None = None
    title: str | None = None
    description: str | None = None
    version: str | None = None
    oscal_version: str | None = None
    published: str | None = None
    last_modified: str | None = None
    ssp_import_href: str | None = None


class FindingResponse(BaseModel):
    """A finding as supplied to the aggregation."""

    model_config = ConfigDict(from_attributes=True)

    uuid: str | None = None
    title: str | None = None
    control_id: str
    classification: FindingClassification


class ObservationResponse(FindingResponse):
    """An observation as supplied to the aggregation."""


class AssessedControlResponse(BaseModel):
    """Rollup of one assessed control."""

    model_config = ConfigDict(from_attributes=True)

    control_id: str
    findings_count: int = Field(default=0, ge=0)
    observations_count: int = Field(default=0, ge=0)
    assessment_status: AssessmentStatus


class ControlFamilyAssessmentResponse(BaseModel):
    """Assessed controls of one family."""

    family_id: str
    family_name: str
    total_controls_assessed: int = Field(default=0, ge=0)
    total_findings: int = Field(default=0, ge=0)
    total_observations: int = Field(default=0, ge=0)
    assessed_controls: list[AssessedControlResponse] = Field(default_factory=list)


class AssessmentSummary(BaseModel):
    """Totals over the whole assessment."""

    total_controls_assessed: int = Field(default=0, ge=0)
    total_findings: int = Field(default=0, ge=0)
    total_observations: int = Field(default=0, ge=0)
    unique_families_assessed: int = Field(default=0, ge=0)
    status_counts: dict[str, int] = Field(default_factory=dict)
    findings_by_classification: dict[str, int] = Field(default_factory=dict)
    observations_by_classification: dict[str, int] = Field(default_factory=dict)


class SarVisualizationResult(VisualizationResultBase):
    """Assessment results analysis for visualization."""

    assessment_info: AssessmentInfo | None = None
    assessment_summary: AssessmentSummary | None = None
    findings: list[FindingResponse] = Field(default_factory=list)
    observations: list[ObservationResponse] = Field(default_factory=list)
    controls_by_family: list[ControlFamilyAssessmentResponse] = Field(default_factory=list)
