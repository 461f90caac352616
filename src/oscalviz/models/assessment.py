"""Assessment results value objects."""

from dataclasses import dataclass, field

from oscalviz.models.enums import AssessmentStatus, FindingClassification


@dataclass(frozen=True)
class Finding:
    """A finding recorded against one control."""

    control_id: str
    classification: FindingClassification = FindingClassification.UNDETERMINED
    uuid: str | None = None
    title: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "classification", FindingClassification.from_string(self.classification)
        )


@dataclass(frozen=True)
class Observation:
    """An observation recorded against one control."""

    control_id: str
    classification: FindingClassification = FindingClassification.UNDETERMINED
    uuid: str | None = None
    title: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "classification", FindingClassification.from_string(self.classification)
        )


@dataclass(frozen=True)
class AssessedControl:
    """Per-control rollup of findings and observations."""

    control_id: str
    findings_count: int
    observations_count: int
    assessment_status: AssessmentStatus


@dataclass(frozen=True)
class ControlFamilyAssessment:
    """Assessed controls sharing a family prefix, in natural id order."""

    family_id: str
    assessed_controls: tuple[AssessedControl, ...] = field(default=())

    @property
    def total_controls_assessed(self) -> int:
        return len(self.assessed_controls)

    @property
    def total_findings(self) -> int:
        return sum(control.findings_count for control in self.assessed_controls)

    @property
    def total_observations(self) -> int:
        return sum(control.observations_count for control in self.assessed_controls)

    @property
    def control_ids(self) -> list[str]:
        return [control.control_id for control in self.assessed_controls]
