"""Assessment results aggregation.

Groups findings and observations by control, derives each control's
assessment status, and buckets the controls by family.
"""

import time
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from oscalviz.assessment.families import family_or_unspecified
from oscalviz.common.logging import get_logger
from oscalviz.common.metrics import ASSESSMENT_AGGREGATION_DURATION, CONTROLS_ASSESSED
from oscalviz.common.ordering import natural_sort_key
from oscalviz.models.assessment import (
    AssessedControl,
    ControlFamilyAssessment,
    Finding,
    Observation,
)
from oscalviz.models.enums import AssessmentStatus, FindingClassification

logger = get_logger(__name__)


@dataclass
class ControlBucket:
    """Bucket for accumulating one control's findings and observations."""

    findings_count: int = 0
    observations_count: int = 0
    classifications: Counter = field(default_factory=Counter)

    def add_finding(self, classification: FindingClassification) -> None:
        self.findings_count += 1
        self.classifications[classification] += 1

    def add_observation(self) -> None:
        self.observations_count += 1

    @property
    def all_satisfied(self) -> bool:
        """Every finding is satisfied (vacuously false with no findings)."""
        return (
            self.findings_count > 0
            and self.classifications[FindingClassification.SATISFIED] == self.findings_count
        )


def derive_status(bucket: ControlBucket) -> AssessmentStatus:
    """Roll a control's findings and observations up into a status.

    Rules, first match wins:
    1. any finding not satisfied -> NotSatisfied
    2. findings and observations present, findings not all satisfied
       -> PartiallySatisfied
    3. at least one finding, all satisfied -> Satisfied
    4. otherwise -> NotApplicable

    Args:
        bucket: Accumulated counts for one control.

    Returns:
        Derived assessment status.
    """
    if bucket.classifications[FindingClassification.NOT_SATISFIED]:
        return AssessmentStatus.NOT_SATISFIED

    if bucket.findings_count and bucket.observations_count and not bucket.all_satisfied:
        return AssessmentStatus.PARTIALLY_SATISFIED

    if bucket.all_satisfied:
        return AssessmentStatus.SATISFIED

    return AssessmentStatus.NOT_APPLICABLE


class AssessmentAggregator:
    """Aggregates assessment results by control family.

    Aggregation is total: malformed control ids land in the UNSPECIFIED
    family and no input makes it raise.
    """

    def collect(
        self,
        findings: Iterable[Finding],
        observations: Iterable[Observation],
    ) -> dict[str, ControlBucket]:
        """Accumulate flat finding and observation counts per control id."""
        buckets: dict[str, ControlBucket] = {}

        for finding in findings:
            buckets.setdefault(finding.control_id, ControlBucket()).add_finding(
                finding.classification
            )

        for observation in observations:
            buckets.setdefault(observation.control_id, ControlBucket()).add_observation()

        return buckets

    def aggregate(
        self,
        findings: Sequence[Finding],
        observations: Sequence[Observation],
    ) -> list[ControlFamilyAssessment]:
        """Aggregate findings and observations into family assessments.

        Args:
            findings: Findings, each referencing one control id.
            observations: Observations, each referencing one control id.

        Returns:
            Family assessments ordered by family id, each with its
            controls in natural id order.
        """
        start_time = time.perf_counter()

        buckets = self.collect(findings, observations)

        families: dict[str, list[AssessedControl]] = {}
        for control_id, bucket in buckets.items():
            status = derive_status(bucket)
            CONTROLS_ASSESSED.labels(status=status.value).inc()
            families.setdefault(family_or_unspecified(control_id), []).append(
                AssessedControl(
                    control_id=control_id,
                    findings_count=bucket.findings_count,
                    observations_count=bucket.observations_count,
                    assessment_status=status,
                )
            )

        result = [
            ControlFamilyAssessment(
                family_id=family_id,
                assessed_controls=tuple(
                    sorted(controls, key=lambda c: natural_sort_key(c.control_id))
                ),
            )
            for family_id, controls in sorted(families.items())
        ]

        duration = time.perf_counter() - start_time
        ASSESSMENT_AGGREGATION_DURATION.observe(duration)

        logger.debug(
            "Assessment aggregated",
            findings=len(findings),
            observations=len(observations),
            controls=len(buckets),
            families=len(result),
            duration_ms=round(duration * 1000, 2),
        )

        return result


def status_counts(families: Iterable[ControlFamilyAssessment]) -> dict[str, int]:
    """Count assessed controls per status value."""
    counts: Counter = Counter(
        control.assessment_status.value
        for family in families
        for control in family.assessed_controls
    )
    return dict(counts)
