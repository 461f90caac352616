"""Visualization service.

Builds profile and assessment results summaries from the resolver and
aggregator outputs. Missing catalogs are reported in the result rather
than raised so one bad reference does not fail a whole request.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from oscalviz.assessment.aggregator import AssessmentAggregator, status_counts
from oscalviz.assessment.families import family_name, family_or_unspecified
from oscalviz.common.exceptions import MissingCatalogError
from oscalviz.common.logging import LoggerMixin, bind_context, unbind_context
from oscalviz.common.ordering import OrderedIdSet, natural_sorted
from oscalviz.models.assessment import ControlFamilyAssessment, Finding, Observation
from oscalviz.models.enums import FindingClassification
from oscalviz.models.profile import Catalog, Profile, ResolvedProfile
from oscalviz.resolution.profile import ProfileResolver
from oscalviz.schemas.visualization import (
    AssessedControlResponse,
    AssessmentInfo,
    AssessmentSummary,
    ControlFamilyAssessmentResponse,
    ControlFamilyInfo,
    ControlSummary,
    FindingResponse,
    ImportInfoResponse,
    ObservationResponse,
    ProfileInfo,
    ProfileVisualizationResult,
    SarVisualizationResult,
)


def excluded_control_ids(resolved: ResolvedProfile) -> list[str]:
    """Ids some import selected that did not survive the merge.

    Returned in order of first selection.
    """
    selected = OrderedIdSet()
    for info in resolved.imports:
        selected.extend(info.include_all_ids)
    kept = set(resolved.control_ids)
    return [cid for cid in selected if cid not in kept]


def classification_counts(items: Iterable[Finding | Observation]) -> dict[str, int]:
    """Count items per classification, listing every classification."""
    counts = Counter(item.classification for item in items)
    return {c.value: counts[c] for c in FindingClassification}


def _group_by_family(control_ids: Sequence[str]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for control_id in control_ids:
        grouped.setdefault(family_or_unspecified(control_id), []).append(control_id)
    return grouped


class VisualizationService(LoggerMixin):
    """Summarizes OSCAL documents for visualization."""

    def __init__(
        self,
        profile_resolver: ProfileResolver | None = None,
        aggregator: AssessmentAggregator | None = None,
    ) -> None:
        """Initialize service.

        Args:
            profile_resolver: Resolver used for profiles.
            aggregator: Aggregator used for assessment results.
        """
        self._profile_resolver = profile_resolver or ProfileResolver()
        self._aggregator = aggregator or AssessmentAggregator()

    def analyze_profile(
        self,
        profile: Profile,
        catalogs: Mapping[str, Catalog],
    ) -> ProfileVisualizationResult:
        """Resolve a profile and summarize its controls by family.

        Args:
            profile: Profile to analyze.
            catalogs: Catalogs keyed by href.

        Returns:
            Visualization result. ``success`` is False when a referenced
            catalog was not supplied.
        """
        bind_context(profile_uuid=profile.uuid)
        try:
            return self._analyze_profile(profile, catalogs)
        finally:
            unbind_context("profile_uuid")

    def _analyze_profile(
        self,
        profile: Profile,
        catalogs: Mapping[str, Catalog],
    ) -> ProfileVisualizationResult:
        try:
            resolved = self._profile_resolver.resolve(profile, catalogs)
        except MissingCatalogError as e:
            self.logger.warning("Profile analysis failed", error=e.message)
            return ProfileVisualizationResult(
                success=False,
                message=e.message,
                profile_info=ProfileInfo.model_validate(profile),
            )

        excluded = excluded_control_ids(resolved)
        included_by_family = _group_by_family(resolved.control_ids)
        excluded_by_family = _group_by_family(excluded)

        controls_by_family: dict[str, ControlFamilyInfo] = {}
        for family_id in sorted(included_by_family.keys() | excluded_by_family.keys()):
            included = natural_sorted(included_by_family.get(family_id, []))
            excluded_ids = natural_sorted(excluded_by_family.get(family_id, []))
            controls_by_family[family_id] = ControlFamilyInfo(
                family_id=family_id,
                family_name=family_name(family_id),
                included_count=len(included),
                excluded_count=len(excluded_ids),
                included_controls=included,
                excluded_controls=excluded_ids,
            )

        imports = [
            ImportInfoResponse(
                href=info.href,
                include_all_ids=list(info.include_all_ids),
                exclude_ids=natural_sorted(info.exclude_ids),
                estimated_control_count=info.estimated_control_count,
            )
            for info in resolved.imports
        ]

        self.logger.info(
            "Profile analyzed",
            imports=len(imports),
            included=resolved.estimated_control_count,
            excluded=len(excluded),
        )

        return ProfileVisualizationResult(
            success=True,
            message="Profile analyzed successfully",
            profile_info=ProfileInfo.model_validate(profile),
            merge_policy=resolved.merge_policy,
            imports=imports,
            resolved_control_ids=list(resolved.control_ids),
            control_summary=ControlSummary(
                total_included_controls=resolved.estimated_control_count,
                total_excluded_controls=len(excluded),
                unique_families=len(included_by_family),
            ),
            controls_by_family=controls_by_family,
        )

    def analyze_assessment(
        self,
        findings: Sequence[Finding],
        observations: Sequence[Observation],
        assessment_info: AssessmentInfo | None = None,
    ) -> SarVisualizationResult:
        """Aggregate assessment results and summarize them by family.

        Args:
            findings: Findings from the assessment results document.
            observations: Observations from the same document.
            assessment_info: Optional document metadata.

        Returns:
            Visualization result; always successful.
        """
        bind_context(assessment_uuid=assessment_info.uuid if assessment_info else None)
        try:
            return self._analyze_assessment(findings, observations, assessment_info)
        finally:
            unbind_context("assessment_uuid")

    def _analyze_assessment(
        self,
        findings: Sequence[Finding],
        observations: Sequence[Observation],
        assessment_info: AssessmentInfo | None,
    ) -> SarVisualizationResult:
        families = self._aggregator.aggregate(findings, observations)

        summary = AssessmentSummary(
            total_controls_assessed=sum(f.total_controls_assessed for f in families),
            total_findings=len(findings),
            total_observations=len(observations),
            unique_families_assessed=len(families),
            status_counts=status_counts(families),
            findings_by_classification=classification_counts(findings),
            observations_by_classification=classification_counts(observations),
        )

        self.logger.info(
            "Assessment results analyzed",
            controls=summary.total_controls_assessed,
            families=summary.unique_families_assessed,
        )

        return SarVisualizationResult(
            success=True,
            message="Assessment results analyzed successfully",
            assessment_info=assessment_info,
            assessment_summary=summary,
            findings=[FindingResponse.model_validate(finding) for finding in findings],
            observations=[
                ObservationResponse.model_validate(observation) for observation in observations
            ],
            controls_by_family=[self._family_response(family) for family in families],
        )

    @staticmethod
    def _family_response(family: ControlFamilyAssessment) -> ControlFamilyAssessmentResponse:
        return ControlFamilyAssessmentResponse(
            family_id=family.family_id,
            family_name=family_name(family.family_id),
            total_controls_assessed=family.total_controls_assessed,
            total_findings=family.total_findings,
            total_observations=family.total_observations,
            assessed_controls=[
                AssessedControlResponse.model_validate(control)
                for control in family.assessed_controls
            ],
        )
