"""Assessment aggregation - per-control status rollup by family."""

from oscalviz.assessment.aggregator import (
    AssessmentAggregator,
    ControlBucket,
    derive_status,
    status_counts,
)
from oscalviz.assessment.families import (
    CONTROL_FAMILY_NAMES,
    UNSPECIFIED_FAMILY,
    family_name,
    family_of,
    family_or_unspecified,
)

__all__ = [
    "AssessmentAggregator",
    "ControlBucket",
    "derive_status",
    "status_counts",
    "CONTROL_FAMILY_NAMES",
    "UNSPECIFIED_FAMILY",
    "family_name",
    "family_of",
    "family_or_unspecified",
]
