"""Prometheus metrics for OSCALViz.

Provides pre-defined metrics for monitoring profile resolution and
assessment aggregation.
"""

from prometheus_client import Counter, Histogram

# Profile resolution metrics
PROFILES_RESOLVED = Counter(
    "oscalviz_profiles_resolved_total",
    "Total number of profiles resolved",
    ["merge_policy"],
)

PROFILE_RESOLUTION_DURATION = Histogram(
    "oscalviz_profile_resolution_duration_seconds",
    "Time to resolve a profile against its catalogs",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

MISSING_CATALOGS = Counter(
    "oscalviz_missing_catalogs_total",
    "Total number of profile resolutions aborted by a missing catalog",
)

UNKNOWN_INCLUDE_IDS = Counter(
    "oscalviz_unknown_include_ids_total",
    "Total number of include ids dropped because the catalog lacks them",
)

# Assessment aggregation metrics
ASSESSMENT_AGGREGATION_DURATION = Histogram(
    "oscalviz_assessment_aggregation_duration_seconds",
    "Time to aggregate assessment results by control family",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

CONTROLS_ASSESSED = Counter(
    "oscalviz_controls_assessed_total",
    "Total number of controls rolled up, by derived status",
    ["status"],
)
