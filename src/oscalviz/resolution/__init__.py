"""Profile resolution - import selection and baseline merging.

Resolves each profile import against its catalog and folds the results,
in declaration order, into a single control baseline.
"""

from oscalviz.resolution.imports import ImportResolver
from oscalviz.resolution.profile import (
    MERGE_POLICIES,
    ProfileResolver,
    merge_sequential,
    merge_union,
)

__all__ = [
    "ImportResolver",
    "ProfileResolver",
    "MERGE_POLICIES",
    "merge_sequential",
    "merge_union",
]
