"""Profile resolution.

Folds a profile's imports, in declaration order, into one resolved
control baseline.
"""

import time
from collections.abc import Mapping

from oscalviz.common.config import MergePolicy, ResolutionSettings, get_settings
from oscalviz.common.exceptions import ConfigurationError, MissingCatalogError
from oscalviz.common.logging import get_logger
from oscalviz.common.metrics import (
    MISSING_CATALOGS,
    PROFILE_RESOLUTION_DURATION,
    PROFILES_RESOLVED,
)
from oscalviz.common.ordering import OrderedIdSet
from oscalviz.models.profile import Catalog, ImportInfo, Profile, ResolvedProfile
from oscalviz.resolution.imports import ImportResolver

logger = get_logger(__name__)

MERGE_POLICIES: tuple[str, ...] = ("sequential", "union")


def merge_sequential(infos: list[ImportInfo]) -> OrderedIdSet:
    """Merge imports left to right with in-order exclusion.

    Each import adds its candidates (an id keeps the position where it was
    first introduced), then removes its excludes from everything
    accumulated so far. A later import can bring an excluded id back; it
    is then appended at the end.

    Args:
        infos: Resolved imports in declaration order.

    Returns:
        Accumulated control ids.
    """
    resolved = OrderedIdSet()
    for info in infos:
        resolved.extend(info.include_all_ids)
        resolved.discard_all(info.exclude_ids)
    return resolved


def merge_union(infos: list[ImportInfo]) -> OrderedIdSet:
    """Merge all candidates first, then remove every declared exclude.

    Exclusions apply regardless of import order.

    Args:
        infos: Resolved imports in declaration order.

    Returns:
        Accumulated control ids.
    """
    resolved = OrderedIdSet()
    for info in infos:
        resolved.extend(info.include_all_ids)
    for info in infos:
        resolved.discard_all(info.exclude_ids)
    return resolved


_MERGERS = {
    "sequential": merge_sequential,
    "union": merge_union,
}


class ProfileResolver:
    """Resolves a profile against the catalogs its imports reference.

    Resolution is all-or-nothing: if any referenced catalog is missing no
    partial baseline is produced.
    """

    def __init__(
        self,
        import_resolver: ImportResolver | None = None,
        merge_policy: MergePolicy | None = None,
        settings: ResolutionSettings | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            import_resolver: Resolver for individual imports.
            merge_policy: "sequential" or "union". Defaults to settings.
            settings: Resolution settings.
        """
        if settings is None:
            settings = get_settings().resolution

        self._import_resolver = import_resolver or ImportResolver(settings)
        self._merge_policy = merge_policy or settings.merge_policy

        if self._merge_policy not in _MERGERS:
            raise ConfigurationError(
                f"Unknown merge policy: {self._merge_policy}",
                details={"allowed": list(MERGE_POLICIES)},
            )

    @property
    def merge_policy(self) -> str:
        return self._merge_policy

    def check_catalogs(self, profile: Profile, catalogs: Mapping[str, Catalog]) -> None:
        """Ensure every imported catalog was supplied.

        Raises:
            MissingCatalogError: Naming the first missing href in
                declaration order.
        """
        missing = [href for href in profile.hrefs if href not in catalogs]
        if missing:
            MISSING_CATALOGS.inc()
            logger.warning(
                "Profile references missing catalogs",
                profile_uuid=profile.uuid,
                missing_hrefs=missing,
            )
            raise MissingCatalogError(missing[0], missing_hrefs=missing)

    def resolve_imports(
        self,
        profile: Profile,
        catalogs: Mapping[str, Catalog],
    ) -> list[ImportInfo]:
        """Resolve each import of a profile in declaration order."""
        self.check_catalogs(profile, catalogs)
        return [
            self._import_resolver.resolve(imp, catalogs[imp.href])
            for imp in profile.imports
        ]

    def resolve(
        self,
        profile: Profile,
        catalogs: Mapping[str, Catalog],
    ) -> ResolvedProfile:
        """Resolve a profile into its merged control baseline.

        Args:
            profile: Profile to resolve.
            catalogs: Catalogs keyed by href.

        Returns:
            Resolved profile with ordered control ids and per-import info.

        Raises:
            MissingCatalogError: If any imported catalog was not supplied.
            UnresolvedImportError: If a catalog is keyed under the wrong href.
        """
        start_time = time.perf_counter()

        infos = self.resolve_imports(profile, catalogs)
        resolved = _MERGERS[self._merge_policy](infos)

        duration = time.perf_counter() - start_time
        PROFILE_RESOLUTION_DURATION.observe(duration)
        PROFILES_RESOLVED.labels(merge_policy=self._merge_policy).inc()

        logger.debug(
            "Profile resolved",
            profile_uuid=profile.uuid,
            imports=len(infos),
            merge_policy=self._merge_policy,
            control_count=len(resolved),
            duration_ms=round(duration * 1000, 2),
        )

        return ResolvedProfile(
            control_ids=resolved.to_tuple(),
            imports=tuple(infos),
            merge_policy=self._merge_policy,
        )
