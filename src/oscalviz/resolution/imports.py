"""Import resolution.

Computes the control ids a single profile import selects from the
catalog it references.
"""

from oscalviz.common.config import ResolutionSettings, get_settings
from oscalviz.common.exceptions import UnresolvedImportError
from oscalviz.common.logging import get_logger
from oscalviz.common.metrics import UNKNOWN_INCLUDE_IDS
from oscalviz.common.ordering import OrderedIdSet
from oscalviz.models.profile import Catalog, Import, ImportInfo

logger = get_logger(__name__)


class ImportResolver:
    """Resolves one import directive against its catalog.

    The candidate set is either the whole catalog (include-all) or the
    explicitly included ids that the catalog defines. Unknown include ids
    are dropped without error; flagging them belongs to document
    validation.
    """

    def __init__(self, settings: ResolutionSettings | None = None) -> None:
        """Initialize resolver.

        Args:
            settings: Resolution settings.
        """
        if settings is None:
            settings = get_settings().resolution

        self._warn_on_unknown_ids = settings.warn_on_unknown_ids

    def candidate_ids(self, import_: Import, catalog: Catalog) -> OrderedIdSet:
        """Build the ordered candidate set of an import, before exclusion.

        Args:
            import_: Import directive.
            catalog: Catalog referenced by the import.

        Returns:
            Candidate ids in catalog order (include-all) or include order.
        """
        if import_.include_all:
            return OrderedIdSet(catalog.control_ids)

        candidates = OrderedIdSet(
            cid for cid in import_.include_ids if catalog.contains(cid)
        )

        unknown = [cid for cid in import_.include_ids if not catalog.contains(cid)]
        if unknown:
            UNKNOWN_INCLUDE_IDS.inc(len(unknown))
            log = logger.warning if self._warn_on_unknown_ids else logger.debug
            log(
                "Dropping include ids not in catalog",
                href=import_.href,
                unknown_count=len(unknown),
                unknown_ids=unknown[:10],
            )

        return candidates

    def resolve(self, import_: Import, catalog: Catalog) -> ImportInfo:
        """Resolve an import against its catalog.

        Args:
            import_: Import directive.
            catalog: Catalog identified by ``import_.href``.

        Returns:
            Import info with candidate ids, declared excludes and the
            estimated number of contributed controls.

        Raises:
            UnresolvedImportError: If the catalog is not the one the
                import references.
        """
        if catalog.href != import_.href:
            raise UnresolvedImportError(import_.href, catalog.href)

        candidates = self.candidate_ids(import_, catalog)
        contributed = sum(1 for cid in candidates if cid not in import_.exclude_ids)

        logger.debug(
            "Import resolved",
            href=import_.href,
            include_all=import_.include_all,
            candidates=len(candidates),
            excluded=len(candidates) - contributed,
        )

        return ImportInfo(
            href=import_.href,
            include_all_ids=candidates.to_tuple(),
            exclude_ids=import_.exclude_ids,
            estimated_control_count=contributed,
        )
