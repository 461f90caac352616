"""Catalog and profile value objects.

Inputs are produced by an external document parser; outputs are built by
the resolvers. All of them are immutable and hold no references back to
the documents they came from.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import cached_property


def _freeze_ids(ids: Iterable[str]) -> tuple[str, ...]:
    return ids if isinstance(ids, tuple) else tuple(ids)


@dataclass(frozen=True)
class Catalog:
    """Canonical, ordered control membership of one catalog."""

    href: str
    control_ids: tuple[str, ...] = ()
    title: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "control_ids", _freeze_ids(self.control_ids))

    @cached_property
    def _members(self) -> frozenset[str]:
        return frozenset(self.control_ids)

    def contains(self, control_id: str) -> bool:
        """Check whether the catalog defines a control id."""
        return control_id in self._members

    def __len__(self) -> int:
        return len(self.control_ids)


@dataclass(frozen=True)
class Import:
    """One profile import directive.

    ``include_ids`` is only consulted when ``include_all`` is false.
    Excluding an id the import never selects is a no-op.
    """

    href: str
    include_all: bool = False
    include_ids: tuple[str, ...] = ()
    exclude_ids: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "include_ids", _freeze_ids(self.include_ids))
        if not isinstance(self.exclude_ids, frozenset):
            object.__setattr__(self, "exclude_ids", frozenset(self.exclude_ids))


@dataclass(frozen=True)
class Profile:
    """An ordered list of imports plus document metadata.

    Import order is the merge order.
    """

    imports: tuple[Import, ...] = ()
    uuid: str | None = None
    title: str | None = None
    version: str | None = None
    oscal_version: str | None = None
    last_modified: str | None = None
    published: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.imports, tuple):
            object.__setattr__(self, "imports", tuple(self.imports))

    @property
    def hrefs(self) -> list[str]:
        """Catalog hrefs in declaration order, without repeats."""
        return list(dict.fromkeys(imp.href for imp in self.imports))


@dataclass(frozen=True)
class ImportInfo:
    """Resolution result for a single import."""

    href: str
    include_all_ids: tuple[str, ...]  # Candidate set before exclusion
    exclude_ids: frozenset[str]  # As declared, unfiltered
    estimated_control_count: int

    @property
    def contributed_ids(self) -> tuple[str, ...]:
        """Candidate ids left after this import's own exclusions."""
        return tuple(cid for cid in self.include_all_ids if cid not in self.exclude_ids)


@dataclass(frozen=True)
class ResolvedProfile:
    """Merged control baseline of a profile."""

    control_ids: tuple[str, ...]
    imports: tuple[ImportInfo, ...] = field(default=())
    merge_policy: str = "sequential"

    @property
    def estimated_control_count(self) -> int:
        return len(self.control_ids)

    def __contains__(self, control_id: object) -> bool:
        return control_id in self.control_ids

    def __iter__(self) -> Iterator[str]:
        return iter(self.control_ids)

    def __len__(self) -> int:
        return len(self.control_ids)
