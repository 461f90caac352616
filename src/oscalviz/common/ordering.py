"""Ordering helpers shared by profile resolution and assessment aggregation.

Resolution results must come out in the same order on every run, so the
accumulating control set is an explicit list with a membership index
rather than a plain set.
"""

import re
from collections.abc import Iterable, Iterator

_DIGIT_RUN = re.compile(r"(\d+)")


class OrderedIdSet:
    """Insertion-ordered set of control ids.

    An id keeps the position of its first introduction; adding it again
    is a no-op. Discarding an id and adding it later appends it at the end.
    """

    __slots__ = ("_ids", "_index")

    def __init__(self, ids: Iterable[str] = ()) -> None:
        self._ids: list[str | None] = []
        self._index: dict[str, int] = {}
        self.extend(ids)

    def add(self, control_id: str) -> bool:
        """Add an id if absent.

        Returns:
            True if the id was added.
        """
        if control_id in self._index:
            return False
        self._index[control_id] = len(self._ids)
        self._ids.append(control_id)
        return True

    def extend(self, control_ids: Iterable[str]) -> int:
        """Add ids in order, returning how many were new."""
        return sum(1 for control_id in control_ids if self.add(control_id))

    def discard(self, control_id: str) -> bool:
        """Remove an id if present.

        Returns:
            True if the id was removed.
        """
        position = self._index.pop(control_id, None)
        if position is None:
            return False
        # Tombstone keeps the other positions valid
        self._ids[position] = None
        if len(self._ids) > 2 * len(self._index):
            self._compact()
        return True

    def _compact(self) -> None:
        """Drop tombstones and reindex the remaining ids."""
        self._ids = [control_id for control_id in self._ids if control_id is not None]
        self._index = {control_id: position for position, control_id in enumerate(self._ids)}

    def discard_all(self, control_ids: Iterable[str]) -> int:
        """Remove every listed id, returning how many were present."""
        return sum(1 for control_id in control_ids if self.discard(control_id))

    def to_tuple(self) -> tuple[str, ...]:
        return tuple(self)

    def __contains__(self, control_id: object) -> bool:
        return control_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return (control_id for control_id in self._ids if control_id is not None)

    def __repr__(self) -> str:
        return f"OrderedIdSet({list(self)!r})"


def natural_sort_key(control_id: str) -> tuple[tuple[str | int, ...], str]:
    """Numeric-aware sort key for control ids.

    "ac-2" sorts before "ac-10". Digit runs compare as integers and text
    runs as strings; numerically equal spellings ("ac-02", "ac-2") fall
    back to the raw string so the ordering stays total.

    Args:
        control_id: Control identifier.

    Returns:
        Sort key tuple.
    """
    # re.split with a capture group alternates text/digits, so positions
    # never mix str and int between two keys
    parts = _DIGIT_RUN.split(control_id)
    key = tuple(int(part) if index % 2 else part for index, part in enumerate(parts))
    return key, control_id


def natural_sorted(control_ids: Iterable[str]) -> list[str]:
    """Sort control ids in natural order."""
    return sorted(control_ids, key=natural_sort_key)
