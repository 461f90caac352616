"""Case-insensitive lookup for closed string variants.

Every closed enum in OSCALViz (document formats, rule severities and
types, finding classifications, assessment statuses) is parsed from
user-supplied strings through the same lookup so the accepted spellings
and the error message stay consistent.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from oscalviz.common.exceptions import UnknownVariantError

E = TypeVar("E", bound=Enum)


@lru_cache(maxsize=None)
def _variant_index(enum_cls: type[Enum]) -> dict[str, Enum]:
    """Map lowercase member values and names to members."""
    index: dict[str, Enum] = {}
    for member in enum_cls:
        index.setdefault(str(member.value).lower(), member)
        index.setdefault(member.name.lower(), member)
    return index


def lookup_variant(
    enum_cls: type[E],
    raw: Any,
    kind: str,
    error_cls: type[UnknownVariantError] = UnknownVariantError,
) -> E:
    """Resolve a raw string to an enum member, ignoring case.

    Both the member value ("not-satisfied") and the member name
    ("NOT_SATISFIED") are accepted. Surrounding whitespace is ignored.

    Args:
        enum_cls: Enum class to search.
        raw: Raw input value.
        kind: Human-readable variant kind for the error message.
        error_cls: Error raised when nothing matches.

    Returns:
        Matching enum member.

    Raises:
        UnknownVariantError: With message "Unknown <kind>: <raw>".
    """
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        raise error_cls(kind, raw)

    member = _variant_index(enum_cls).get(raw.strip().lower())
    if member is None:
        raise error_cls(kind, raw)
    return member  # type: ignore[return-value]


class VariantEnum(str, Enum):
    """String enum with case-insensitive parsing.

    Subclasses override ``variant_kind`` to name themselves in error
    messages, and ``variant_error`` to raise a more specific error.
    """

    @classmethod
    def variant_kind(cls) -> str:
        return cls.__name__

    @classmethod
    def variant_error(cls) -> type[UnknownVariantError]:
        return UnknownVariantError

    @classmethod
    def from_string(cls, raw: Any):
        """Parse a member from its value or name, ignoring case."""
        return lookup_variant(cls, raw, cls.variant_kind(), cls.variant_error())

    def __str__(self) -> str:
        return self.value
