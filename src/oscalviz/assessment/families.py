"""Control family helpers.

Family membership is inferred from the control id prefix; no separate
family catalog is needed.
"""

from typing import Final

UNSPECIFIED_FAMILY: Final[str] = "UNSPECIFIED"

# NIST SP 800-53 Rev. 5 control families
CONTROL_FAMILY_NAMES: Final[dict[str, str]] = {
    "ac": "Access Control",
    "at": "Awareness and Training",
    "au": "Audit and Accountability",
    "ca": "Assessment, Authorization, and Monitoring",
    "cm": "Configuration Management",
    "cp": "Contingency Planning",
    "ia": "Identification and Authentication",
    "ir": "Incident Response",
    "ma": "Maintenance",
    "mp": "Media Protection",
    "pe": "Physical and Environmental Protection",
    "pl": "Planning",
    "pm": "Program Management",
    "ps": "Personnel Security",
    "pt": "PII Processing and Transparency",
    "ra": "Risk Assessment",
    "sa": "System and Services Acquisition",
    "sc": "System and Communications Protection",
    "si": "System and Information Integrity",
    "sr": "Supply Chain Risk Management",
}


def family_of(control_id: str) -> str | None:
    """Extract the family prefix of a control id.

    Args:
        control_id: Control identifier (e.g. "ac-2.1").

    Returns:
        Substring before the first "-" ("ac"), or None when the id has
        no "-" or starts with one.
    """
    prefix, sep, _ = control_id.partition("-")
    if not sep or not prefix:
        return None
    return prefix


def family_or_unspecified(control_id: str) -> str:
    """Family prefix of a control id, bucketing malformed ids."""
    return family_of(control_id) or UNSPECIFIED_FAMILY


def family_name(family_id: str) -> str:
    """Human-readable family name, falling back to the upper-cased id."""
    return CONTROL_FAMILY_NAMES.get(family_id.lower(), family_id.upper())
