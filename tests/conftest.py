"""Pytest configuration and fixtures for OSCALViz tests."""

import pytest

from oscalviz.common.config import ResolutionSettings, Settings
from oscalviz.models import Catalog, Finding, Observation


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        environment="development",
        debug=True,
        logging={"level": "DEBUG", "format": "console"},
    )


@pytest.fixture
def sequential_settings() -> ResolutionSettings:
    """Resolution settings with the sequential merge policy."""
    return ResolutionSettings(merge_policy="sequential")


@pytest.fixture
def union_settings() -> ResolutionSettings:
    """Resolution settings with the union merge policy."""
    return ResolutionSettings(merge_policy="union")


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def nist_catalog() -> Catalog:
    """Small NIST-style catalog."""
    return Catalog(
        href="#nist-800-53",
        title="NIST SP 800-53",
        control_ids=(
            "ac-1", "ac-2", "ac-2.1", "ac-3", "ac-10",
            "au-1", "au-2",
            "sc-7", "sc-8",
        ),
    )


@pytest.fixture
def fedramp_catalog() -> Catalog:
    """Second catalog overlapping the NIST catalog."""
    return Catalog(
        href="#fedramp",
        title="FedRAMP additions",
        control_ids=("ac-2", "ac-17", "ir-4", "sc-7"),
    )


@pytest.fixture
def catalogs(nist_catalog: Catalog, fedramp_catalog: Catalog) -> dict[str, Catalog]:
    """Catalogs keyed by href."""
    return {
        nist_catalog.href: nist_catalog,
        fedramp_catalog.href: fedramp_catalog,
    }


# =============================================================================
# Assessment Results Fixtures
# =============================================================================


@pytest.fixture
def sample_findings() -> list[Finding]:
    """Findings across several families."""
    return [
        Finding("ac-2", "satisfied", uuid="f-1"),
        Finding("ac-2", "not-satisfied", uuid="f-2"),
        Finding("au-2", "satisfied", uuid="f-3"),
        Finding("ac-10", "satisfied", uuid="f-4"),
        Finding("ac-1", "undetermined", uuid="f-5"),
    ]


@pytest.fixture
def sample_observations() -> list[Observation]:
    """Observations across several families."""
    return [
        Observation("ac-2", uuid="o-1"),
        Observation("ac-1", uuid="o-2"),
        Observation("sc-7", uuid="o-3"),
        Observation("sc-7", uuid="o-4"),
        Observation("sc-7", uuid="o-5"),
    ]


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
