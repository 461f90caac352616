"""Unit tests for configuration, logging and error types."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from oscalviz.common.config import ResolutionSettings, Settings, get_settings
from oscalviz.common.exceptions import (
    MissingCatalogError,
    NotFoundError,
    OSCALVizError,
    UnknownFormatError,
    UnknownVariantError,
    UnresolvedImportError,
)
from oscalviz.common.logging import LoggerMixin, get_logger, setup_logging


@pytest.mark.unit
class TestSettings:
    """Test cases for application settings."""

    def test_defaults(self):
        """Test default settings values."""
        settings = Settings()

        assert settings.app_name == "OSCALViz"
        assert settings.resolution.merge_policy == "sequential"
        assert settings.resolution.warn_on_unknown_ids is False
        assert settings.is_production is False

    def test_merge_policy_from_env(self, monkeypatch):
        """Test the merge policy can be set from the environment."""
        monkeypatch.setenv("RESOLUTION_MERGE_POLICY", "union")

        assert ResolutionSettings().merge_policy == "union"

    def test_invalid_merge_policy(self):
        """Test unknown merge policies are rejected."""
        with pytest.raises(PydanticValidationError):
            ResolutionSettings(merge_policy="override")

    def test_nested_settings(self, test_settings: Settings):
        """Test nested settings accept dict values."""
        assert test_settings.logging.level == "DEBUG"
        assert test_settings.logging.format == "console"

    def test_get_settings_cached(self):
        """Test settings singleton is cached."""
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    """Test cases for logging helpers."""

    def test_setup_and_get_logger(self, test_settings: Settings):
        """Test logging configures and loggers accept structured events."""
        setup_logging(test_settings.logging)
        logger = get_logger(__name__, component="test")

        logger.info("Logging configured", extra_field=1)

    def test_logger_mixin(self):
        """Test mixin provides a cached logger."""

        class Component(LoggerMixin):
            pass

        component = Component()
        assert component.logger is component.logger


@pytest.mark.unit
class TestExceptions:
    """Test cases for the error hierarchy."""

    def test_missing_catalog_error(self):
        """Test missing catalog error payload."""
        error = MissingCatalogError("#cat")

        assert isinstance(error, NotFoundError)
        assert error.href == "#cat"
        assert error.to_dict() == {
            "error": "MISSING_CATALOG",
            "message": "Catalog not supplied for import: #cat",
            "details": {"href": "#cat", "missing_hrefs": ["#cat"]},
        }

    def test_unresolved_import_error(self):
        """Test unresolved import error is an internal error."""
        error = UnresolvedImportError("#a", "#b")

        assert isinstance(error, OSCALVizError)
        assert error.status_code == 500

    def test_unknown_format_is_unknown_variant(self):
        """Test format errors share the variant error contract."""
        error = UnknownFormatError("format", "toml")

        assert isinstance(error, UnknownVariantError)
        assert error.status_code == 400
        assert error.message == "Unknown format: toml"

    def test_base_error_defaults(self):
        """Test base error falls back to class message."""
        error = OSCALVizError()

        assert error.message == "An internal error occurred"
        assert error.to_dict() == {"error": "INTERNAL_ERROR", "message": "An internal error occurred"}
