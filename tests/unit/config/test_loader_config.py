"""
Unit tests for LoaderConfig.
"""

import pytest
from pydantic import ValidationError

from envstore.config.configs import DEFAULT_EXPECTED_KEYS, LoaderConfig


class TestLoaderConfig:
    """Defaults and validation."""

    def test_defaults(self) -> None:
        config = LoaderConfig()
        assert config.filename == ".env"
        assert config.cwd_env_var == "PWD"
        assert config.extended_types is False
        assert config.expected_keys == DEFAULT_EXPECTED_KEYS
        assert config.mask == "********"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderConfig(file_name=".env")

    def test_frozen(self) -> None:
        config = LoaderConfig()
        with pytest.raises(ValidationError):
            config.filename = "other"

    @pytest.mark.parametrize("filename", ["", " .env", "dir/.env", "dir\\.env"])
    def test_filename_must_be_bare(self, filename: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            LoaderConfig(filename=filename)
        assert "filename" in str(exc_info.value)

    def test_blank_expected_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderConfig(expected_keys=("IMAP_HOST", ""))

    def test_list_of_keys_is_coerced_to_tuple(self) -> None:
        config = LoaderConfig(expected_keys=["A", "B"])
        assert config.expected_keys == ("A", "B")
