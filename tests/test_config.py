"""
Tests for the config module.

Tests configuration loading, validation, and generation functionality
including YAML parsing, error handling, and file operations.
"""

import os
import stat

import pytest
import yaml

from contact_store.config.generator import generate_default_config, save_config_file
from contact_store.config.loader import DEFAULT_CONFIG_FILE, ConfigError, ConfigLoader
from contact_store.utils.paths import CONFIG_DIR_ENV_VAR


class TestConfigLoaderInitialization:
    """Tests for ConfigLoader initialization."""

    def test_custom_config_dir_via_argument(self, tmp_path):
        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.config_dir == tmp_path.resolve()

    def test_config_dir_from_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(tmp_path))
        loader = ConfigLoader()
        assert loader.config_dir == tmp_path.resolve()

    def test_default_config_file_name(self, tmp_path):
        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.config_file == DEFAULT_CONFIG_FILE == "config.yaml"


class TestConfigLoading:
    """Tests for loading configuration files."""

    @pytest.fixture
    def loader(self, tmp_path):
        return ConfigLoader(config_dir=tmp_path)

    def test_load_nonexistent_file_returns_empty_dict(self, loader):
        assert loader.load() == {}

    def test_load_valid_yaml_file(self, loader, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "data_file: ~/contacts.json\nverbose: true\n", encoding="utf-8"
        )
        assert loader.load() == {"data_file": "~/contacts.json", "verbose": True}

    def test_load_empty_yaml_file_returns_empty_dict(self, loader, tmp_path):
        (tmp_path / "config.yaml").write_text("", encoding="utf-8")
        assert loader.load() == {}

    def test_load_generated_template_returns_empty_dict(self, loader, tmp_path):
        """Test that the all-commented template loads as no settings."""
        (tmp_path / "config.yaml").write_text(
            generate_default_config(), encoding="utf-8"
        )
        assert loader.load() == {}

    def test_load_invalid_yaml_raises_config_error(self, loader, tmp_path):
        (tmp_path / "config.yaml").write_text("key: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            loader.load()

    def test_load_non_dict_yaml_raises_config_error(self, loader, tmp_path):
        (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain a YAML dictionary"):
            loader.load()

    def test_load_from_file_with_string_path(self, loader, tmp_path):
        other = tmp_path / "other.yaml"
        other.write_text("json_indent: 4\n", encoding="utf-8")
        assert loader.load_from_file(str(other)) == {"json_indent": 4}

    def test_load_and_validate(self, loader, tmp_path):
        (tmp_path / "config.yaml").write_text("json_indent: -1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="json_indent must be >= 0"):
            loader.load_and_validate()


class TestConfigValidation:
    """Tests for configuration validation."""

    @pytest.fixture
    def loader(self, tmp_path):
        return ConfigLoader(config_dir=tmp_path)

    def test_validate_empty_config(self, loader):
        loader.validate({})

    def test_validate_full_valid_config(self, loader):
        loader.validate(
            {
                "data_file": "~/contacts.json",
                "verbose": False,
                "log_dir": "/tmp/logs",
                "log_retention_count": 0,
                "json_indent": None,
            }
        )

    def test_validate_ignores_unknown_keys(self, loader):
        loader.validate({"something_else": [1, 2, 3]})

    def test_validate_non_dict_raises_error(self, loader):
        with pytest.raises(ConfigError, match="must be a dictionary"):
            loader.validate(["data_file"])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "config",
        [
            {"data_file": 5},
            {"verbose": "yes"},
            {"log_dir": ["a"]},
            {"log_retention_count": "10"},
            {"log_retention_count": True},
            {"json_indent": "2"},
            {"json_indent": False},
        ],
    )
    def test_validate_wrong_type_raises_error(self, loader, config):
        with pytest.raises(ConfigError, match="Invalid type"):
            loader.validate(config)

    def test_validate_empty_data_file(self, loader):
        with pytest.raises(ConfigError, match="data_file must not be empty"):
            loader.validate({"data_file": "  "})

    def test_validate_negative_retention(self, loader):
        with pytest.raises(ConfigError, match="log_retention_count must be >= 0"):
            loader.validate({"log_retention_count": -1})


class TestConfigGenerator:
    """Tests for default configuration generation."""

    def test_generated_config_is_valid_yaml(self):
        assert yaml.safe_load(generate_default_config()) is None

    def test_generated_config_mentions_all_options(self):
        text = generate_default_config()
        for key in ConfigLoader.VALID_KEYS:
            assert key in text

    def test_save_config_file(self, tmp_path):
        path = tmp_path / "cfg" / "config.yaml"
        success, error = save_config_file(path)
        assert success is True
        assert error is None
        assert path.read_text(encoding="utf-8") == generate_default_config()

    @pytest.mark.skipif(os.name != "posix", reason="requires POSIX modes")
    def test_save_config_file_is_owner_only(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config_file(path)
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_save_config_file_refuses_overwrite(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verbose: true\n", encoding="utf-8")
        success, error = save_config_file(path)
        assert success is False
        assert "already exists" in error
        assert path.read_text(encoding="utf-8") == "verbose: true\n"

    def test_save_config_file_overwrite(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verbose: true\n", encoding="utf-8")
        success, _ = save_config_file(path, overwrite=True)
        assert success is True
        assert path.read_text(encoding="utf-8") == generate_default_config()
