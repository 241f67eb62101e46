"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.user_api.runtime.config.config_template import (
    environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)

REPOSITORY_CONFIG = Path(__file__).resolve().parents[4] / "config.yaml"


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        """Test substitution of a simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            text = "Server running at http://${HOST}:${PORT}/api"
            result = substitute_env_vars(text)
            assert result == "Server running at http://localhost:8080/api"

    def test_substitute_env_var_with_default(self):
        """Test substitution with default value when env var is not set."""
        result = substitute_env_vars("${MISSING_VAR:-default_value}", env={})
        assert result == "default_value"

    def test_substitute_env_var_with_default_when_set(self):
        result = substitute_env_vars(
            "${PRESENT_VAR:-default_value}", env={"PRESENT_VAR": "actual_value"}
        )
        assert result == "actual_value"

    def test_substitute_env_var_with_empty_default(self):
        assert substitute_env_vars("${MISSING_VAR:-}", env={}) == ""

    def test_substitute_required_env_var_missing(self):
        """Test substitution fails when required env var is missing."""
        with pytest.raises(
            ValueError, match="Required environment variable MISSING_VAR not set"
        ):
            substitute_env_vars("${MISSING_VAR}", env={})

    def test_substitute_required_env_var_with_custom_message(self):
        with pytest.raises(ValueError, match="DB_URL: database url is required"):
            substitute_env_vars("${DB_URL:?database url is required}", env={})

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value", env={}) == "plain: value"


class TestEnvironmentOverrides:
    """Prefixed variables shadow their plain counterparts."""

    def test_prefixed_variable_wins(self):
        env = {"DATABASE_URL": "sqlite:///prod.db", "TEST_DATABASE_URL": "sqlite://"}

        result = environment_overrides("test", env)

        assert result["DATABASE_URL"] == "sqlite://"
        assert result["TEST_DATABASE_URL"] == "sqlite://"

    def test_other_environment_prefix_ignored(self):
        env = {"DATABASE_URL": "sqlite:///dev.db", "PRODUCTION_DATABASE_URL": "x"}

        result = environment_overrides("development", env)

        assert result["DATABASE_URL"] == "sqlite:///dev.db"

    def test_source_mapping_not_mutated(self):
        env = {"TEST_LOG_LEVEL": "DEBUG"}

        environment_overrides("test", env)

        assert env == {"TEST_LOG_LEVEL": "DEBUG"}


class TestLoadTemplatedYaml:
    """Test cases for load_templated_yaml function."""

    def test_load_valid_config(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    port: 9000\n"
            "  database:\n"
            "    url: ${USER_API_TEST_DB:-sqlite:///./fallback.db}\n"
        )

        with patch.dict(os.environ, {"USER_API_TEST_DB": "sqlite://"}):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9000
        assert config.database.url == "sqlite://"
        # Untouched sections keep their defaults
        assert config.logging.level == "INFO"

    def test_environment_prefixed_override(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  database:\n    url: ${USER_API_TEST_DB:-sqlite:///a.db}\n"
        )

        with patch.dict(os.environ, {"TEST_USER_API_TEST_DB": "sqlite:///b.db"}):
            config = load_templated_yaml(config_file, env_mode="test")

        assert config.database.url == "sqlite:///b.db"

    def test_empty_file_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(config_file)

    def test_invalid_yaml_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(config_file)

    def test_invalid_values_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    port: not-a-number\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "missing.yaml")

    def test_repository_config_loads_with_clean_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(REPOSITORY_CONFIG)

        assert config.app.environment == "development"
        assert config.app.port == 8000
        assert config.database.url == "sqlite:///./users.db"
        assert config.logging.file is None


class TestCommentLines:
    def test_placeholders_in_comments_are_ignored(self):
        text = "# Values use ${VAR} substitution\nkey: ${PRESENT:-x}\n"

        result = substitute_env_vars(text, env={})

        assert result == "# Values use ${VAR} substitution\nkey: x\n"

    def test_indented_comment_is_ignored(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    # override with ${REQUIRED_BUT_UNSET}\n"
            "    port: 9100\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9100
