import os

import pytest
from mock import patch

from aspects.config import Config
from aspects.exceptions import ConfigurationError


def test_defaults_are_loaded_from_empty_dict():
    config = Config.load_from_dict()

    assert config["identity_strategy"] == "uuid"
    assert config["identity_type"] == "string"
    assert config["log_level"] == "INFO"
    assert config.identity_type == "string"


def test_unknown_keys_are_ignored():
    config = Config.load_from_dict({"identity_type": "integer", "colour": "blue"})

    assert config["identity_type"] == "integer"
    assert "colour" not in config


def test_nested_values_are_deep_merged():
    config = Config.load_from_dict({"custom": {"FOO": "bar"}})
    assert config["custom"] == {"FOO": "bar"}


def test_environment_section_overrides_base_values():
    with patch.dict(os.environ, {"ASPECTS_ENV": "production"}):
        config = Config.load_from_dict(
            {"log_level": "DEBUG", "production": {"log_level": "WARNING"}}
        )

    assert config["log_level"] == "WARNING"


def test_load_from_aspects_toml(tmp_path):
    (tmp_path / "aspects.toml").write_text('identity_type = "uuid"\n')

    config = Config.load_from_path(str(tmp_path / "module.py"))

    assert config["identity_type"] == "uuid"


def test_dot_file_takes_precedence(tmp_path):
    (tmp_path / ".aspects.toml").write_text('identity_type = "integer"\n')
    (tmp_path / "aspects.toml").write_text('identity_type = "uuid"\n')

    config = Config.load_from_path(str(tmp_path / "module.py"))

    assert config["identity_type"] == "integer"


def test_load_from_pyproject_tool_section(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.aspects]\nlog_level = "DEBUG"\n'
    )

    config = Config.load_from_path(str(tmp_path / "module.py"))

    assert config["log_level"] == "DEBUG"
    assert "project" not in config


def test_config_is_found_in_parent_directories(tmp_path):
    (tmp_path / "aspects.toml").write_text('log_level = "ERROR"\n')
    nested = tmp_path / "one" / "two"
    nested.mkdir(parents=True)

    config = Config.load_from_path(str(nested / "module.py"))

    assert config["log_level"] == "ERROR"


def test_missing_config_file(tmp_path):
    nested = tmp_path / "one" / "two" / "three"
    nested.mkdir(parents=True)

    with pytest.raises(ConfigurationError):
        Config.load_from_path(str(nested / "module.py"))


def test_env_vars_are_replaced_on_load(tmp_path):
    (tmp_path / "aspects.toml").write_text('log_level = "${APP_LOG_LEVEL|INFO}"\n')

    with patch.dict(os.environ, {"APP_LOG_LEVEL": "DEBUG"}):
        config = Config.load_from_path(str(tmp_path / "module.py"))

    assert config["log_level"] == "DEBUG"
