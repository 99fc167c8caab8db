import logging
import os
import re

import tomllib

from aspects.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _default_config():
    """Return the default configuration for Aspects.

    This is placed in a separate function because we want to be absolutely
    sure that we are using a copy of the defaults when we manipulate config
    directly in tests.
    """
    from aspects.utils import IdentityStrategy, IdentityType

    return {
        "env": None,
        "debug": None,
        "identity_strategy": IdentityStrategy.UUID.value,
        "identity_type": IdentityType.STRING.value,
        "identity_function": None,
        "log_level": "INFO",
        "custom": {},
    }


class ConfigAttribute:
    """Makes an attribute forward to the config"""

    def __init__(self, name):
        self.__name__ = name

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        return obj[self.__name__]

    def __set__(self, obj, value):
        obj[self.__name__] = value


class Config(dict):
    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    identity_strategy = ConfigAttribute("identity_strategy")
    identity_type = ConfigAttribute("identity_type")
    identity_function = ConfigAttribute("identity_function")
    log_level = ConfigAttribute("log_level")

    @classmethod
    def load_from_dict(cls, config: dict | None = None):
        """Load configuration from a dictionary."""
        return cls(**cls._normalize_config(config or {}))

    @classmethod
    def load_from_path(cls, path: str):
        def find_config_file(directory: str):
            config_files = [".aspects.toml", "aspects.toml", "pyproject.toml"]
            for config_file in config_files:
                config_file_path = os.path.join(directory, config_file)
                if os.path.exists(config_file_path):
                    return config_file_path
            return None

        # Start checking from the provided path up to 2 parent directories
        current_dir = os.path.abspath(os.path.dirname(path))
        config_file_name = None

        for _ in range(3):
            config_file_name = find_config_file(current_dir)
            if config_file_name:
                break

            current_dir = os.path.dirname(current_dir)

        if not config_file_name:
            raise ConfigurationError(
                f"No configuration file found in {os.path.dirname(path)}"
            )

        logger.debug(f"Loading configuration from {config_file_name}")
        with open(config_file_name, "rb") as f:
            config = tomllib.load(f)

        # If pyproject.toml, extract configuration from the 'tool.aspects' section
        if config_file_name.endswith("pyproject.toml"):
            config = config.get("tool", {}).get("aspects", {})

        config = cls._normalize_config(config)
        config = cls._load_env_vars(config)

        return cls(**config)

    @classmethod
    def _normalize_config(cls, config):
        """Normalize configuration values.

        Known keys are merged over the defaults, and the section named by the
        ``ASPECTS_ENV`` environment variable, if present, is merged on top.
        """
        environment = os.environ.get("ASPECTS_ENV") or None

        keys = _default_config().keys()
        finalized_config = {key: value for key, value in config.items() if key in keys}

        finalized_config = cls._deep_merge(_default_config(), finalized_config)

        if environment and environment in config:
            finalized_config = cls._deep_merge(finalized_config, config[environment])

        return finalized_config

    @classmethod
    def _deep_merge(cls, dict1: dict, dict2: dict):
        result = dict1.copy()
        for key, value in dict2.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @classmethod
    def _load_env_vars(cls, config):
        if isinstance(config, dict):
            for key, value in config.items():
                if isinstance(value, str):
                    config[key] = cls._replace_env_var(value)
                elif isinstance(value, dict):
                    config[key] = cls._load_env_vars(value)
                elif isinstance(value, list):
                    config[key] = [
                        cls._replace_env_var(item) if isinstance(item, str) else item
                        for item in value
                    ]
        return config

    @classmethod
    def _replace_env_var(cls, value):
        """Replace environment variables in a string.

        ``${VAR}`` is replaced with the variable's value, and ``${VAR|default}``
        falls back to ``default`` when the variable is not set. Any number of
        placeholders may be mixed with static text.
        """
        match = cls.ENV_VAR_PATTERN.search(value)
        while match:
            matched_string = match.group(1)

            if "|" in matched_string:
                env_var, default_value = matched_string.split("|", 1)
                env_value = os.getenv(env_var, default_value)
            else:
                env_value = os.getenv(matched_string)

            if env_value is None:
                raise ConfigurationError(
                    f"Environment variable {matched_string} is not set"
                )

            value = value.replace(f"${{{matched_string}}}", env_value)
            match = cls.ENV_VAR_PATTERN.search(value)

        return value


active_config = Config.load_from_dict()


def configure(**overrides) -> Config:
    """Replace the active configuration with defaults merged with ``overrides``"""
    global active_config
    active_config = Config.load_from_dict(overrides)
    return active_config


def current_config() -> Config:
    return active_config
