"""
Configuration management for the encryption wrapper.

This module provides process-wide defaults for proxies that are constructed
without explicit options, loaded from built-in values, an optional YAML file
and environment variables (in increasing order of precedence).
"""

import os
import sys
from copy import deepcopy
from pathlib import Path

import yaml


_TRUE_VALUES = ("1", "true", "True", "yes", "Yes")
_FALSE_VALUES = ("0", "false", "False", "no", "No")


class WrapperConfig:
    """
    Configuration for the encryption wrapper.

    Per-proxy options always win over these values; they only fill in
    options a caller leaves out.
    """

    # Default configuration values
    _default_config: dict[str, object] = {
        "proxy": {
            "cipher": "AES-256-CBC",
            "encoding": "text_safe",  # raw or text_safe
            "allow_weak_iv": False,
            "padding": True,
            "decode_text": True,
        },
    }

    # Instance configuration values, loaded from file or environment
    _config: dict[str, object] = {}

    # Flag indicating if the configuration has been initialized
    _initialized: bool = False

    @classmethod
    def initialize(cls, config_path: str | None = None) -> None:
        """
        Initialize the configuration.

        Args:
            config_path: Optional path to a YAML configuration file
        """
        cls._config = deepcopy(cls._default_config)

        if config_path:
            cls._load_from_file(config_path)

        cls._load_from_env()

        cls._initialized = True

    @classmethod
    def _load_from_file(cls, config_path: str) -> None:
        """
        Load configuration from a YAML file.

        Sections that are mappings are merged key by key into the defaults,
        anything else replaces the default value.

        Args:
            config_path: Path to the YAML configuration file
        """
        path = Path(config_path)
        if not path.exists():
            print(f"Configuration file not found: {config_path}", file=sys.stderr)
            sys.exit(1)

        try:
            with open(path, "r") as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Error loading configuration file: {e}", file=sys.stderr)
            sys.exit(1)

        if not file_config:
            return
        if not isinstance(file_config, dict):
            print(f"Configuration file must contain a mapping: {config_path}", file=sys.stderr)
            sys.exit(1)

        for section, values in file_config.items():
            if isinstance(cls._config.get(section), dict):
                if not isinstance(values, dict):
                    print(
                        f"Configuration section '{section}' must be a mapping: {config_path}",
                        file=sys.stderr,
                    )
                    sys.exit(1)
                cls._config[section].update(values)
            else:
                cls._config[section] = values

    @classmethod
    def _load_from_env(cls) -> None:
        """Load configuration from environment variables."""
        proxy = cls._config["proxy"]

        env_cipher = os.environ.get("ENCRYPTION_WRAPPER_CIPHER")
        if env_cipher:
            proxy["cipher"] = env_cipher

        env_encoding = os.environ.get("ENCRYPTION_WRAPPER_ENCODING")
        if env_encoding:
            proxy["encoding"] = env_encoding

        env_weak_iv = os.environ.get("ENCRYPTION_WRAPPER_ALLOW_WEAK_IV")
        if env_weak_iv in _TRUE_VALUES:
            proxy["allow_weak_iv"] = True
        elif env_weak_iv in _FALSE_VALUES:
            proxy["allow_weak_iv"] = False

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure the configuration is initialized."""
        if not cls._initialized:
            cls.initialize()

    @classmethod
    def get(cls, key: str, default: object = None) -> object:
        """
        Get a configuration value.

        Args:
            key: The configuration key to retrieve, dots select nested keys
            default: Default value to return if key is not found

        Returns:
            The configuration value, or default if not found
        """
        cls._ensure_initialized()

        if "." in key:
            value = cls._config
            for part in key.split("."):
                if isinstance(value, dict) and part in value:
                    value = value[part]
                else:
                    return default
            return value

        return cls._config.get(key, default)

    @classmethod
    def get_default_cipher(cls) -> str:
        """Cipher used by the demo CLI when none is given."""
        return cls.get("proxy.cipher", "AES-256-CBC")

    @classmethod
    def get_default_encoding(cls) -> str:
        """Encoding mode name for proxies that do not specify one."""
        return cls.get("proxy.encoding", "text_safe")

    @classmethod
    def allows_weak_iv(cls) -> bool:
        """
        Check if weak initialisation vectors are accepted by default.

        Only a literal True enables it; strings from a YAML file such as
        "yes" are not coerced.
        """
        return cls.get("proxy.allow_weak_iv", False) is True

    @classmethod
    def padding_enabled(cls) -> bool:
        return cls.get("proxy.padding", True) is not False

    @classmethod
    def decodes_text(cls) -> bool:
        return cls.get("proxy.decode_text", True) is not False
