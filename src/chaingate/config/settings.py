# File: src/chaingate/config/settings.py

import copy
import os
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigError
from ..upstream.client import API_URL
from ..utils.config import Config

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {
        "host": Config.DEFAULT_HOST,
        "port": Config.DEFAULT_PORT,
    },
    "upstream": {
        "base_url": API_URL,
        "timeout": None,  # seconds, None waits forever
    },
    "explorer": {
        "max_tx_per_block": Config.MAX_TX_PER_BLOCK,
    },
    "monitoring": {
        "environment": Config.ENVIRONMENT_DEV,
        "log_level": None,
        "log_dir": None,
        "metrics_enabled": True,
    },
}

# env var -> (dotted key, parser)
ENV_OVERRIDES = {
    "HOST": ("server.host", str),
    "API_PORT": ("server.port", int),
    "SOCHAIN_API_URL": ("upstream.base_url", str),
    "SOCHAIN_TIMEOUT": ("upstream.timeout", float),
    "MAX_TX_PER_BLOCK": ("explorer.max_tx_per_block", int),
    "CI_ENV": ("monitoring.environment", str),
    "LOG_LEVEL": ("monitoring.log_level", str),
    "LOG_DIR": ("monitoring.log_dir", str),
}


def _merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class GatewayConfig:
    """Defaults, then an optional YAML file, then environment variables."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[str] = None,
    ):
        self.config_path = config_path
        if environ is None:
            load_dotenv(dotenv_path or find_dotenv(usecwd=True))
            environ = os.environ
        self.config = self._load_config(environ)

    def _load_config(self, environ: Mapping[str, str]) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_path:
            if not os.path.exists(self.config_path):
                raise ConfigError(f"config file not found: {self.config_path}")
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, Mapping):
                raise ConfigError(f"config file must contain a mapping: {self.config_path}")
            _merge(config, loaded)

        for name, (key, parser) in ENV_OVERRIDES.items():
            raw = environ.get(name)
            if raw is None or raw == "":
                continue
            try:
                value = parser(raw)
            except ValueError:
                raise ConfigError(f"invalid value for {name}: {raw!r}")
            self._set(config, key, value)

        return config

    @staticmethod
    def _set(config: Dict[str, Any], key: str, value: Any) -> None:
        keys = key.split('.')
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value in memory."""
        self._set(self.config, key, value)
