# tests/test_config.py
import logging

import pytest
import yaml

from chaingate.config.settings import GatewayConfig
from chaingate.exceptions import ConfigError
from chaingate.monitoring.logging_config import LogConfig
from chaingate.upstream.client import API_URL


class TestGatewayConfig:
    def test_defaults(self):
        config = GatewayConfig(environ={})

        assert config.get("server.host") == "localhost"
        assert config.get("server.port") == 8080
        assert config.get("upstream.base_url") == API_URL
        assert config.get("upstream.timeout") is None
        assert config.get("explorer.max_tx_per_block") == 10
        assert config.get("missing.key", "fallback") == "fallback"

    def test_yaml_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "chaingate.yaml"
        path.write_text(yaml.safe_dump({"server": {"port": 9000}, "upstream": {"timeout": 5}}))

        config = GatewayConfig(config_path=str(path), environ={})

        assert config.get("server.port") == 9000
        assert config.get("server.host") == "localhost"
        assert config.get("upstream.timeout") == 5

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "chaingate.yaml"
        path.write_text(yaml.safe_dump({"server": {"port": 9000}}))

        config = GatewayConfig(
            config_path=str(path),
            environ={"API_PORT": "7000", "HOST": "0.0.0.0", "SOCHAIN_TIMEOUT": "1.5", "CI_ENV": "test"},
        )

        assert config.get("server.port") == 7000
        assert config.get("server.host") == "0.0.0.0"
        assert config.get("upstream.timeout") == 1.5
        assert config.get("monitoring.environment") == "test"

    def test_invalid_env_value(self):
        with pytest.raises(ConfigError):
            GatewayConfig(environ={"API_PORT": "eighty"})

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigError):
            GatewayConfig(config_path=str(tmp_path / "nope.yaml"), environ={})

    def test_update(self):
        config = GatewayConfig(environ={})
        config.update("explorer.max_tx_per_block", 3)
        assert config.get("explorer.max_tx_per_block") == 3


class TestLogConfig:
    @pytest.mark.parametrize("environment", ["development", "staging", "production"])
    def test_named_environments_log_debug(self, environment):
        assert LogConfig(environment=environment).resolve_level() == logging.DEBUG

    def test_other_environments_log_info(self):
        assert LogConfig(environment="ci").resolve_level() == logging.INFO

    def test_explicit_level_wins(self):
        assert LogConfig(environment="development", level="warning").resolve_level() == logging.WARNING

    def test_setup_logging_writes_file(self, tmp_path):
        logger = LogConfig(log_dir=str(tmp_path), logger_name="chaingate.test").setup_logging()
        logger.info("hello")

        assert len(logger.handlers) == 2
        assert list(tmp_path.iterdir())

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
