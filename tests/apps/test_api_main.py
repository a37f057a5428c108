"""Tests for the API process entry point."""

import pytest

from config.config import Config
from apps.api.main import build_server_config


async def asgi_app(scope, receive, send):
    pass


class TestBuildServerConfig:
    """uvicorn must receive a level name it knows."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("WARN", "warning"),
            ("warn", "warning"),
            ("WARNING", "warning"),
            ("INFO", "info"),
            ("ERROR", "error"),
        ],
    )
    def test_level_is_normalized(self, level, expected):
        config = Config()
        config.logging.level = level

        server_config = build_server_config(asgi_app, config)

        assert server_config.log_level == expected

    def test_debug_flag_wins(self):
        config = Config()
        config.logging.level = "WARN"
        config.logging.debug = True

        assert build_server_config(asgi_app, config).log_level == "debug"

    def test_host_and_port_from_config(self):
        config = Config()
        config.api.host = "127.0.0.1"
        config.api.port = 9001

        server_config = build_server_config(asgi_app, config)

        assert server_config.host == "127.0.0.1"
        assert server_config.port == 9001
