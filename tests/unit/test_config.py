"""Unit tests for service_overview/core/config.py."""

from __future__ import annotations

import os
from unittest.mock import patch

from service_overview.core.config import Settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults without any env vars."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.config_file == "config.json"
        assert settings.request_timeout_seconds == 2.0
        assert settings.dispatch_deadline_seconds is None
        assert settings.url_mid_fix == "/"
        assert settings.url_post_fix == "/actuator/info"
        assert settings.log_json is False
        assert settings.api_port == 8000

    def test_env_override(self):
        """Settings should be overridden by SWO_ prefixed env vars."""
        env = {
            "SWO_CONFIG_FILE": "/etc/overview/config.json",
            "SWO_REQUEST_TIMEOUT_SECONDS": "0.5",
            "SWO_DISPATCH_DEADLINE_SECONDS": "10",
            "SWO_URL_MID_FIX": "/backend/",
            "SWO_LOG_JSON": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        assert settings.config_file == "/etc/overview/config.json"
        assert settings.request_timeout_seconds == 0.5
        assert settings.dispatch_deadline_seconds == 10.0
        assert settings.url_mid_fix == "/backend/"
        assert settings.log_json is True
