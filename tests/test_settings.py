"""Tests for Settings."""

from __future__ import annotations

import pytest

from config import Settings
from domain.errors import ConnectivityConfigError, InvalidTargetURL, ProxyConfigError


@pytest.fixture
def settings() -> Settings:
    s = Settings()
    s.HUB_STATUS_URL = "http://hub.test/wd/hub/status"
    s.RAILS_AUTOMATE_URL = "http://rails.test"
    s.CONNECTIVITY_REQ_TIMEOUT_MS = 1000
    s.PROXY_HOST = ""
    s.PROXY_PORT = ""
    s.PROXY_USERNAME = ""
    s.PROXY_PASSWORD = ""
    return s


class TestProxyConfig:
    def test_none_without_host(self, settings: Settings) -> None:
        assert settings.proxy_config() is None

    def test_built_from_fields(self, settings: Settings) -> None:
        settings.PROXY_HOST = "proxy.test"
        settings.PROXY_PORT = "3128"
        settings.PROXY_USERNAME = "alice"
        proxy = settings.proxy_config()
        assert proxy is not None
        assert (proxy.host, proxy.port, proxy.username, proxy.password) == ("proxy.test", 3128, "alice", None)
        assert not proxy.has_credentials

    def test_bad_port(self, settings: Settings) -> None:
        settings.PROXY_HOST = "proxy.test"
        settings.PROXY_PORT = "http"
        with pytest.raises(ProxyConfigError):
            settings.proxy_config()


class TestValidate:
    def test_defaults_are_valid(self, settings: Settings) -> None:
        settings.validate()

    def test_malformed_url(self, settings: Settings) -> None:
        settings.RAILS_AUTOMATE_URL = "automate"
        with pytest.raises(InvalidTargetURL):
            settings.validate()

    def test_non_positive_timeout(self, settings: Settings) -> None:
        settings.CONNECTIVITY_REQ_TIMEOUT_MS = 0
        with pytest.raises(ValueError):
            settings.validate()

    def test_non_integer_timeout(self, settings: Settings) -> None:
        settings.CONNECTIVITY_REQ_TIMEOUT_MS = "soon"
        with pytest.raises(ConnectivityConfigError, match="must be an integer"):
            settings.validate()

    def test_timeout_string_is_converted(self, settings: Settings) -> None:
        settings.CONNECTIVITY_REQ_TIMEOUT_MS = "1500"
        settings.validate()
        assert settings.CONNECTIVITY_REQ_TIMEOUT_MS == 1500

    @pytest.mark.parametrize("url", ["http://hub.test:abc/", "http://hub.test:99999/"])
    def test_bad_port_in_url(self, settings: Settings, url: str) -> None:
        settings.HUB_STATUS_URL = url
        with pytest.raises(InvalidTargetURL, match="HUB_STATUS_URL"):
            settings.validate()
