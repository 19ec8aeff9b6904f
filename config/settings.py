"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from application.services.connectivity.request_builder import parse_target_url
from domain.entities import ProxyConfig
from domain.errors import ConnectivityConfigError, InvalidTargetURL, ProxyConfigError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """Process-wide configuration for the connectivity checks.

    Values come from the environment (optionally ``config/.env``). The CLI may
    override the proxy and timeout fields before the checks are decided.
    """

    # ── Targets ────────────────────────────────────────────────────────────
    # The HTTPS checks reuse these URLs; the transport picks the scheme/port.
    HUB_STATUS_URL:     str = os.getenv('HUB_STATUS_URL', 'http://hub-cloud.browserstack.com/wd/hub/status')
    RAILS_AUTOMATE_URL: str = os.getenv('RAILS_AUTOMATE_URL', 'http://automate.browserstack.com')

    # ── HTTP ───────────────────────────────────────────────────────────────
    # Checked and converted to int by validate().
    CONNECTIVITY_REQ_TIMEOUT_MS: int | str = os.getenv('CONNECTIVITY_REQ_TIMEOUT_MS', '20000')

    # ── Proxy (optional) ───────────────────────────────────────────────────
    PROXY_HOST:     str = os.getenv('PROXY_HOST', '')
    PROXY_PORT:     str = os.getenv('PROXY_PORT', '')
    PROXY_USERNAME: str = os.getenv('PROXY_USERNAME', '')
    PROXY_PASSWORD: str = os.getenv('PROXY_PASSWORD', '')

    # ── Paths / logging ────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    def proxy_config(self) -> Optional[ProxyConfig]:
        """Return the configured proxy, or None when no proxy host is set."""
        if not self.PROXY_HOST:
            return None
        try:
            port = int(self.PROXY_PORT)
        except (TypeError, ValueError):
            raise ProxyConfigError(f"PROXY_PORT must be an integer, got {self.PROXY_PORT!r}")
        return ProxyConfig(
            host=self.PROXY_HOST,
            port=port,
            username=self.PROXY_USERNAME or None,
            password=self.PROXY_PASSWORD or None,
        )

    def validate(self) -> None:
        for name in ('HUB_STATUS_URL', 'RAILS_AUTOMATE_URL'):
            try:
                parse_target_url(getattr(self, name))
            except InvalidTargetURL as e:
                raise InvalidTargetURL(f"{name}: {e}") from e
        try:
            timeout_ms = int(self.CONNECTIVITY_REQ_TIMEOUT_MS)
        except (TypeError, ValueError):
            raise ConnectivityConfigError(
                f"CONNECTIVITY_REQ_TIMEOUT_MS must be an integer, got {self.CONNECTIVITY_REQ_TIMEOUT_MS!r}"
            )
        if timeout_ms <= 0:
            raise ConnectivityConfigError("CONNECTIVITY_REQ_TIMEOUT_MS must be positive")
        self.CONNECTIVITY_REQ_TIMEOUT_MS = timeout_ms
        self.proxy_config()


settings = Settings()
