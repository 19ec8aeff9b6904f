from __future__ import annotations

import argparse
import json
import uuid
from typing import Iterable, List, Optional

from config import Settings, settings as default_settings
from core.logging.logger import StructuredLogger, get_logger
from application.services.connectivity import (
    CheckRegistry,
    ConnectivityChecker,
    ReportLogger,
    RequestExecutor,
    report_rows,
)
from domain.entities import ConnectivityReport

DEFAULT_TOPIC = "CONNECTIVITY_CHECKS"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connectivity-check",
        description="Check HTTP(S) reachability of the Hub and Rails endpoints, optionally through a proxy.",
    )
    parser.add_argument("--proxy-host", help="forward proxy host (enables proxy checks)")
    parser.add_argument("--proxy-port", help="forward proxy port")
    parser.add_argument("--proxy-user", help="proxy username")
    parser.add_argument("--proxy-pass", help="proxy password")
    parser.add_argument("--timeout-ms", type=int, help="per-request timeout in milliseconds")
    parser.add_argument("--topic", default=DEFAULT_TOPIC, help="log topic for the report")
    parser.add_argument("--uuid", dest="correlation_id", help="correlation id (generated when omitted)")
    parser.add_argument("--json", action="store_true", help="print the report rows as JSON")
    return parser


class ConnectivityCommand:
    """Runs the connectivity checks once and prints a summary."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.logger: StructuredLogger = get_logger(__name__, service="connectivity")

    def apply_overrides(self, args: argparse.Namespace) -> None:
        if args.proxy_host:
            self.settings.PROXY_HOST = args.proxy_host
        if args.proxy_port:
            self.settings.PROXY_PORT = args.proxy_port
        if args.proxy_user:
            self.settings.PROXY_USERNAME = args.proxy_user
        if args.proxy_pass:
            self.settings.PROXY_PASSWORD = args.proxy_pass
        if args.timeout_ms is not None:
            self.settings.CONNECTIVITY_REQ_TIMEOUT_MS = args.timeout_ms

    def build_checker(self) -> ConnectivityChecker:
        s = self.settings
        registry = CheckRegistry(s.HUB_STATUS_URL, s.RAILS_AUTOMATE_URL, proxy=s.proxy_config())
        executor = RequestExecutor(s.CONNECTIVITY_REQ_TIMEOUT_MS, self.logger)
        report_logger = ReportLogger(get_logger("connectivity.report", service="connectivity"))
        return ConnectivityChecker(registry, executor, report_logger, self.logger)

    async def execute(self, argv: Optional[Iterable[str]] = None) -> int:
        args = build_parser().parse_args(list(argv or []))
        self.apply_overrides(args)
        try:
            self.settings.validate()
            checker = self.build_checker()
            checker.registry.decide()
        except ValueError as e:
            self.logger.error(lambda: f"connectivity-config-invalid {e}")
            print(f"Configuration error: {e}")
            return 2

        correlation_id = args.correlation_id or str(uuid.uuid4())
        report = await checker.fire_checks(args.topic, correlation_id)
        self._print_report(report, as_json=args.json)
        return 0

    @staticmethod
    def _print_report(report: ConnectivityReport, *, as_json: bool) -> None:
        if as_json:
            print(json.dumps(report_rows(report), separators=(",", ":"), ensure_ascii=False))
            return
        print(f"Connectivity checks ({report.correlation_id}):")
        for outcome in report.outcomes:
            if outcome.status_code is not None:
                detail = f"status {outcome.status_code}"
            else:
                detail = outcome.error_message
            print(f"- {outcome.description}: {outcome.result.value} ({detail})")


async def run(argv: Optional[Iterable[str]] = None) -> int:
    return await ConnectivityCommand().execute(argv)
