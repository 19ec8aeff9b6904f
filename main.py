"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="connectivity",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="connectivity.jsonl",
    )
    from presentation.cli import ConnectivityCommand

    try:
        return asyncio.run(ConnectivityCommand().execute(sys.argv[1:] if argv is None else argv))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
