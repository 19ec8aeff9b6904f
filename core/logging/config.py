from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def bootstrap_logging(
    *,
    service: str = "connectivity",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "connectivity.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Install console and JSON-lines file handlers on the root logger.

    The console handler is opt-in through ``LOG_CONSOLE=true``. File records go
    through a queue so request coroutines never block on disk writes.
    """
    global _listener
    try:
        register_levels()
        root = logging.getLogger()
        root.handlers.clear()
        lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
        root.setLevel(lvl)

        if _env_flag("LOG_CONSOLE", "false"):
            console = logging.StreamHandler()
            console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
            console.setLevel(to_level(console_level_str) if console_level_str else lvl)
            console.setFormatter(ConsoleFormatter())
            root.addHandler(console)

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            root.addHandler(QueueHandler(q))
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()
        logging.getLogger(service).debug("logging ready")
    except Exception:
        try:
            logging.basicConfig(level=logging.INFO)
        except Exception:
            pass


def shutdown_logging() -> None:
    global _listener
    try:
        if _listener:
            _listener.stop()
            _listener = None
    except Exception:
        pass
