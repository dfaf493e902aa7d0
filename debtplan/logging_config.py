"""Root logger setup for the API process."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _level(name: Optional[str], default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def configure_logging(
    level: str = "INFO",
    file_path: Optional[str] = None,
    noisy_level: str = "WARNING",
    noisy_loggers: Iterable[str] = ("werkzeug",),
) -> None:
    """
    Send records to stderr (and ``file_path`` when given) at ``level``.

    Loggers in ``noisy_loggers`` are held at ``noisy_level`` or above, so
    e.g. werkzeug's per-request lines stay quiet under an INFO root.
    """
    root_level = _level(level, logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    # force: create_app() runs once per test
    logging.basicConfig(level=root_level, format=LOG_FORMAT, handlers=handlers, force=True)

    floor = _level(noisy_level, logging.WARNING)
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(max(root_level, floor))
