from __future__ import annotations

import logging

from rich.logging import RichHandler

from .settings import get_settings


def setup_logging(level: int | str | None = None) -> None:
    if level is None:
        level = get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )
