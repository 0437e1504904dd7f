"""Application logging setup."""

from __future__ import annotations

import logging

from config.defaults import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure console logging for the app.

    Safe to call multiple times (Streamlit reruns the script on every
    interaction; handlers are only added once).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[console])
