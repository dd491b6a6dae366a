# ConverterToolkit
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Logging configuration with file rotation for the converter demo."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "convertertoolkit"


def setup_production_logging(
    app_name: str = "ConverterToolkit",
    console_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> Path:
    """
    Configure logging with file rotation.

    Creates two log files:
    - convertertoolkit.log: DEBUG+ messages from the package (5 MB per file, 3 rotations)
    - errors.log: ERROR+ messages from every logger (2 MB per file, 3 rotations)

    Args:
        app_name: Application name for the log directory
        console_level: Minimum level for console output
        log_dir: Explicit log directory (defaults to the platform location)

    Returns:
        Path to the log directory
    """
    log_dir = log_dir or _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()

    app_log_path = log_dir / "convertertoolkit.log"
    app_handler = RotatingFileHandler(
        app_log_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(detailed_formatter)
    package_logger.addHandler(app_handler)

    error_log_path = log_dir / "errors.log"
    error_handler = RotatingFileHandler(
        error_log_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)

    # matplotlib logs every font lookup below WARNING
    for name in ("matplotlib", "matplotlib.font_manager"):
        logging.getLogger(name).setLevel(logging.WARNING)

    # Compositing offsets are only interesting when debugging layouts
    logging.getLogger(f"{PACKAGE_LOGGER}.layout").setLevel(logging.INFO)

    log = logging.getLogger(__name__)
    log.info("=" * 60)
    log.info(f"{app_name} logging initialized")
    log.info(f"Main log: {app_log_path}")
    log.info(f"Error log: {error_log_path}")
    log.info(f"Platform: {sys.platform}, Python: {sys.version.split()[0]}")
    log.info("=" * 60)

    return log_dir


def _get_log_directory(app_name: str) -> Path:
    """
    Get platform-specific log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: $XDG_STATE_HOME/AppName/logs (~/.local/state by default)
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name / "logs"

    if sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    xdg_state_home = os.environ.get("XDG_STATE_HOME", home / ".local" / "state")
    return Path(xdg_state_home) / app_name / "logs"