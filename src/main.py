# ConverterToolkit
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Entry point for launching the converter demo window."""

from __future__ import annotations

import logging
import sys

from convertertoolkit.app.launcher import ConverterDemoLauncher
from convertertoolkit.core.logging_config import setup_production_logging

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Bootstrap the Qt application and block until it exits."""
    argv = list(sys.argv if argv is None else argv)

    try:
        log_dir = setup_production_logging(app_name="ConverterToolkit", console_level=logging.INFO)
        log.info("Starting ConverterToolkit demo (logs in %s)", log_dir)
    except Exception as e:
        # Fallback to basic logging if production logging fails
        logging.basicConfig(level=logging.INFO)
        log.error(f"Failed to setup production logging: {e}", exc_info=True)

    try:
        launcher = ConverterDemoLauncher(argv)
        launcher.run()
    except Exception as e:
        log.critical(f"ConverterToolkit crashed: {e}", exc_info=True)
        raise


if __name__ == "__main__":  # pragma: no cover - import guard
    main()
