import logging

import pytest

from convertertoolkit.core.logging_config import PACKAGE_LOGGER, setup_production_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(root.handlers), root.level, list(package.handlers), package.level)
    yield
    for logger in (root, package):
        for handler in logger.handlers:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.handlers[:] = saved[2]
    package.setLevel(saved[3])


def test_setup_writes_package_and_error_logs(tmp_path, restore_logging):
    log_dir = setup_production_logging(console_level=logging.CRITICAL, log_dir=tmp_path / "logs")

    logging.getLogger("convertertoolkit.svg.exporter").debug("debug detail")
    logging.getLogger("convertertoolkit.pdf.exporter").error("pdf broke")
    for handler in logging.getLogger(PACKAGE_LOGGER).handlers + logging.getLogger().handlers:
        handler.flush()

    assert log_dir == tmp_path / "logs"
    app_log = (log_dir / "convertertoolkit.log").read_text(encoding="utf-8")
    error_log = (log_dir / "errors.log").read_text(encoding="utf-8")
    assert "debug detail" in app_log
    assert "pdf broke" in error_log
    assert "debug detail" not in error_log
    assert logging.getLogger("matplotlib.font_manager").level == logging.WARNING
