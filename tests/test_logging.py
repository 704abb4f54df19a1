import logging

from ray_canvas.config import LogLevel
from ray_canvas.logging import PACKAGE_LOGGER, configure_logging


def test_configure_logging_sets_package_level() -> None:
    configure_logging(LogLevel.DEBUG)
    package = logging.getLogger(PACKAGE_LOGGER)
    assert package.level == logging.DEBUG
    assert package.propagate is False
    assert logging.getLogger().level == logging.WARNING

    configure_logging("warning")
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING


def test_module_loggers_inherit_package_level() -> None:
    configure_logging("info")
    assert logging.getLogger("ray_canvas.ppm").getEffectiveLevel() == logging.INFO
    assert not logging.getLogger("ray_canvas.ppm").isEnabledFor(logging.DEBUG)
