import logging

import pytest

from openapi_to_ts.logging_config import ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    yield logger
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestLoggingConfig:
    def test_module_loggers_live_under_the_package_logger(self):
        from openapi_to_ts.pipeline import generator

        assert generator.logger is get_logger("openapi_to_ts.pipeline.generator")
        assert generator.logger.name.startswith(f"{ROOT_LOGGER}.")

    def test_repeated_configuration_keeps_one_handler(self, package_logger):
        configure_logging()
        configure_logging()
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False

    def test_verbose_enables_debug(self, package_logger):
        configure_logging(verbose=True)
        assert package_logger.level == logging.DEBUG
        assert package_logger.handlers[0].formatter._fmt == "[openapi_to_ts] %(levelname)s %(message)s"
