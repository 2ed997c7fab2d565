import logging
from typing import Iterator

import pytest

from algotx.logger import get_logger, setup_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    package = logging.getLogger("algotx")
    saved_root = (root.level, list(root.handlers))
    saved_package = (package.level, list(package.handlers), package.propagate)
    yield
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
    package.setLevel(saved_package[0])
    package.handlers[:] = saved_package[1]
    package.propagate = saved_package[2]


def test_get_logger_does_not_configure() -> None:
    logger = get_logger("algotx.fees")
    assert logger.name == "algotx.fees"
    assert logger is logging.getLogger("algotx.fees")


def test_setup_logger(restore_logging: None) -> None:
    logger = setup_logger("algotx")
    assert logger.name == "algotx"
    assert logger.level == logging.INFO
    assert not logger.propagate
    assert any(
        isinstance(handler, logging.StreamHandler)
        for handler in logger.handlers
    )


def test_setup_logger_keeps_module_loggers(restore_logging: None) -> None:
    module_logger = get_logger("algotx.group")
    setup_logger("algotx")
    assert not module_logger.disabled
    assert module_logger.getEffectiveLevel() == logging.INFO
