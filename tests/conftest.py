import logging

import pytest

from cipha.logging_config import reset_logging


@pytest.fixture(autouse=True)
def clean_cipha_logger():
    yield
    reset_logging()
    logging.getLogger("cipha").setLevel(logging.NOTSET)
