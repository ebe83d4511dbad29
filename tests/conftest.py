import logging

import pytest

from servicecatalog_schema import common
from servicecatalog_schema.registry import PACKAGES, TYPE_MAP, Schema
from servicecatalog_schema.schemagen import generate_schema


@pytest.fixture(autouse=True)
def fresh_logger():
    """Every test starts from an unconfigured logger."""
    yield
    common._logger = None
    common._logger_config = None
    logging.getLogger(common.LOGGER_NAME).handlers.clear()


@pytest.fixture
def catalog_schema():
    return generate_schema(Schema, PACKAGES, TYPE_MAP)
