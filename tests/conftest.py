"""Shared test fixtures."""

import logging
from collections.abc import Iterator

import pytest

from unsplash_source.config import Settings
from unsplash_source.services.photo_query import PhotoQuery

BASE_URL = "https://source.unsplash.com"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        source_base_url="https://photos.example.test/",
        log_level="DEBUG",
        environment="test",
    )


@pytest.fixture
def query() -> PhotoQuery:
    return PhotoQuery()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("unsplash_source")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
