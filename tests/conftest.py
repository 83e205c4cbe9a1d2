"""Shared fixtures for mutant_detector tests."""

import logging
from datetime import datetime

import pytest

from mutant_detector.storage import InMemoryRecordStore

MUTANT_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]
HUMAN_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGACGG", "CCCTTA", "TCACTG"]

FIXED_TIME = datetime(2024, 1, 15, 12, 30, 0)


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MUTANT_* variables from the outer environment out of tests."""
    for var in ("MUTANT_DB_PATH", "MUTANT_DIGEST", "MUTANT_DB_TIMEOUT",
                "MUTANT_LOG_LEVEL", "MUTANT_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mutant_dna():
    return list(MUTANT_DNA)


@pytest.fixture
def human_dna():
    return list(HUMAN_DNA)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("mutant_detector")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
