"""Pytest configuration and fixtures."""

import logging

import pytest

from dagsmith import Graph, IdentitySource


@pytest.fixture
def identity_source():
    """Fresh identity source so graph ids start at 0 in every test."""
    return IdentitySource()


@pytest.fixture
def graph(identity_source):
    """Empty graph with id 0."""
    return Graph(identity_source)


@pytest.fixture
def other_graph(identity_source):
    """Second graph from the same source as ``graph`` (id 1)."""
    return Graph(identity_source)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any configure_logging call made by a test."""
    yield
    logger = logging.getLogger("dagsmith")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
