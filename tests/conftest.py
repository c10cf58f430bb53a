"""Shared pytest fixtures for pgquery unit and integration tests."""
from __future__ import annotations

import pytest

from pgquery.builder.select import SelectBuilder
from pgquery.builder.update import UpdateBuilder
from pgquery.settings import BuilderSettings


@pytest.fixture
def publishers() -> SelectBuilder:
    """Empty SELECT builder on the ``publishers`` table."""
    return SelectBuilder("publishers")


@pytest.fixture
def publishers_update() -> UpdateBuilder:
    """Empty UPDATE builder on the ``publishers`` table."""
    return UpdateBuilder("publishers")


@pytest.fixture(scope="session")
def strict_settings() -> BuilderSettings:
    return BuilderSettings(strict_paging=True)
