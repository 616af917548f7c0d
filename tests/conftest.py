"""Shared test fixtures."""

import pytest

from src.vf_flake.domain.configuration import FlakeConfiguration, build_configuration


@pytest.fixture
def default_configuration() -> FlakeConfiguration:
    """41/10/12 layout with the standard epoch, non-strict."""
    return build_configuration()
