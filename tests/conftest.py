"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from valdox import Validator
from valdox.core import reset_config, set_regex_engine

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def v() -> Validator:
    """A validator factory using the process-wide regex strategy."""
    return Validator()


@pytest.fixture(autouse=True)
def _restore_regex_engine() -> Iterator[None]:
    """Undo process-wide regex and config changes made by a test."""
    yield
    set_regex_engine(None)
    reset_config()
