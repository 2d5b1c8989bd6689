"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Verbosity, settings

from ryandata_postcode_utils import PostcodeRule, PostcodeService

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def padded_rule() -> PostcodeRule:
    """Five-digit numeric rule that left-pads short codes with zeros."""
    return PostcodeRule(
        country_code="XX",
        full_regex="^[0-9]{5}$",
        description="5 digits",
        range_is_number=True,
        range_regex="^[0-9]{5}$",
        min_length=5,
        left_padding_char="0",
    )


@pytest.fixture
def alpha_rule() -> PostcodeRule:
    """Non-numeric rule compared as strings."""
    return PostcodeRule(
        country_code="YY",
        full_regex="^[A-Za-z]{2}[0-9]{2}$",
        description="2 letters and 2 digits",
        range_is_number=False,
        range_regex="^[A-Za-z]{2}[0-9]{2}$",
        min_length=4,
    )


@pytest.fixture(scope="session")
def service() -> PostcodeService:
    """Service over the bundled rule and province tables."""
    return PostcodeService()
