"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def invalid_operands():
    """Operand strings the parser must reject."""
    return [
        "",
        "abc",
        "5abc",
        "1.2.3",
        "--5",
        "+5",
        " 5",
        "5 ",
        ".",
        "-",
        "1,000",
        "Error",
        "NaN",
        "Infinity",
        "1e400",
    ]


@pytest.fixture
def sample_operands():
    """Operand strings with their parsed values."""
    return {
        "0": 0.0,
        "-0": 0.0,
        "5": 5.0,
        "-5": -5.0,
        "0.5": 0.5,
        ".5": 0.5,
        "5.": 5.0,
        "12.50": 12.5,
        "1.000000e+12": 1e12,
        "-2.5E-7": -2.5e-7,
    }
