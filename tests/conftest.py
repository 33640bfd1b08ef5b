"""Pytest configuration and shared fixtures."""

import io
import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def make_scanner():
    """Build an InputScanner over the given text."""
    from legacy_calculator import InputScanner

    def _make(text: str):
        return InputScanner(io.StringIO(text))

    return _make


@pytest.fixture
def run_session():
    """Run the interactive driver on the given input; return (status, output)."""
    from legacy_calculator.cli import run

    def _run(text: str):
        stdout = io.StringIO()
        status = run(io.StringIO(text), stdout)
        return status, stdout.getvalue()

    return _run


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0.0,
        -0.0,
        1.0,
        -1.0,
        0.5,
        -0.5,
        100.0,
        -100.0,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        5e-324,  # Smallest subnormal
        0.1 + 0.2,  # Floating point edge case
    ]
