"""Shared fixtures for the complexnum test suite."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from complexnum import ComplexNumber  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def z34() -> ComplexNumber:
    """The 3+4i value used throughout the scenarios."""
    return ComplexNumber(3, 4)
