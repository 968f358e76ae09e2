# conftest.py
import matplotlib
import pytest

@pytest.fixture(autouse=True)
def mpl_test_backend():
    """Switch to a non-interactive backend for all tests."""
    matplotlib.use('Agg')


@pytest.fixture(autouse=True)
def clean_ratfem_env(monkeypatch):
    """Tests start from the default settings regardless of the caller's shell."""
    monkeypatch.delenv("RATFEM_DISABLE_SECOND_DERIVATIVES", raising=False)
    monkeypatch.delenv("RATFEM_ZERO_DENOMINATOR", raising=False)
