import pytest  # noqa: F401
import matplotlib


def pytest_configure(config):
    """
    Select a non-interactive matplotlib backend before any test imports
    pyplot, so previews render without a display.
    """
    matplotlib.use("Agg")
