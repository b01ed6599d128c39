"""
Shared fixtures for the secret key generator tests.
"""

import pytest

from secretkeygen import utils


@pytest.fixture(autouse=True)
def reset_debuglevel():
    """Keep the module level debug setting from leaking between tests."""
    yield
    utils.set_debuglevel(-1)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
