"""
Shared fixtures for the envy test suite.

Every test runs in its own working directory with the environment
resolution variables unset and an empty default registry.
"""

import os
import textwrap

import pytest

from envy.defaults import CONFIG_FILE_VARIABLE, ENVIRONMENT_VARIABLES
from envy.registry import registry as default_registry

STORE = """
production:
  - name: FOO
  - name: BAR
    message: Bar must be set
development:
  - name: BAZ
"""


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    # Override files write os.environ directly, so restore it wholesale.
    saved = os.environ.copy()
    for variable in (*ENVIRONMENT_VARIABLES, CONFIG_FILE_VARIABLE, "FOO", "BAR", "BAZ"):
        os.environ.pop(variable, None)
    monkeypatch.chdir(tmp_path)
    default_registry.clear()
    yield
    default_registry.clear()
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def write_file(tmp_path):
    """
    Write dedented text to a file under the test's directory.
    """

    def _write(relative, content):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(write_file):
    """Requirement store at the default location."""
    return write_file("config/envars.yml", STORE)
