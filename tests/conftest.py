import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'cfnmerge' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from cfnmerge.core.stdlib_logging import reset_stdlib_logging_for_tests
from cfnmerge.data import clear_caches
from helpers.memory_fs import InMemoryFileAccess


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Drop developer CFNMERGE_* overrides and reset logging between tests."""
    for key in list(os.environ):
        if key.startswith("CFNMERGE_"):
            monkeypatch.delenv(key, raising=False)
    clear_caches()
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def memory_fs():
    """Empty in-memory file access; tests add files with ``memory_fs.add``."""
    return InMemoryFileAccess()


@pytest.fixture
def template_dir(tmp_path):
    """Directory for on-disk templates used by CLI tests."""
    d = tmp_path / "templates"
    d.mkdir()
    return d
