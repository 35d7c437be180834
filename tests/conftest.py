import os
import sys

import pytest

# Ensure project root is on sys.path so top-level packages (e.g., refqueue, config) are importable
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config.settings import Settings, get_settings  # noqa: E402
from refqueue import ReferencePriorityQueue  # noqa: E402


@pytest.fixture
def settings():
    # every mutation re-checks the invariants while testing
    return Settings(DEBUG=True, LOG_COLORS=False)


@pytest.fixture
def pq(settings):
    return ReferencePriorityQueue(settings)


@pytest.fixture
def fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
