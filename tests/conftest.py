# tests/conftest.py
from __future__ import annotations
import pytest

from qcprobe.common import settings as s


@pytest.fixture(autouse=True)
def _fresh_settings():
    # settings are cached process-wide; every test starts from the environment
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()
