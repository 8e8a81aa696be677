# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from qcprobe.common.settings import IMFConfig, Settings, get_settings
from qcprobe.services.api.app import create_app


@pytest.fixture()
def package_root(tmp_path):
    root = tmp_path / "imf"
    root.mkdir()
    return root


@pytest.fixture()
def api_client(package_root):
    """
    A TestClient whose `get_settings` dependency is overridden so IMF package
    paths resolve under a per-test temporary directory.
    """
    app = create_app()
    settings = Settings(imf=IMFConfig(package_root=package_root))
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
