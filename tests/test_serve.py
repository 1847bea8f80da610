from __future__ import annotations

import importlib
import runpy

import pytest
import uvicorn
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.loadouts import app as app_module

from conftest import PROJECT_ROOT

SCRIPT = PROJECT_ROOT / "devtools" / "serve_loadouts.py"
ENV_KEYS = (
    app_module.ENV_DATA_DIR,
    app_module.ENV_OVERRIDES,
    app_module.ENV_ROOT_PATH,
    app_module.ENV_CORS,
    app_module.ENV_RELOAD_TABLES,
)


@pytest.fixture
def uvicorn_calls(monkeypatch):
    # blank values are restored at teardown, the launcher overwrites them
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    return calls


def test_reload_runs_factory_import_string(uvicorn_calls, data_dir):
    tool = runpy.run_path(str(SCRIPT))
    tool["main"](["--reload", "--data-dir", str(data_dir), "--reload-tables", "--cors-allow-origin", "http://a.test"])

    (target, kw), = uvicorn_calls
    assert isinstance(target, str)
    assert kw["factory"] is True
    assert kw["reload"] is True

    module_name, attr = target.split(":")
    factory = getattr(importlib.import_module(module_name), attr)
    app = factory()
    assert app.state.auto_reload_tables is True
    with TestClient(app) as c:
        assert c.get("/api/v1/meta").json()["bosses"]["total"] == 7


def test_plain_run_passes_app_object(uvicorn_calls, data_dir):
    tool = runpy.run_path(str(SCRIPT))
    tool["main"](["--data-dir", str(data_dir), "--port", "18000"])

    (target, kw), = uvicorn_calls
    assert isinstance(target, FastAPI)
    assert "reload" not in kw
    assert kw["port"] == 18000


def test_missing_data_dir_exits(uvicorn_calls, tmp_path):
    tool = runpy.run_path(str(SCRIPT))
    with pytest.raises(SystemExit) as exc:
        tool["main"](["--data-dir", str(tmp_path / "nope")])
    assert exc.value.code == 2
    assert uvicorn_calls == []
