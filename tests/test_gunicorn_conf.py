"""
The gunicorn bind address follows the layered settings.
"""

import runpy
from pathlib import Path

import pytest

from gateway.config import get_settings

GUNICORN_CONF = Path(__file__).resolve().parents[1] / "gunicorn.conf.py"


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_bind_uses_config_file_port(isolated_env):
    (isolated_env / "config.yaml").write_text('port: "7070"\nhost: "127.0.0.1"\n')

    conf = runpy.run_path(str(GUNICORN_CONF))

    assert conf["bind"] == "127.0.0.1:7070"


def test_bind_prefers_environment(isolated_env, monkeypatch):
    (isolated_env / "config.yaml").write_text('port: "7070"\n')
    monkeypatch.setenv("APP_PORT", "9090")
    monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")

    conf = runpy.run_path(str(GUNICORN_CONF))

    assert conf["bind"] == "0.0.0.0:9090"
    assert conf["loglevel"] == "warning"
    assert conf["worker_class"] == "uvicorn.workers.UvicornWorker"
