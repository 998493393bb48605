import importlib

import pytest
from fastapi.testclient import TestClient

import aurajournal.main as main
from aurajournal.config import Settings


def test_import_reads_no_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "not-a-number")

    reloaded = importlib.reload(main)

    assert not hasattr(reloaded, "app")
    # the bad value only surfaces when an app is actually built
    with pytest.raises(ValueError):
        reloaded.create_app()


def test_factory_builds_a_working_app(classifier, clock):
    app = main.create_app(Settings(), classifier=classifier, clock=clock)

    with TestClient(app) as c:
        assert c.get("/api/user/progress").status_code == 200
