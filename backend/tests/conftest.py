import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's shell and .env out of the picture
    monkeypatch.chdir(tmp_path)
    for name in ("MONGODB_URI", "DEBUG", "DD_DEBUG", "DD_APP_NAME", "DD_APP_VERSION"):
        monkeypatch.delenv(name, raising=False)
