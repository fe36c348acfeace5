import pytest

from moelist.core.config import reset_settings
from moelist.core.reader import reset_rar_backend


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from real user settings and shared state."""
    monkeypatch.setenv("MOELIST_SETTINGS_PATH", str(tmp_path / "settings.json"))
    monkeypatch.setenv("MOELIST_IGNORE_LOCAL_SETTINGS", "1")
    for var in ("MOELIST_STYLE", "MOELIST_CONCURRENCY"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    reset_rar_backend()
    yield
    reset_settings()
    reset_rar_backend()
