import pytest
from pydantic import ValidationError

from moelist.core.config import (
    MoelistSettings,
    create_default_settings,
    get_settings,
    reset_settings,
    save_settings,
)


def test_defaults():
    s = get_settings()
    assert s.style == "preview"
    assert s.concurrency == 4
    assert s.skip_errors is False
    assert set(s.model_dump()) == {"style", "concurrency", "skip_errors"}


def test_env_override_for_style(monkeypatch):
    monkeypatch.setenv("MOELIST_STYLE", "table")
    monkeypatch.setenv("MOELIST_CONCURRENCY", "2")
    reset_settings()

    s = get_settings()
    assert s.style == "table"
    assert s.concurrency == 2


def test_save_and_reload_settings(tmp_path):
    s = create_default_settings()
    s.style = "code"
    s.skip_errors = True
    target = save_settings(s)
    assert target == tmp_path / "settings.json"

    # New process simulation: clear singleton, reload from file
    reset_settings()
    s2 = get_settings()
    assert s2.style == "code"
    assert s2.skip_errors is True


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        MoelistSettings(style="html")
    with pytest.raises(ValidationError):
        MoelistSettings(concurrency=0)
