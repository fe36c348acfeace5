"""
Configuration management using Dynaconf and Pydantic.

Settings are layered: Dynaconf reads `settings.toml`, `.secrets.toml` and the
user-scoped `~/.config/moelist/settings.toml` plus `MOELIST_*` environment
variables, and the merged mapping is validated into a typed `MoelistSettings`.

`get_settings` returns a process-wide instance; `reset_settings` drops it.
"""

import json
import os
from pathlib import Path
from typing import Literal, Optional

import toml
from dynaconf import Dynaconf
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.console import Console

console = Console(stderr=True)

ReportStyle = Literal["preview", "code", "table"]

USER_CONFIG_DIR = Path.home() / ".config" / "moelist"
USER_SETTINGS_FILE = USER_CONFIG_DIR / "settings.toml"

LOCAL_SETTINGS_FILE = Path("settings.toml")

settings_loader = Dynaconf(
    envvar_prefix="MOELIST",
    settings_files=[
        "settings.toml",
        ".secrets.toml",
        str(USER_SETTINGS_FILE),
    ],
    load_dotenv=True,
)


class MoelistSettings(BaseModel):
    """Validated application settings."""

    style: ReportStyle = "preview"
    # Maximum number of archives inspected at the same time
    concurrency: int = Field(default=4, ge=1)
    skip_errors: bool = False

    model_config = ConfigDict(validate_assignment=True)


_settings_instance: Optional[MoelistSettings] = None

_FIELDS = tuple(MoelistSettings.model_fields)


def _pick_known(data: dict) -> dict:
    return {k.lower(): v for k, v in data.items() if k.lower() in _FIELDS}


def get_settings() -> MoelistSettings:
    """Get the application settings as a singleton Pydantic model.

    Honors MOELIST_SETTINGS_PATH when set: a JSON file used for persistence
    in tests.
    """
    global _settings_instance
    if _settings_instance is None:
        config_dict: dict = {}

        env_settings_path = os.getenv("MOELIST_SETTINGS_PATH")
        if env_settings_path:
            p = Path(env_settings_path)
            if p.exists():
                config_dict.update(_pick_known(json.loads(p.read_text(encoding="utf-8")) or {}))

        # Re-read files and environment so a reset picks up changes
        settings_loader.reload()
        config_dict.update(_pick_known(settings_loader.as_dict() or {}))

        ignore_local = os.getenv("MOELIST_IGNORE_LOCAL_SETTINGS") == "1"
        if (not ignore_local) and LOCAL_SETTINGS_FILE.exists():
            local_data = toml.loads(LOCAL_SETTINGS_FILE.read_text(encoding="utf-8")) or {}
            config_dict.update(_pick_known(local_data))

        # Explicit environment overrides win over every file layer
        env_style = os.getenv("MOELIST_STYLE")
        env_concurrency = os.getenv("MOELIST_CONCURRENCY")
        if env_style:
            config_dict["style"] = env_style
        if env_concurrency:
            config_dict["concurrency"] = env_concurrency

        try:
            _settings_instance = MoelistSettings(**config_dict)
        except ValidationError as e:
            console.print(f"[red]Configuration error:[/red]\n{e}")
            raise

    return _settings_instance


def save_settings(new_settings: MoelistSettings) -> Path:
    """Persist settings and make them current.

    Writes JSON to MOELIST_SETTINGS_PATH when set, otherwise TOML to the
    user-scoped settings file. Returns the file written.
    """
    global _settings_instance
    data = new_settings.model_dump(exclude_none=True)

    env_settings_path = os.getenv("MOELIST_SETTINGS_PATH")
    if env_settings_path:
        target = Path(env_settings_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data), encoding="utf-8")
    else:
        target = USER_SETTINGS_FILE
        USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        target.write_text(toml.dumps(data), encoding="utf-8")

    _settings_instance = new_settings
    return target


def create_default_settings() -> MoelistSettings:
    """Create a default settings instance, useful for resets."""
    return MoelistSettings()


def reset_settings():
    """Reset in-memory settings (do not delete on-disk settings)."""
    global _settings_instance
    _settings_instance = None
