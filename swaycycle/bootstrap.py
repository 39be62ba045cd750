import os
from typing import Any, TypedDict

import orjson


class Settings(TypedDict):
    socket: str | None
    include_floating: bool


_setting_types: dict[str, tuple[type, ...]] = {
    "socket": (str, type(None)),
    "include_floating": (bool,),
}


def read_settings_file(path: str) -> dict[str, Any]:
    with open(path, "rb") as f:
        try:
            settings = orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            raise ValueError(f"Could not parse {path}: {e}") from e

    if not isinstance(settings, dict):
        raise ValueError(f"{path} should hold a JSON object")
    return settings


def default_settings() -> Settings:
    template = os.path.join(os.path.dirname(__file__), "settings.json")
    return read_settings_file(template)  # pyright: ignore


def validate(settings: dict[str, Any], path: str) -> None:
    for key, value in settings.items():
        if key not in _setting_types:
            raise ValueError(f"Unknown setting {key!r} in {path}")
        if not isinstance(value, _setting_types[key]):
            raise ValueError(f"Setting {key!r} in {path} has the wrong type: {value!r}")


def initialize_and_load(settings_path: str | None = None) -> Settings:
    """
    Reads the settings file on top of the defaults. Without an explicit path,
    $SWAYCYCLE_SETTINGS is tried, then the file in the XDG config dir, which
    is allowed to be missing.
    """
    settings = default_settings()

    if settings_path is None:
        settings_path = os.environ.get("SWAYCYCLE_SETTINGS")

    if settings_path is None:
        settings_path = os.path.join(
            os.getenv("XDG_CONFIG_HOME", "~/.config"),
            "swaycycle",
            "settings.json",
        )
        settings_path = os.path.expanduser(settings_path)
        if not os.path.exists(settings_path):
            return settings
    elif not os.path.exists(settings_path):
        raise FileNotFoundError(f"Path to file does not exist: {settings_path}")

    user_settings = read_settings_file(settings_path)
    validate(user_settings, settings_path)
    settings.update(user_settings)  # pyright: ignore
    return settings
