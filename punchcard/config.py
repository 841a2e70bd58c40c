"""
Load and expose app config (YAML). The CLI builds one PunchcardConfig at startup and
passes it down; nothing below the CLI reads configuration on its own.
"""
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LAYOUT = "%Y-%m-%d %H:%M:%S %z"
DEFAULT_DELIMITER = "\t"


class ConfigError(ValueError):
    """Config file could not be used."""


@dataclass(frozen=True)
class RenderOptions:
    """Display toggles for the punchcard."""
    show_scale: bool = False
    transparent_zero: bool = False
    show_margins: bool = False


@dataclass(frozen=True)
class PunchcardConfig:
    gradient: str = ""
    layout: str = DEFAULT_LAYOUT
    delimiter: str = DEFAULT_DELIMITER
    render: RenderOptions = field(default_factory=RenderOptions)

    def with_overrides(self, **overrides: Any) -> "PunchcardConfig":
        """Copy with the given fields replaced; None values are ignored."""
        render_keys = {"show_scale", "transparent_zero", "show_margins"}
        top = {k: v for k, v in overrides.items() if v is not None and k not in render_keys}
        render = {k: v for k, v in overrides.items() if v is not None and k in render_keys}
        return replace(self, render=replace(self.render, **render), **top)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _defaults() -> dict[str, Any]:
    return {
        "gradient": "",
        "layout": DEFAULT_LAYOUT,
        "delimiter": DEFAULT_DELIMITER,
        "display": {
            "scale": False,
            "transparent": False,
            "margins": False,
        },
    }


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    display = data.get("display") or {}
    if not isinstance(display, dict):
        raise ConfigError(f"{path}: display must be a mapping")
    defaults = _defaults()
    display = {**defaults["display"], **display}
    return {**defaults, **data, "display": display}


def _flag(display: dict[str, Any], key: str) -> bool:
    value = display.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"display.{key} must be true or false, got {value!r}")
    return value


def config_from_dict(data: dict[str, Any]) -> PunchcardConfig:
    """Build the typed config from a load_config() dict. Raises ConfigError on non-bool toggles."""
    display = data.get("display", {})
    return PunchcardConfig(
        gradient=str(data.get("gradient") or ""),
        layout=str(data.get("layout") or DEFAULT_LAYOUT),
        delimiter=str(data.get("delimiter") or DEFAULT_DELIMITER),
        render=RenderOptions(
            show_scale=_flag(display, "scale"),
            transparent_zero=_flag(display, "transparent"),
            show_margins=_flag(display, "margins"),
        ),
    )
