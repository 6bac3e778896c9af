"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CSSMIXINS_*`` prefix
  3. TOML file    — ``cssmixins.toml`` discovered via walk-up
  4. Code defaults

The active settings are resolved once, on first use, and shared by every
mixin call for the rest of the process. ``use_settings`` and
``reset_settings`` replace them (CLI startup, tests).
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cssmixins.config.discovery import find_config
from cssmixins.config.logging import get_logger

PRODUCTION = "production"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``cssmixins.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CssMixinsSettings(BaseSettings):
    """Process-wide settings.

    Attributes:
        mode: ``"production"`` disables validation; any other value enables it.
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CSSMIXINS_",
        "extra": "ignore",
    }

    mode: str = "development"
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    css_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @property
    def validation_enabled(self) -> bool:
        return self.mode != PRODUCTION

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CssMixinsSettings:
        """Construct settings from a CLI invocation.

        Discovers ``cssmixins.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges non-None CLI flags as
        highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


class ModeSettings(BaseSettings):
    """Just the mode flag, read from ``CSSMIXINS_MODE``.

    Fallback for library calls when the full settings cannot be built.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CSSMIXINS_",
        "extra": "ignore",
    }

    mode: str = "development"


_active: CssMixinsSettings | None = None
_lock = threading.Lock()


def _resolve() -> CssMixinsSettings:
    try:
        return CssMixinsSettings.from_cli()
    except (ValidationError, click.ClickException) as exc:
        mode = ModeSettings().mode
        get_logger("cssmixins.config").warning(
            "settings.invalid", error=str(exc).splitlines()[0], mode=mode
        )
        return CssMixinsSettings.model_construct(mode=mode)


def get_settings() -> CssMixinsSettings:
    """Return the active settings, resolving them on first use.

    Invalid env vars or TOML never fail a mixin call: only the mode flag
    is kept and a warning is logged. ``from_cli`` still raises for the CLI.
    """
    global _active
    if _active is None:
        with _lock:
            if _active is None:
                _active = _resolve()
    return _active


def use_settings(settings: CssMixinsSettings) -> None:
    """Install *settings* as the active settings for this process."""
    global _active
    with _lock:
        _active = settings


def reset_settings() -> None:
    """Forget the active settings; the next lookup re-resolves them."""
    global _active
    with _lock:
        _active = None
