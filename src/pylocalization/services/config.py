# src/pylocalization/services/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import dotenv_values

from pylocalization.config import const
from pylocalization.domain.errors import (
    InvalidConfigValueError,
    LangFileNotFoundError,
    MissingConfigError,
)


def check_configs(configs: Mapping[str, Any]) -> None:
    """Validate presence and type of the known options; unknown keys are ignored."""
    missing = [key for key in const.REQUIRED_CONFIGS if key not in configs]
    if missing:
        raise MissingConfigError(missing)

    for key in const.ALLOWED_CONFIGS:
        if key not in configs:
            continue
        value = configs[key]
        if key in const.NULLABLE_CONFIGS and not value:
            continue
        if not isinstance(value, str) or not value:
            raise InvalidConfigValueError(key)


def check_directory(path: Path | str) -> Path:
    p = Path(path)
    if not p.is_dir():
        raise LangFileNotFoundError(p)
    return p.resolve()


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Raw options as given; every accessor validates its own field when read.

    Filesystem checks are deferred to the accessors, so a config pointing at
    directories that do not exist yet can still be built and inspected.
    """

    raw_driver: str
    raw_lang_dir: str
    raw_default_lang: str
    raw_fallback_lang: Optional[str] = None
    raw_default_lang_dir: Optional[str] = None

    def __post_init__(self) -> None:
        check_configs(self.as_mapping())

    # ---------- constructors ----------
    @classmethod
    def from_mapping(cls, configs: Mapping[str, Any]) -> "LocalizationConfig":
        check_configs(configs)
        return cls(
            raw_driver=configs["driver"],
            raw_lang_dir=configs["langDir"],
            raw_default_lang=configs["defaultLang"],
            raw_fallback_lang=configs["fallBackLang"] or None,
            raw_default_lang_dir=configs.get("defaultLangDir") or None,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "LocalizationConfig":
        """Options from ``PYLOCALIZATION_*`` variables; the process env wins over ``.env``."""
        return cls.from_mapping(env_options(env_file))

    def with_overrides(self, **overrides: Optional[str]) -> "LocalizationConfig":
        """Copy with the given raw options replaced; ``None`` keeps the current value."""
        configs = self.as_mapping()
        for key, value in overrides.items():
            if key not in const.ALLOWED_CONFIGS:
                raise InvalidConfigValueError(key, f"unknown config option '{key}'")
            if value is not None:
                configs[key] = value
        return type(self).from_mapping(configs)

    def as_mapping(self) -> dict[str, Any]:
        return {
            "driver": self.raw_driver,
            "langDir": self.raw_lang_dir,
            "defaultLang": self.raw_default_lang,
            "fallBackLang": self.raw_fallback_lang,
            "defaultLangDir": self.raw_default_lang_dir,
        }

    # ---------- validated accessors ----------
    def driver(self) -> str:
        driver = self.raw_driver.lower()
        if driver not in const.ALLOWED_DRIVERS:
            raise InvalidConfigValueError("driver", f"{self.raw_driver} driver not allowed")
        return driver

    def is_json_driver(self) -> bool:
        return self.driver() == const.JSON_DRIVER

    def lang_dir(self) -> Path:
        return check_directory(self.raw_lang_dir)

    def default_lang_dir(self) -> Optional[Path]:
        if not self.raw_default_lang_dir:
            return None
        return check_directory(self.raw_default_lang_dir)

    def default_lang(self) -> Path:
        """Base path of the default language: a directory, or a ``.json`` file without its suffix."""
        return self._language_path(self.raw_default_lang)

    def fallback_lang(self) -> Optional[Path]:
        if not self.raw_fallback_lang:
            return None
        return self._language_path(self.raw_fallback_lang)

    def _language_path(self, lang: str) -> Path:
        path = self.lang_dir() / lang
        if self.is_json_driver():
            if path.with_name(path.name + const.DRIVER_EXTENSIONS[const.JSON_DRIVER]).is_file():
                return path
        return check_directory(path)

    def __repr__(self) -> str:
        return f"LocalizationConfig(driver={self.raw_driver!r}, lang_dir={self.raw_lang_dir!r}, default_lang={self.raw_default_lang!r})"


def env_options(env_file: Optional[str] = ".env") -> dict[str, Any]:
    values: dict[str, Any] = {}
    if env_file:
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update({k: v for k, v in os.environ.items() if k.startswith(const.ENV_PREFIX)})

    configs: dict[str, Any] = {}
    for key, env_name in const.ENV_NAMES.items():
        if env_name in values:
            configs[key] = values[env_name]
    return configs
