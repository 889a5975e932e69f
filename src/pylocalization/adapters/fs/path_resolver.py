# src/pylocalization/adapters/fs/path_resolver.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pylocalization.config import const
from pylocalization.domain.errors import EmptyKeyError, LangFileNotFoundError
from pylocalization.services.config import LocalizationConfig


def extension(driver: str) -> str:
    return const.DRIVER_EXTENSIONS[driver]


def _with_suffix(base: Path, suffix: str) -> Path:
    # не Path.with_suffix: код языка может содержать точку ("pt.BR")
    return base.with_name(base.name + suffix)


@dataclass(frozen=True, slots=True)
class PathResolver:
    """Translation file locations for a key. Always works with pathlib.Path.

    ``array``/``gettext``: ``<language dir>/<first key segment><ext>``, one file per topic.
    ``json``: ``<language base><ext>``, one file per language.
    """

    config: LocalizationConfig

    def resolve(self, key: str) -> Path:
        """Canonical path of the file serving ``key``; raises if it does not exist."""
        path = self.candidate(key)
        if not path.exists():
            raise LangFileNotFoundError(path)
        return path.resolve()

    def candidate(self, key: str, base: Optional[Path] = None) -> Path:
        """Path of the file serving ``key`` under ``base`` (the default language by default), unchecked."""
        if not key:
            raise EmptyKeyError()
        driver = self.config.driver()
        ext = extension(driver)
        base = self.base_language_path() if base is None else base
        if driver == const.JSON_DRIVER:
            return _with_suffix(base, ext)
        return base / (key.split(".")[0] + ext)

    def base_language_path(self) -> Path:
        path = self.config.default_lang()
        if self.config.is_json_driver() and _with_suffix(path, extension(const.JSON_DRIVER)).is_file():
            return path
        if not path.exists():
            raise LangFileNotFoundError(path)
        return path

    def fallback_candidate(self, key: str) -> Optional[Path]:
        """Same file under the fallback language, or None when no fallback is configured."""
        fallback = self.config.fallback_lang()
        if fallback is None:
            return None
        return self.candidate(key, base=fallback)

    def default_dir_candidate(self, path: Path) -> Optional[Path]:
        default_dir = self.config.default_lang_dir()
        if default_dir is None:
            return None
        return default_dir / path.name

    def default_dir_fallback_candidate(self, path: Path) -> Optional[Path]:
        """Fallback language file inside ``defaultLangDir``.

        ``json``: ``<defaultLangDir>/<fallback><ext>``; other drivers:
        ``<defaultLangDir>/<fallback>/<file name>``.
        """
        default_dir = self.config.default_lang_dir()
        if default_dir is None:
            return None
        fallback = self.config.fallback_lang()
        if fallback is None:
            return None
        code = fallback.name
        if self.config.is_json_driver():
            return _with_suffix(default_dir / code, extension(const.JSON_DRIVER))
        return default_dir / code / path.name
