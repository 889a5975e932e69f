# src/pylocalization/services/localization.py
from __future__ import annotations
import copy
import logging
import re
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

from pylocalization.adapters.fs.path_resolver import PathResolver
from pylocalization.adapters.loaders.registry import get_loader
from pylocalization.domain.errors import EmptyKeyError, LangFileNotFoundError
from pylocalization.domain.types import Replacements, TranslationMapping, TranslationValue
from pylocalization.ports.loaders import FormatLoader, LoaderRegistry
from pylocalization.services.cache import TranslationCache
from pylocalization.services.config import LocalizationConfig

log = logging.getLogger(__name__)


def get_nested_value(translations: Mapping[str, Any], key: str) -> Any:
    """Descend ``translations`` along the dotted ``key``; a miss yields ``""``."""
    result: Any = translations
    for part in key.split("."):
        if isinstance(result, Mapping) and part in result:
            result = result[part]
        else:
            return ""
    return result


def apply_replacements(text: str, replacements: Replacements) -> str:
    """Case-insensitive replace of every ``search -> value`` pair, in insertion order.

    Substituted text is inserted literally: a pair never rescans what it inserted.
    """
    for search, value in replacements.items():
        if not search:
            continue
        text = re.sub(re.escape(search), lambda _m, v=str(value): v, text, flags=re.IGNORECASE)
    return text


class Localization:
    """Resolves dotted keys to translated text.

    Base layer: the same file inside ``defaultLangDir`` or, when absent, the
    fallback language file there. App layer: the requested file, or its
    fallback-language twin when it has no entries. Layers are merged
    shallowly, app keys replacing base keys at the top level.
    """

    def __init__(
        self,
        configs: Union[Mapping[str, Any], LocalizationConfig, None] = None,
        *,
        loaders: Optional[LoaderRegistry] = None,
    ) -> None:
        if isinstance(configs, LocalizationConfig):
            self.config = configs
        else:
            self.config = LocalizationConfig.from_mapping(configs or {})
        self.paths = PathResolver(self.config)
        self.localizator: FormatLoader = get_loader(self.config.driver(), loaders)
        self._cache = TranslationCache()

    # ---------- public ----------
    def lang(self, key: str, replacements: Optional[Replacements] = None) -> Union[str, TranslationMapping]:
        """Translation for ``key``, or the whole merged file when a non-json key has no dot.

        Mappings and lists are returned as copies; the cached set is never handed out.
        """
        if not key:
            raise EmptyKeyError()

        file = self._translate_file(key)
        translations = self._merged_translations(file, key)

        translate_key = key if self.config.is_json_driver() else self._translate_key(key)
        if translate_key is None:
            return copy.deepcopy(translations)

        result: Optional[TranslationValue] = translations.get(translate_key)
        if result is None:
            result = get_nested_value(translations, translate_key)
            if result == "":
                log.debug("translation key missing: %s (%s)", key, file)
        if result is None or result == "":
            result = ""

        if replacements and isinstance(result, str) and result:
            result = apply_replacements(result, replacements)
        elif isinstance(result, (dict, list)):
            result = copy.deepcopy(result)
        return result

    __call__ = lang

    def clear_cache(self) -> None:
        self._cache.clear()

    # ---------- helpers ----------
    @staticmethod
    def _translate_key(key: str) -> Optional[str]:
        """Key inside the topic file (first segment dropped); None asks for the whole file."""
        _, sep, rest = key.partition(".")
        return rest if sep else None

    def _translate_file(self, key: str) -> Path:
        candidate = self.paths.candidate(key)
        if candidate.exists():
            return candidate.resolve()

        # the requested file may be missing when a lower tier provides it
        for tier in self._lower_tiers(candidate, key):
            if tier is not None and tier.is_file():
                log.debug("translation file %s missing, served by %s", candidate, tier)
                return candidate
        raise LangFileNotFoundError(candidate)

    def _lower_tiers(self, file: Path, key: str) -> Iterator[Optional[Path]]:
        yield self.paths.default_dir_candidate(file)
        yield self.paths.default_dir_fallback_candidate(file)
        yield self.paths.fallback_candidate(key)

    def _merged_translations(self, file: Path, key: str) -> TranslationMapping:
        return self._cache.get_or_load(file, lambda: self._load_merged(file, key))

    def _load_merged(self, file: Path, key: str) -> TranslationMapping:
        translations: TranslationMapping = {}

        default_file = self.paths.default_dir_candidate(file)
        if default_file is not None:
            if default_file.is_file():
                translations = dict(self._load(default_file))
            else:
                fallback_default = self.paths.default_dir_fallback_candidate(file)
                if fallback_default is not None and fallback_default.is_file():
                    translations = dict(self._load(fallback_default))

        app_data = self._load(file) if file.is_file() else {}
        if not app_data:
            fallback_file = self.paths.fallback_candidate(key)
            if fallback_file is not None and fallback_file.is_file():
                app_data = self._load(fallback_file)

        translations.update(app_data)
        log.debug("merged translations cached for %s (%d keys)", file, len(translations))
        return translations

    def _load(self, path: Path) -> TranslationMapping:
        log.debug("loading translations from %s", path)
        return self.localizator.all(path)

    def __repr__(self) -> str:
        return f"Localization(driver={self.config.raw_driver!r})"
