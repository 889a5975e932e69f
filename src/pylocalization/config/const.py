# src/pylocalization/config/const.py
from __future__ import annotations

ALLOWED_DRIVERS: tuple[str, ...] = ("array", "json", "gettext")

# расширение файла переводов для каждого драйвера
DRIVER_EXTENSIONS: dict[str, str] = {
    "array": ".py",
    "json": ".json",
    "gettext": ".mo",
}

JSON_DRIVER = "json"

ALLOWED_CONFIGS: tuple[str, ...] = ("driver", "langDir", "defaultLangDir", "defaultLang", "fallBackLang")
OPTIONAL_CONFIGS: tuple[str, ...] = ("defaultLangDir",)
NULLABLE_CONFIGS: tuple[str, ...] = ("defaultLangDir", "fallBackLang")
REQUIRED_CONFIGS: tuple[str, ...] = tuple(k for k in ALLOWED_CONFIGS if k not in OPTIONAL_CONFIGS)

# имена переменных окружения (.env) для LocalizationConfig.from_env
ENV_PREFIX = "PYLOCALIZATION_"
ENV_NAMES: dict[str, str] = {
    "driver": ENV_PREFIX + "DRIVER",
    "langDir": ENV_PREFIX + "LANG_DIR",
    "defaultLangDir": ENV_PREFIX + "DEFAULT_LANG_DIR",
    "defaultLang": ENV_PREFIX + "DEFAULT_LANG",
    "fallBackLang": ENV_PREFIX + "FALLBACK_LANG",
}

LOGGER_NAME = "pylocalization"
