"""Dotted-key translation lookup over array, JSON and gettext language files."""

from .domain.errors import (
    LocalizationError,
    MissingConfigError,
    InvalidConfigValueError,
    LangFileNotFoundError,
    LoaderNotFoundError,
    LoaderError,
    EmptyKeyError,
    LocalizationNotInitialized,
)
from .services.config import LocalizationConfig
from .services.localization import Localization
from .services.context import set_localization, get_localization, clear_localization, use_localization, _

__version__ = "0.1.0"

__all__ = [
    "Localization",
    "LocalizationConfig",
    "LocalizationError",
    "MissingConfigError",
    "InvalidConfigValueError",
    "LangFileNotFoundError",
    "LoaderNotFoundError",
    "LoaderError",
    "EmptyKeyError",
    "LocalizationNotInitialized",
    "set_localization",
    "get_localization",
    "clear_localization",
    "use_localization",
    "_",
]
