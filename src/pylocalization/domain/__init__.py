from .errors import (
    LocalizationError,
    MissingConfigError,
    InvalidConfigValueError,
    LangFileNotFoundError,
    LoaderNotFoundError,
    LoaderError,
    EmptyKeyError,
    LocalizationNotInitialized,
)
from .types import TranslationMapping, TranslationValue, Replacements

__all__ = [
    "LocalizationError",
    "MissingConfigError",
    "InvalidConfigValueError",
    "LangFileNotFoundError",
    "LoaderNotFoundError",
    "LoaderError",
    "EmptyKeyError",
    "LocalizationNotInitialized",
    "TranslationMapping",
    "TranslationValue",
    "Replacements",
]
