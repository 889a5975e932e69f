from .array_loader import ArrayLocalizator
from .json_loader import JsonLocalizator
from .gettext_loader import GettextLocalizator
from .registry import DEFAULT_LOADERS, get_loader

__all__ = ["ArrayLocalizator", "JsonLocalizator", "GettextLocalizator", "DEFAULT_LOADERS", "get_loader"]
