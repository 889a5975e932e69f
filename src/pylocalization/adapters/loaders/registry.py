"""Driver name -> loader factory."""

from __future__ import annotations
from typing import Dict, Mapping, Optional

from pylocalization.domain.errors import LoaderNotFoundError
from pylocalization.ports.loaders import FormatLoader, LoaderFactory

from .array_loader import ArrayLocalizator
from .gettext_loader import GettextLocalizator
from .json_loader import JsonLocalizator

DEFAULT_LOADERS: Dict[str, LoaderFactory] = {
    "array": ArrayLocalizator,
    "json": JsonLocalizator,
    "gettext": GettextLocalizator,
}


def get_loader(driver: str, loaders: Optional[Mapping[str, LoaderFactory]] = None) -> FormatLoader:
    registry = DEFAULT_LOADERS if loaders is None else loaders
    factory = registry.get(driver.lower())
    if factory is None:
        raise LoaderNotFoundError(driver)
    return factory()
