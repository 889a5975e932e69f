from __future__ import annotations
from pathlib import Path
from typing import Callable, Mapping, Protocol, Union

from pylocalization.domain.types import TranslationMapping


class FormatLoader(Protocol):
    """Reads one translation file into a mapping.

    Must return an empty mapping for a file without entries and raise
    :class:`~pylocalization.domain.errors.LoaderError` on malformed input.
    """

    def all(self, path: Union[str, Path]) -> TranslationMapping: ...


LoaderFactory = Callable[[], FormatLoader]
LoaderRegistry = Mapping[str, LoaderFactory]
