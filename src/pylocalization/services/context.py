# src/pylocalization/services/context.py
from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Union

from pylocalization.domain.errors import LocalizationNotInitialized
from pylocalization.domain.types import Replacements, TranslationMapping
from pylocalization.services.localization import Localization

_CTX: ContextVar[Optional[Localization]] = ContextVar("pylocalization_ctx", default=None)


def set_localization(engine: Localization) -> None:
    """Makes ``engine`` the current one (available through get_localization)."""
    _CTX.set(engine)


def get_localization() -> Localization:
    engine = _CTX.get()
    if engine is None:
        raise LocalizationNotInitialized("call set_localization(...) during app bootstrap")
    return engine


def clear_localization() -> None:
    _CTX.set(None)


@contextmanager
def use_localization(engine: Localization) -> Iterator[Localization]:
    """Temporary swap of the current engine (handy in tests)."""
    token = _CTX.set(engine)
    try:
        yield engine
    finally:
        _CTX.reset(token)


def _(key: str, replacements: Optional[Replacements] = None, **kw: str) -> Union[str, TranslationMapping]:
    """Shortcut for ``get_localization().lang(key, ...)``; keyword pairs are appended to ``replacements``."""
    merged = dict(replacements or {})
    merged.update(kw)
    return get_localization().lang(key, merged)
