# src/pylocalization/services/cache.py
from __future__ import annotations
from dataclasses import dataclass, field
import threading
from pathlib import Path
from typing import Callable, Optional

from pylocalization.domain.types import TranslationMapping


@dataclass(slots=True)
class TranslationCache:
    """Single-slot memo of the merged translation set for one resolved file.

    A lookup for another file replaces the slot. The check/load/store
    sequence runs under a lock, so a shared engine never stores a torn merge.
    """

    _key: Optional[Path] = field(default=None, init=False, repr=False)
    _value: Optional[TranslationMapping] = field(default=None, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    @property
    def key(self) -> Optional[Path]:
        return self._key

    def get_or_load(self, key: Path, load: Callable[[], TranslationMapping]) -> TranslationMapping:
        with self._lock:
            if self._value is not None and self._key == key:
                return self._value
            value = load()
            self._key, self._value = key, value
            return value

    def clear(self) -> None:
        with self._lock:
            self._key, self._value = None, None
