# src/pylocalization/adapters/loaders/json_loader.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Union

from pylocalization.domain.errors import LoaderError
from pylocalization.domain.types import TranslationMapping


class JsonLocalizator:
    """``json`` driver: a single JSON object per language file."""

    def all(self, path: Union[str, Path]) -> TranslationMapping:
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LoaderError(p, str(e)) from e
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise LoaderError(p, str(e)) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise LoaderError(p, f"top level must be an object, got {type(data).__name__}")
        return data
