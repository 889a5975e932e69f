# src/pylocalization/domain/types.py
from __future__ import annotations
from typing import Dict, Mapping, Union

TranslationValue = Union[str, "TranslationMapping"]
TranslationMapping = Dict[str, TranslationValue]
Replacements = Mapping[str, str]
