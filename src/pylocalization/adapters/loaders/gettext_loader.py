# src/pylocalization/adapters/loaders/gettext_loader.py
from __future__ import annotations
import gettext
import struct
from pathlib import Path
from typing import Union

from pylocalization.domain.errors import LoaderError
from pylocalization.domain.types import TranslationMapping


class GettextLocalizator:
    """``gettext`` driver: compiled ``.mo`` catalogs.

    msgids become keys as they are, so ``site.title`` is a flat dotted key.
    The header entry and untranslated messages are skipped; plural entries
    keep only their singular form.
    """

    def all(self, path: Union[str, Path]) -> TranslationMapping:
        p = Path(path)
        with p.open("rb") as fh:
            if not fh.read(1):
                return {}
            fh.seek(0)
            try:
                # the full msgid -> msgstr table is only exposed as GNUTranslations._catalog
                catalog = gettext.GNUTranslations(fh)._catalog  # type: ignore[attr-defined]
            except (OSError, ValueError, struct.error) as e:
                raise LoaderError(p, str(e)) from e

        data: TranslationMapping = {}
        for msgid, msgstr in catalog.items():
            if isinstance(msgid, tuple):
                msgid, index = msgid
                if index != 0:
                    continue
            if not msgid or not msgstr:
                continue
            data[msgid] = msgstr
        return data
