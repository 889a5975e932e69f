# tests/conftest.py
from __future__ import annotations
import json
import logging
import os
import struct
from pathlib import Path
from typing import Any, Callable, Mapping

import pytest

from pylocalization.services.context import clear_localization


# ---- writers for language files ----
def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def write_array(path: Path, data: Mapping[str, Any], *, assigned: bool = False) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = repr(dict(data))
    path.write_text(f"translations = {body}\n" if assigned else f"{body}\n", encoding="utf-8")
    return path


def build_mo(messages: Mapping[str, str]) -> bytes:
    """Little-endian GNU .mo catalog with a UTF-8 header (same layout msgfmt writes)."""
    entries = {"": "Content-Type: text/plain; charset=UTF-8\n"}
    entries.update(messages)
    keys = sorted(entries)
    ids = b""
    strs = b""
    table = []
    for k in keys:
        kb, vb = k.encode("utf-8"), entries[k].encode("utf-8")
        table.append((len(ids), len(kb), len(strs), len(vb)))
        ids += kb + b"\0"
        strs += vb + b"\0"
    n = len(keys)
    key_start = 7 * 4 + 16 * n
    value_start = key_start + len(ids)
    key_offsets: list[int] = []
    value_offsets: list[int] = []
    for id_off, id_len, str_off, str_len in table:
        key_offsets += [id_len, id_off + key_start]
        value_offsets += [str_len, str_off + value_start]
    header = struct.pack("<7I", 0x950412DE, 0, n, 7 * 4, 7 * 4 + 8 * n, 0, 0)
    offsets = struct.pack(f"<{len(key_offsets) + len(value_offsets)}I", *key_offsets, *value_offsets)
    return header + offsets + ids + strs


def write_mo(path: Path, messages: Mapping[str, str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_mo(messages))
    return path


# ---- fixtures ----
@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """No PYLOCALIZATION_* leakage from the host and no current engine between tests."""
    for name in list(os.environ):
        if name.startswith("PYLOCALIZATION_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_localization()
    yield
    clear_localization()
    logger = logging.getLogger("pylocalization")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def lang_dir(tmp_path) -> Path:
    p = tmp_path / "lang"
    p.mkdir()
    return p


@pytest.fixture
def array_tree(lang_dir) -> Path:
    """lang/en/{messages,site}.py and lang/fa/messages.py"""
    write_array(
        lang_dir / "en" / "messages.py",
        {
            "welcome": "Welcome :name",
            "greeting": "Hi :name, today is :day",
            "empty": "",
            "menu": {"home": "Home", "about": {"title": "About us"}},
            "flat.key": "Flat dotted",
        },
    )
    write_array(lang_dir / "en" / "site.py", {"title": "Site"}, assigned=True)
    write_array(lang_dir / "fa" / "messages.py", {"welcome": "Khosh amadid"})
    return lang_dir


@pytest.fixture
def json_tree(lang_dir) -> Path:
    """lang/en.json (nested + flat dotted keys) and lang/fa.json"""
    write_json(
        lang_dir / "en.json",
        {"site": {"title": "Hello", "menu": {"home": "Home"}}, "site.footer": "Footer", "welcome": "Welcome :NAME"},
    )
    write_json(lang_dir / "fa.json", {"site": {"title": "Salam"}})
    return lang_dir


@pytest.fixture
def make_configs() -> Callable[..., dict]:
    def _make(lang_dir: Path, driver: str = "array", default_lang: str = "en", fallback=None, **extra) -> dict:
        configs = {
            "driver": driver,
            "langDir": str(lang_dir),
            "defaultLang": default_lang,
            "fallBackLang": fallback,
        }
        configs.update(extra)
        return configs

    return _make


class CountingLoader:
    """Wraps a real loader and records every path it reads."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: list[Path] = []

    def all(self, path):
        self.calls.append(Path(path))
        return self.inner.all(path)


@pytest.fixture
def counting_loaders():
    from pylocalization.adapters.loaders import DEFAULT_LOADERS

    created: dict[str, CountingLoader] = {}

    def _factory(driver):
        def _make():
            loader = CountingLoader(DEFAULT_LOADERS[driver]())
            created[driver] = loader
            return loader

        return _make

    registry = {driver: _factory(driver) for driver in DEFAULT_LOADERS}
    return registry, created
