"""Tests covering translation file location for each driver."""

from __future__ import annotations

import pytest

from pylocalization.adapters.fs.path_resolver import PathResolver, extension
from pylocalization.domain.errors import EmptyKeyError, LangFileNotFoundError
from pylocalization.services.config import LocalizationConfig
from conftest import write_mo


def test_extensions():
    assert extension("array") == ".py"
    assert extension("json") == ".json"
    assert extension("gettext") == ".mo"


def test_array_one_file_per_first_segment(array_tree, make_configs):
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(array_tree)))
    assert resolver.resolve("messages.menu.home") == (array_tree / "en" / "messages.py").resolve()
    assert resolver.resolve("site") == (array_tree / "en" / "site.py").resolve()


def test_json_single_file_per_language(json_tree, make_configs):
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(json_tree, driver="json")))
    expected = (json_tree / "en.json").resolve()
    assert resolver.resolve("site.title") == expected
    assert resolver.resolve("anything") == expected


def test_gettext_topic_file(lang_dir, make_configs):
    write_mo(lang_dir / "en" / "messages.mo", {"hello": "Hello"})
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(lang_dir, driver="gettext")))
    assert resolver.resolve("messages.hello") == (lang_dir / "en" / "messages.mo").resolve()


def test_missing_topic_file(array_tree, make_configs):
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(array_tree)))
    with pytest.raises(LangFileNotFoundError) as exc:
        resolver.resolve("errors.404")
    assert exc.value.path.endswith("errors.py")


def test_empty_key(array_tree, make_configs):
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(array_tree)))
    with pytest.raises(EmptyKeyError):
        resolver.resolve("")


def test_language_code_with_dot(lang_dir, make_configs):
    (lang_dir / "pt.BR.json").write_text("{}", encoding="utf-8")
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(lang_dir, driver="json", default_lang="pt.BR")))
    assert resolver.resolve("a.b").name == "pt.BR.json"


def test_fallback_candidate(array_tree, make_configs):
    resolver = PathResolver(LocalizationConfig.from_mapping(make_configs(array_tree, fallback="fa")))
    assert resolver.fallback_candidate("messages.welcome") == (array_tree / "fa").resolve() / "messages.py"
    no_fallback = PathResolver(LocalizationConfig.from_mapping(make_configs(array_tree)))
    assert no_fallback.fallback_candidate("messages.welcome") is None


def test_default_dir_candidates(json_tree, tmp_path, make_configs):
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    config = LocalizationConfig.from_mapping(
        make_configs(json_tree, driver="json", fallback="fa", defaultLangDir=str(vendor))
    )
    resolver = PathResolver(config)
    file = resolver.resolve("site.title")
    assert resolver.default_dir_candidate(file) == vendor.resolve() / "en.json"
    assert resolver.default_dir_fallback_candidate(file) == vendor.resolve() / "fa.json"
