# src/pylocalization/apps/cli/app.py
from __future__ import annotations

import functools
import os
import traceback
from typing import List, Optional

import typer
from rich.console import Console

from pylocalization.domain.errors import LocalizationError
from pylocalization.services.config import LocalizationConfig, env_options
from pylocalization.services.localization import Localization
from pylocalization.services.logging import setup_logging

app = typer.Typer(help="pylocalization CLI: resolve translation keys and check configuration")


# -------- вспомогательные --------


def _run_safe(func):
    """Library errors become a one-line message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except LocalizationError as e:
            if os.getenv("PYLOCALIZATION_CLI_DEBUG") == "1":
                traceback.print_exc()
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(1)

    return wrapper


def _parse_replacements(pairs: List[str]) -> dict[str, str]:
    replacements: dict[str, str] = {}
    for pair in pairs:
        search, sep, value = pair.partition("=")
        if not sep or not search:
            raise typer.BadParameter(f"expected SEARCH=VALUE, got '{pair}'", param_hint="--replace")
        replacements[search] = value
    return replacements


def _config(ctx: typer.Context) -> LocalizationConfig:
    return LocalizationConfig.from_mapping(ctx.obj)


# -------- корневой callback --------


@app.callback()
def main(
    ctx: typer.Context,
    driver: Optional[str] = typer.Option(None, "--driver", help="array | json | gettext"),
    lang_dir: Optional[str] = typer.Option(None, "--lang-dir", help="Directory holding the language files"),
    default_lang: Optional[str] = typer.Option(None, "--default-lang", help="Language to resolve keys in"),
    default_lang_dir: Optional[str] = typer.Option(None, "--default-lang-dir", help="Directory with base translations"),
    fallback_lang: Optional[str] = typer.Option(None, "--fallback-lang", help="Language used when a file has no entries"),
    env_file: Optional[str] = typer.Option(".env", "--env-file", help="dotenv file with PYLOCALIZATION_* variables"),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG | INFO | WARNING | ERROR"),
):
    """
    Options are layered over PYLOCALIZATION_* variables from the environment and the .env file.
    """
    setup_logging(log_level)

    configs = env_options(env_file)
    overrides = {
        "driver": driver,
        "langDir": lang_dir,
        "defaultLang": default_lang,
        "defaultLangDir": default_lang_dir,
        "fallBackLang": fallback_lang,
    }
    configs.update({k: v for k, v in overrides.items() if v is not None})
    # fallBackLang обязателен как ключ, но может быть пустым
    configs.setdefault("fallBackLang", None)
    ctx.obj = configs


# -------- команды --------


@app.command("lang")
@_run_safe
def lang(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Dotted translation key, e.g. messages.welcome"),
    replace: List[str] = typer.Option([], "--replace", "-r", help="Placeholder replacement SEARCH=VALUE (repeatable)"),
):
    """Print the translation for KEY (JSON for a whole file)."""
    engine = Localization(_config(ctx))
    result = engine.lang(key, _parse_replacements(replace))
    if isinstance(result, dict):
        Console(color_system=None).print_json(data=result)
    else:
        typer.echo(result)


@app.command("check")
@_run_safe
def check(ctx: typer.Context):
    """Validate every configuration option and print the resolved locations."""
    config = _config(ctx)
    typer.echo(f"driver: {config.driver()}")
    typer.echo(f"langDir: {config.lang_dir()}")
    typer.echo(f"defaultLang: {config.default_lang()}")
    typer.echo(f"defaultLangDir: {config.default_lang_dir() or '-'}")
    typer.echo(f"fallBackLang: {config.fallback_lang() or '-'}")
    Localization(config)
    typer.echo("ok")


if __name__ == "__main__":
    app()
