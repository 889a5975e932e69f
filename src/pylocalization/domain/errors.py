"""Error hierarchy raised by the translation resolution engine."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

__all__ = [
    "LocalizationError",
    "MissingConfigError",
    "InvalidConfigValueError",
    "LangFileNotFoundError",
    "LoaderNotFoundError",
    "LoaderError",
    "EmptyKeyError",
    "LocalizationNotInitialized",
]


class LocalizationError(RuntimeError):
    """Base class for all localization errors."""


class MissingConfigError(LocalizationError):
    """Raised when required configuration options are absent."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"missing config options: {', '.join(self.missing)}")


class InvalidConfigValueError(LocalizationError):
    """Raised when a configuration value is empty, not a string or not allowed."""

    def __init__(self, option: str, message: Optional[str] = None) -> None:
        self.option = option
        super().__init__(message or f"value of '{option}' can not be empty or null")


class LangFileNotFoundError(LocalizationError, FileNotFoundError):
    """Raised when a language directory or translation file does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        super().__init__(f"file or directory not found: {self.path}")

    def __str__(self) -> str:
        return f"file or directory not found: {self.path}"


class LoaderNotFoundError(LocalizationError):
    """Raised at engine construction when the driver has no registered loader."""

    def __init__(self, driver: str) -> None:
        self.driver = driver
        super().__init__(f"{driver} localizator does not exist")


class LoaderError(LocalizationError):
    """Raised by a format loader when a translation file is malformed."""

    def __init__(self, path: Union[str, Path], detail: Optional[str] = None) -> None:
        self.path = str(path)
        self.detail = detail
        message = f"malformed translation file: {self.path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class EmptyKeyError(LocalizationError):
    """Raised when ``lang()`` is called with an empty key."""

    def __init__(self, message: str = "key parameter can not be empty") -> None:
        super().__init__(message)


class LocalizationNotInitialized(LocalizationError):
    """Raised when the process-wide localization is requested before it was set."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = "localization is not initialized"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
