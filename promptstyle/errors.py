"""Structured error types for promptstyle."""

from pathlib import Path
from typing import Optional, Union


class PromptStyleError(Exception):
    """Base error for all promptstyle operations."""
    pass


class InvalidColorError(PromptStyleError, ValueError):
    """Raised when a value cannot be read as a color."""

    def __init__(self, value, message: str = ""):
        self.value = value
        super().__init__(f"Invalid color {value!r}" + (f": {message}" if message else ""))


class InvalidAttributeError(PromptStyleError, ValueError):
    """Raised when a text attribute name is not recognized."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown text attribute {name!r}")


class ThemeError(PromptStyleError):
    """Error raised by the theme registry."""
    pass


class UnknownThemeError(ThemeError, LookupError):
    """Raised when a theme name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown theme: {name}")


class ThemeConfigError(ThemeError):
    """Raised when a theme file cannot be read or is malformed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        prefix = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"{prefix}{message}")
