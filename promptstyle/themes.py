"""Theme registry: named render configurations a CLI can select from."""

import os
import threading
from typing import Callable, Dict, Optional

from .errors import ThemeError, UnknownThemeError
from .logger import get_logger
from .render_config import RenderConfig

logger = get_logger(__name__)

DEFAULT_THEME = "default"
EMPTY_THEME = "empty"

# Built-in themes resolve to the shared instances.
_BUILTIN_THEMES: Dict[str, Callable[[], RenderConfig]] = {
    DEFAULT_THEME: RenderConfig.default_static_ref,
    EMPTY_THEME: RenderConfig.empty_static_ref,
    "plain": RenderConfig.empty_static_ref,  # alias
    "no_color": RenderConfig.empty_static_ref,  # alias
}

_custom_themes: Dict[str, RenderConfig] = {}
_registry_lock = threading.Lock()


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def no_color_requested() -> bool:
    """True when the ``NO_COLOR`` environment variable is set and non-empty."""
    return bool(os.environ.get("NO_COLOR"))


def register_theme(name: str, config: RenderConfig) -> None:
    """Register a custom render configuration under ``name``.

    Registering the same name again replaces the previous custom theme.
    Built-in names cannot be overwritten.
    """
    key = _normalize(name)
    if not key:
        raise ThemeError("Theme name must not be empty")
    if key in _BUILTIN_THEMES:
        raise ThemeError(f"Cannot overwrite built-in theme: {key}")
    if not isinstance(config, RenderConfig):
        raise TypeError(f"Expected a RenderConfig, got {type(config).__name__}")
    with _registry_lock:
        _custom_themes[key] = config
    logger.debug("Registered theme %s", key)


def unregister_theme(name: str) -> None:
    """Remove a custom theme. Unknown names raise :class:`UnknownThemeError`."""
    key = _normalize(name)
    with _registry_lock:
        if key not in _custom_themes:
            raise UnknownThemeError(name)
        del _custom_themes[key]


def lookup_theme(name: str) -> RenderConfig:
    """Return the theme registered under ``name``, ignoring ``NO_COLOR``."""
    key = _normalize(name)
    factory = _BUILTIN_THEMES.get(key)
    if factory is not None:
        return factory()
    config = _custom_themes.get(key)
    if config is None:
        raise UnknownThemeError(name)
    return config


def get_render_config(name: Optional[str] = None) -> RenderConfig:
    """Return the render configuration registered under ``name``.

    ``NO_COLOR`` wins over any name and selects the empty theme.
    """
    if no_color_requested():
        logger.debug("NO_COLOR is set, using the empty theme")
        return RenderConfig.empty_static_ref()
    if name is None:
        return RenderConfig.default_static_ref()
    return lookup_theme(name)


def resolve_render_config(
    config: Optional[RenderConfig] = None,
    name: Optional[str] = None,
) -> RenderConfig:
    """Pick the configuration a renderer should use.

    A caller-supplied ``config`` is used as is; otherwise the theme is looked
    up by ``name`` (the default theme when omitted).
    """
    if config is not None:
        return config
    return get_render_config(name)


def list_themes() -> list[str]:
    """Return available theme names, without aliases."""
    seen = set()
    result = []
    for name, factory in _BUILTIN_THEMES.items():
        if factory not in seen:
            result.append(name)
            seen.add(factory)
    result.extend(sorted(_custom_themes))
    return result
