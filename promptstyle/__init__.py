"""promptstyle: theming for interactive command-line prompts."""

__version__ = "0.1.0"

from .attributes import Attributes, parse_attributes
from .color import AnsiValue, Color, ColorLike, Rgb, format_color, parse_color, to_rich_color
from .config import load_render_config, render_config_from_dict, render_config_to_dict, save_render_config
from .errors import (
    InvalidAttributeError,
    InvalidColorError,
    PromptStyleError,
    ThemeConfigError,
    ThemeError,
    UnknownThemeError,
)
from .render_config import ErrorMessageRenderConfig, InputRenderConfig, RenderConfig
from .style import StyleSheet, Styled
from .logger import setup_logger
from .themes import get_render_config, list_themes, register_theme, resolve_render_config, unregister_theme

__all__ = [
    "Attributes",
    "AnsiValue",
    "Color",
    "ColorLike",
    "Rgb",
    "StyleSheet",
    "Styled",
    "InputRenderConfig",
    "ErrorMessageRenderConfig",
    "RenderConfig",
    "get_render_config",
    "resolve_render_config",
    "register_theme",
    "unregister_theme",
    "list_themes",
    "load_render_config",
    "save_render_config",
    "render_config_from_dict",
    "render_config_to_dict",
    "parse_color",
    "format_color",
    "parse_attributes",
    "to_rich_color",
    "setup_logger",
    "PromptStyleError",
    "InvalidColorError",
    "InvalidAttributeError",
    "ThemeError",
    "UnknownThemeError",
    "ThemeConfigError",
]
