"""
Theme files: render configurations stored as YAML.

A theme file names a base theme and overrides individual roles:

    extends: default
    prompt-prefix: {content: ">", fg: magenta}
    answer: {fg: "#7fa6d9", attributes: [bold]}
    text-input:
      cursor: {bg: dark-grey, fg: white}

Each role is applied as builder overrides on top of the base value:
given colors and attribute lists replace, ``null`` clears. A listed
``attributes: []`` drops the attributes inherited from the base theme.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .attributes import attribute_names, parse_attributes
from .color import format_color, parse_color
from .errors import InvalidAttributeError, InvalidColorError, ThemeConfigError
from .logger import get_logger
from .render_config import ErrorMessageRenderConfig, InputRenderConfig, RenderConfig
from .style import StyleSheet, Styled
from .themes import DEFAULT_THEME, EMPTY_THEME, lookup_theme

logger = get_logger(__name__)

SHEET_KEYS = {"fg", "bg", "attributes"}
STYLED_KEYS = SHEET_KEYS | {"content"}
INPUT_KEYS = {"text", "cursor"}
ERROR_KEYS = {"prefix", "separator", "message"}
ROOT_KEYS = {
    "extends",
    "prompt_prefix",
    "prompt",
    "default_value",
    "text_input",
    "answer",
    "error_message",
}


# ── Reading ──


def _mapping(data: Any, path: str, allowed: set) -> Dict[str, Any]:
    """Validate a section is a mapping with known keys; normalize ``-`` to ``_``."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ThemeConfigError(f"{path or 'theme'}: expected a mapping, got {type(data).__name__}")
    section = {}
    for raw_key, value in data.items():
        key = str(raw_key).strip().replace("-", "_")
        where = f"{path}.{key}" if path else key
        if key in section:
            raise ThemeConfigError(f"{where}: duplicate key")
        if key not in allowed:
            raise ThemeConfigError(f"{where}: unknown key (expected one of: {', '.join(sorted(allowed))})")
        section[key] = value
    return section


def _color(value: Any, path: str):
    if value is None:
        return None
    try:
        return parse_color(value)
    except InvalidColorError as e:
        raise ThemeConfigError(f"{path}: {e}") from e


def _apply_sheet(sheet: StyleSheet, data: Dict[str, Any], path: str) -> StyleSheet:
    if "fg" in data:
        sheet = sheet.with_fg(_color(data["fg"], f"{path}.fg"))
    if "bg" in data:
        sheet = sheet.with_bg(_color(data["bg"], f"{path}.bg"))
    if "attributes" in data:
        try:
            sheet = sheet.with_attributes(parse_attributes(data["attributes"]))
        except InvalidAttributeError as e:
            raise ThemeConfigError(f"{path}.attributes: {e}") from e
    return sheet


def _read_sheet(base: StyleSheet, data: Any, path: str) -> StyleSheet:
    return _apply_sheet(base, _mapping(data, path, SHEET_KEYS), path)


def _read_styled(base: Styled, data: Any, path: str) -> Styled:
    section = _mapping(data, path, STYLED_KEYS)
    styled = base
    if "content" in section:
        content = section["content"]
        if not isinstance(content, str):
            raise ThemeConfigError(f"{path}.content: expected a string")
        styled = Styled(content=content, style=styled.style)
    return styled.with_style_sheet(_apply_sheet(styled.style, section, path))


def _read_input(base: InputRenderConfig, data: Any, path: str) -> InputRenderConfig:
    section = _mapping(data, path, INPUT_KEYS)
    config = base
    if "text" in section:
        config = config.with_text(_read_sheet(config.text, section["text"], f"{path}.text"))
    if "cursor" in section:
        config = config.with_cursor(_read_sheet(config.cursor, section["cursor"], f"{path}.cursor"))
    return config


def _read_error(base: ErrorMessageRenderConfig, data: Any, path: str) -> ErrorMessageRenderConfig:
    section = _mapping(data, path, ERROR_KEYS)
    config = base
    if "prefix" in section:
        config = config.with_prefix(_read_styled(config.prefix, section["prefix"], f"{path}.prefix"))
    if "separator" in section:
        config = config.with_separator(
            _read_sheet(config.separator, section["separator"], f"{path}.separator")
        )
    if "message" in section:
        config = config.with_message(_read_sheet(config.message, section["message"], f"{path}.message"))
    return config


def render_config_from_dict(data: Optional[Dict[str, Any]]) -> RenderConfig:
    """Build a render configuration from parsed theme-file data."""
    section = _mapping(data, "", ROOT_KEYS)

    base_name = section.get("extends") or DEFAULT_THEME
    try:
        config = lookup_theme(str(base_name))
    except LookupError as e:
        raise ThemeConfigError(f"extends: {e}") from e

    if "prompt_prefix" in section:
        config = config.with_prompt_prefix(
            _read_styled(config.prompt_prefix, section["prompt_prefix"], "prompt_prefix")
        )
    if "prompt" in section:
        config = config.with_prompt(_read_sheet(config.prompt, section["prompt"], "prompt"))
    if "default_value" in section:
        config = config.with_default_value(
            _read_sheet(config.default_value, section["default_value"], "default_value")
        )
    if "text_input" in section:
        config = config.with_text_input(
            _read_input(config.text_input, section["text_input"], "text_input")
        )
    if "answer" in section:
        config = config.with_answer(_read_sheet(config.answer, section["answer"], "answer"))
    if "error_message" in section:
        config = config.with_error_message(
            _read_error(config.error_message, section["error_message"], "error_message")
        )
    return config


def load_render_config(path: Union[str, Path]) -> RenderConfig:
    """Load a theme file."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise ThemeConfigError("Theme file not found", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except UnicodeDecodeError as e:
        raise ThemeConfigError(f"Cannot decode theme file: {e}", path) from e
    except yaml.YAMLError as e:
        raise ThemeConfigError(f"Invalid YAML: {e}", path) from e
    except OSError as e:
        raise ThemeConfigError(f"Cannot read theme file: {e}", path) from e

    try:
        config = render_config_from_dict(data)
    except ThemeConfigError as e:
        raise ThemeConfigError(str(e), path) from e
    logger.debug("Loaded theme file %s", path)
    return config


# ── Writing ──


def _sheet_to_dict(sheet: StyleSheet) -> Dict[str, Any]:
    return {
        "fg": format_color(sheet.fg) if sheet.fg is not None else None,
        "bg": format_color(sheet.bg) if sheet.bg is not None else None,
        "attributes": attribute_names(sheet.att),
    }


def _styled_to_dict(styled: Styled) -> Dict[str, Any]:
    return {"content": str(styled.content), **_sheet_to_dict(styled.style)}


def render_config_to_dict(config: RenderConfig) -> Dict[str, Any]:
    """Serialize every role of ``config``; loading the result reproduces it."""
    return {
        "extends": EMPTY_THEME,
        "prompt-prefix": _styled_to_dict(config.prompt_prefix),
        "prompt": _sheet_to_dict(config.prompt),
        "default-value": _sheet_to_dict(config.default_value),
        "text-input": {
            "text": _sheet_to_dict(config.text_input.text),
            "cursor": _sheet_to_dict(config.text_input.cursor),
        },
        "answer": _sheet_to_dict(config.answer),
        "error-message": {
            "prefix": _styled_to_dict(config.error_message.prefix),
            "separator": _sheet_to_dict(config.error_message.separator),
            "message": _sheet_to_dict(config.error_message.message),
        },
    }


def save_render_config(config: RenderConfig, path: Union[str, Path]) -> Path:
    """Write ``config`` as a theme file and return the path written."""
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(render_config_to_dict(config), f, default_flow_style=False, sort_keys=False)
    logger.debug("Saved theme file %s", path)
    return path
