"""Render configuration: the theme applied to a prompt.

A renderer holds one :class:`RenderConfig` and, for each part of the prompt it
draws, reads the style sheet of that role. Most prompts use a shared theme, so
:meth:`RenderConfig.default_static_ref` and :meth:`RenderConfig.empty_static_ref`
return process-wide instances built once on first use.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Callable, Dict

from .color import Color
from .logger import get_logger
from .style import StyleSheet, Styled

logger = get_logger(__name__)

PROMPT_PREFIX = "?"
ERROR_PREFIX = "#"


@dataclass(frozen=True)
class InputRenderConfig:
    """Render configuration for text inputs.

    All text is rendered with the ``text`` style sheet, except for the one
    character under the cursor, which gets ``cursor``.
    """

    text: StyleSheet
    cursor: StyleSheet

    @classmethod
    def empty(cls) -> InputRenderConfig:
        """Render configuration in which no colors or attributes are applied."""
        return cls(text=StyleSheet.empty(), cursor=StyleSheet.empty())

    @classmethod
    def default(cls) -> InputRenderConfig:
        return cls(
            text=StyleSheet.empty(),
            cursor=StyleSheet.empty().with_bg(Color.GREY).with_fg(Color.BLACK),
        )

    def with_text(self, text: StyleSheet) -> InputRenderConfig:
        return replace(self, text=text)

    def with_cursor(self, cursor: StyleSheet) -> InputRenderConfig:
        return replace(self, cursor=cursor)


@dataclass(frozen=True)
class ErrorMessageRenderConfig:
    """Render configuration for error messages.

    The separator is the single space between prefix and message. It has no
    glyph of its own, but styling it (a background color, for instance) lets
    the error line read as one band.
    """

    prefix: Styled[str]
    separator: StyleSheet
    message: StyleSheet

    @classmethod
    def empty(cls) -> ErrorMessageRenderConfig:
        """Render configuration in which no colors or attributes are applied."""
        return cls(
            prefix=Styled.new(ERROR_PREFIX),
            separator=StyleSheet.empty(),
            message=StyleSheet.empty(),
        )

    @classmethod
    def default(cls) -> ErrorMessageRenderConfig:
        return cls(
            prefix=Styled.new(ERROR_PREFIX).with_fg(Color.RED),
            separator=StyleSheet.empty(),
            message=StyleSheet.empty().with_fg(Color.RED),
        )

    def with_prefix(self, prefix: Styled[str]) -> ErrorMessageRenderConfig:
        return replace(self, prefix=prefix)

    def with_separator(self, separator: StyleSheet) -> ErrorMessageRenderConfig:
        return replace(self, separator=separator)

    def with_message(self, message: StyleSheet) -> ErrorMessageRenderConfig:
        return replace(self, message=message)


@dataclass(frozen=True)
class RenderConfig:
    """Color theme applied to a prompt.

    Attributes:
        prompt_prefix: Label drawn before the prompt message, followed by a space.
        prompt: Style of the prompt message.
        default_value: Style of the default value display, e.g. ``(yes)``.
            The surrounding spaces are not styled.
        text_input: Styles of the text being typed and of the cursor.
        answer: Style of the submitted answer.
        error_message: Styles of validation error lines.
    """

    prompt_prefix: Styled[str]
    prompt: StyleSheet
    default_value: StyleSheet
    text_input: InputRenderConfig
    answer: StyleSheet
    error_message: ErrorMessageRenderConfig

    @classmethod
    def empty(cls) -> RenderConfig:
        """RenderConfig in which no colors or attributes are applied."""
        return cls(
            prompt_prefix=Styled.new(PROMPT_PREFIX),
            prompt=StyleSheet.empty(),
            default_value=StyleSheet.empty(),
            text_input=InputRenderConfig.empty(),
            answer=StyleSheet.empty(),
            error_message=ErrorMessageRenderConfig.empty(),
        )

    @classmethod
    def default(cls) -> RenderConfig:
        """The built-in theme: green prefix, cyan answers, red errors."""
        return cls(
            prompt_prefix=Styled.new(PROMPT_PREFIX).with_fg(Color.GREEN),
            prompt=StyleSheet.empty(),
            default_value=StyleSheet.empty(),
            text_input=InputRenderConfig.default(),
            answer=StyleSheet.empty().with_fg(Color.CYAN),
            error_message=ErrorMessageRenderConfig.default(),
        )

    @classmethod
    def default_static_ref(cls) -> RenderConfig:
        """Shared instance of the :meth:`default` theme."""
        return _static_ref("default", lambda: RenderConfig.default())

    @classmethod
    def empty_static_ref(cls) -> RenderConfig:
        """Shared instance of the :meth:`empty` theme."""
        return _static_ref("empty", lambda: RenderConfig.empty())

    def with_prompt_prefix(self, prompt_prefix: Styled[str]) -> RenderConfig:
        return replace(self, prompt_prefix=prompt_prefix)

    def with_prompt(self, prompt: StyleSheet) -> RenderConfig:
        return replace(self, prompt=prompt)

    def with_default_value(self, default_value: StyleSheet) -> RenderConfig:
        return replace(self, default_value=default_value)

    def with_text_input(self, text_input: InputRenderConfig) -> RenderConfig:
        return replace(self, text_input=text_input)

    def with_answer(self, answer: StyleSheet) -> RenderConfig:
        return replace(self, answer=answer)

    def with_error_message(self, error_message: ErrorMessageRenderConfig) -> RenderConfig:
        return replace(self, error_message=error_message)


# ── Shared instances ──

_static_lock = threading.Lock()
_static_configs: Dict[str, RenderConfig] = {}


def _static_ref(key: str, factory: Callable[[], RenderConfig]) -> RenderConfig:
    config = _static_configs.get(key)
    if config is not None:
        return config
    with _static_lock:
        # Another thread may have built it while we waited.
        config = _static_configs.get(key)
        if config is None:
            config = factory()
            _static_configs[key] = config
            logger.debug("Built shared %s render config", key)
    return config
