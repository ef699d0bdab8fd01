"""Style sheets and styled labels.

A :class:`StyleSheet` is reusable styling independent of any text. A
:class:`Styled` value pairs a short fixed label (a prompt prefix glyph, say)
with a style of its own.

Both are immutable. Builder methods return a new value with one field
changed, so chains read left to right and the last call for a field wins::

    StyleSheet.empty().with_fg(Color.CYAN).with_attr(Attributes.BOLD)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

from rich.style import Style
from rich.text import Text

from .attributes import RICH_ATTRIBUTES, Attributes
from .color import ColorLike, to_rich_color

T = TypeVar("T")


@dataclass(frozen=True)
class StyleSheet:
    """Foreground, background and text attributes.

    ``None`` colors inherit the terminal default. The empty sheet is the
    identity: applying it changes nothing.
    """

    fg: Optional[ColorLike]
    bg: Optional[ColorLike]
    att: Attributes

    @classmethod
    def empty(cls) -> StyleSheet:
        """Style sheet with no colors or attributes."""
        return cls(fg=None, bg=None, att=Attributes.EMPTY)

    def with_fg(self, fg: Optional[ColorLike]) -> StyleSheet:
        """Set the foreground color."""
        return replace(self, fg=fg)

    def with_bg(self, bg: Optional[ColorLike]) -> StyleSheet:
        """Set the background color."""
        return replace(self, bg=bg)

    def with_attr(self, *attributes: Attributes) -> StyleSheet:
        """Add text attributes to the ones already set."""
        att = self.att
        for attr in attributes:
            att |= attr
        return replace(self, att=att)

    def with_attributes(self, att: Attributes) -> StyleSheet:
        """Replace the whole attribute set."""
        return replace(self, att=att)

    def is_empty(self) -> bool:
        return self.fg is None and self.bg is None and not self.att

    def to_rich_style(self) -> Style:
        """Convert into a ``rich`` style. The empty sheet gives the null style."""
        if self.is_empty():
            return Style.null()
        flags = {kwarg: True for attr, kwarg in RICH_ATTRIBUTES.items() if attr in self.att}
        return Style(
            color=to_rich_color(self.fg) if self.fg is not None else None,
            bgcolor=to_rich_color(self.bg) if self.bg is not None else None,
            **flags,
        )


@dataclass(frozen=True)
class Styled(Generic[T]):
    """A value paired with its own style sheet."""

    content: T
    style: StyleSheet = StyleSheet.empty()

    @classmethod
    def new(cls, content: T) -> Styled[T]:
        """Unstyled ``content``."""
        return cls(content=content, style=StyleSheet.empty())

    @property
    def fg(self) -> Optional[ColorLike]:
        return self.style.fg

    @property
    def bg(self) -> Optional[ColorLike]:
        return self.style.bg

    def with_fg(self, fg: Optional[ColorLike]) -> Styled[T]:
        return replace(self, style=self.style.with_fg(fg))

    def with_bg(self, bg: Optional[ColorLike]) -> Styled[T]:
        return replace(self, style=self.style.with_bg(bg))

    def with_attr(self, *attributes: Attributes) -> Styled[T]:
        return replace(self, style=self.style.with_attr(*attributes))

    def with_style_sheet(self, style: StyleSheet) -> Styled[T]:
        """Replace the whole style sheet."""
        return replace(self, style=style)

    def to_text(self) -> Text:
        """Build a ``rich`` text of the content with this style applied."""
        return Text(str(self.content), style=self.style.to_rich_style())
