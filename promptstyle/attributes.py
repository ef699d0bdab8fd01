"""Text attributes carried by a style sheet."""

from enum import Flag
from typing import Dict, Iterable, Union

from .errors import InvalidAttributeError


class Attributes(Flag):
    """Set of independent text attributes. Combine with ``|``."""

    EMPTY = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINED = 8
    BLINK = 16
    REVERSED = 32
    HIDDEN = 64
    CROSSED_OUT = 128


# Attribute -> keyword argument of ``rich.style.Style``.
RICH_ATTRIBUTES: Dict[Attributes, str] = {
    Attributes.BOLD: "bold",
    Attributes.DIM: "dim",
    Attributes.ITALIC: "italic",
    Attributes.UNDERLINED: "underline",
    Attributes.BLINK: "blink",
    Attributes.REVERSED: "reverse",
    Attributes.HIDDEN: "conceal",
    Attributes.CROSSED_OUT: "strike",
}


def attribute_names(attributes: Attributes) -> list[str]:
    """Return the lower-case names of the attributes set in ``attributes``."""
    return [attr.name.lower() for attr in RICH_ATTRIBUTES if attr in attributes]


def parse_attributes(names: Union[str, Iterable[str], None]) -> Attributes:
    """Combine attribute names (``"bold"``, ``"crossed-out"``) into one flag."""
    if names is None:
        return Attributes.EMPTY
    if isinstance(names, str):
        names = [names]
    elif not isinstance(names, (list, tuple)):
        raise InvalidAttributeError(names)
    result = Attributes.EMPTY
    for name in names:
        key = str(name).strip().upper().replace("-", "_").replace(" ", "_")
        try:
            attr = Attributes[key]
        except KeyError:
            raise InvalidAttributeError(name) from None
        result |= attr
    return result
