"""Content variants and the nodes that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eel.host import Surface
    from eel.model.block import Block


class Variant(Enum):
    """The closed set of content types a block can hold."""

    TEXT = "text"
    HEADING1 = "h1"
    HEADING2 = "h2"
    HEADING3 = "h3"

    @property
    def level(self) -> int:
        """Heading level, or 0 for plain text."""
        return _LEVELS[self]

    @property
    def is_heading(self) -> bool:
        return self.level > 0

    @property
    def style(self) -> str:
        """Class name hosts put on the rendered content surface."""
        return f"eel-{self.value}"

    @property
    def demoted(self) -> Variant | None:
        """What backspace on an empty node turns this variant into, if anything."""
        match self:
            case Variant.TEXT:
                return None
            case _:
                return Variant.TEXT


_LEVELS = {
    Variant.TEXT: 0,
    Variant.HEADING1: 1,
    Variant.HEADING2: 2,
    Variant.HEADING3: 3,
}

# Text that, typed as the whole content of a text block, promotes it.
PREFIXES: dict[str, Variant] = {
    "# ": Variant.HEADING1,
    "## ": Variant.HEADING2,
    "### ": Variant.HEADING3,
}


def promotion_for(text: str) -> Variant | None:
    """Return the variant a text node becomes when its content is exactly ``text``."""
    return PREFIXES.get(text)


@dataclass(eq=False)
class ContentNode:
    """The typed editable payload of one block.

    The surface is rendered when the node is made and dropped with it; a node
    is never moved to another block.
    """

    variant: Variant
    surface: Surface
    owner: Block = field(repr=False)
