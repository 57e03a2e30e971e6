"""Blocks: the ordered units of a document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from eel.model.content import ContentNode, Variant

if TYPE_CHECKING:
    from eel.host import Surface


class Block:
    """One element of a BlockList, owning exactly one ContentNode.

    WARNING: blocks must only be created through ``BlockList.create_block``.
    Constructing one directly leaves it unregistered and unordered, and the
    list will behave unpredictably if it is ever handed one.
    """

    def __init__(self, block_id: int, surface: Surface) -> None:
        self.id = block_id
        self.surface = surface
        self.content: ContentNode | None = None
        self.is_active = False
        self.generation = 0
        self.alive = True

    @property
    def variant(self) -> Variant:
        return self.content.variant

    def _replace_content(self, variant: Variant, surface: Surface) -> ContentNode:
        """Swap in a new content node and return the old one (None on first fill)."""
        old = self.content
        self.content = ContentNode(variant, surface, owner=self)
        self.generation += 1
        return old

    def _retire(self) -> None:
        self.alive = False
        self.is_active = False
        self.generation += 1

    def __repr__(self) -> str:
        state = " active" if self.is_active else ""
        variant = self.content.variant.value if self.content else "empty"
        return f"<Block {self.id} {variant}{state}>"


@dataclass(frozen=True)
class FocusRequest:
    """A deferred request to focus a block's content surface.

    Hosts should check ``is_current`` when the delay expires. A request goes
    stale once its block's content is replaced or the block is deleted.
    """

    block: Block = field(compare=False)
    generation: int
    surface: Surface

    @property
    def is_current(self) -> bool:
        return self.block.alive and self.block.generation == self.generation
