"""State manager for the blocks inside an editor."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from eel.errors import RangeViolation
from eel.model.block import Block, FocusRequest
from eel.model.content import ContentNode, Variant, promotion_for
from eel.model.index import IdentityIndex

if TYPE_CHECKING:
    from eel.host import HostAdapter, Surface

logger = logging.getLogger(__name__)


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1


class BlockList:
    """Ordered blocks, the active block, and the surface index that ties them to the host.

    A list always holds at least one block and exactly one of them is
    active. Blocks live in an arena keyed by integer id; ``order`` holds the
    ids top to bottom and always matches the order of block surfaces under
    ``root``.
    """

    def __init__(self, host: HostAdapter, root: Surface) -> None:
        self.host = host
        self.root = root
        self.index = IdentityIndex()
        self._arena: dict[int, Block] = {}
        self._order: list[int] = []
        self._active: Block | None = None
        self._next_id = 1

        self.append_block()
        self._unsubscribe = host.on_content_mutated(self.on_content_mutation)

    # --- views ---

    @property
    def blocks(self) -> list[Block]:
        """Blocks in document order."""
        return [self._arena[block_id] for block_id in self._order]

    @property
    def active(self) -> Block:
        return self._active

    def get(self, block_id: int) -> Block | None:
        return self._arena.get(block_id)

    def index_of(self, block: Block) -> int:
        return self._order.index(block.id)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    # --- lifecycle ---

    def create_block(self) -> Block:
        """Create a new text block and make it the active block.

        WARNING: all blocks must be created through this method. The new
        block is registered and active but not yet placed in the list;
        ``insert_below_active``, ``append_block`` and ``insert_at`` do that.
        """
        block = Block(self._next_id, self.host.render_block_surface())
        self._next_id += 1
        self._arena[block.id] = block
        self.index.register(block.surface, block.id)
        self._fill(block, Variant.TEXT)
        self.set_active(block)
        logger.debug("created block %d", block.id)
        return block

    def append_block(self) -> Block:
        """Create a block at the end of the list."""
        block = self.create_block()
        self._order.append(block.id)
        self.host.attach_surface(self.root, block.surface)
        return block

    def insert_below_active(self) -> Block:
        """Create a block directly below the active one."""
        previous = self._active
        position = self.index_of(previous)
        block = self.create_block()
        self._place_after(position, block)
        return block

    def insert_at(self, index: int) -> Block:
        """Create a block directly below the block at ``index``."""
        if index < 0 or index >= len(self._order):
            raise RangeViolation(index, len(self._order))
        block = self.create_block()
        self._place_after(index, block)
        return block

    def _place_after(self, position: int, block: Block) -> None:
        following = self._order[position + 1] if position + 1 < len(self._order) else None
        self._order.insert(position + 1, block.id)
        if following is None:
            self.host.attach_surface(self.root, block.surface)
        else:
            self.host.attach_surface(self.root, block.surface, before=self._arena[following].surface)

    def delete_if_not_last(self, block: Block) -> None:
        """Delete ``block`` unless it is the only one left.

        Deleting the first block activates the new first block; deleting
        any other activates its predecessor.
        """
        if len(self._order) <= 1:
            return
        position = self.index_of(block)
        del self._order[position]
        del self._arena[block.id]
        self.index.forget_block(block.id)
        self.host.detach_surface(block.surface)
        block._retire()
        logger.debug("deleted block %d at %d", block.id, position)

        successor = self._order[0] if position == 0 else self._order[position - 1]
        if self._active is block:
            self._active = None
        self.set_active(self._arena[successor])

    # --- activity ---

    def set_active(self, block: Block) -> None:
        """Make ``block`` the active block and ask the host to focus it."""
        if self._active is not None:
            self._active.is_active = False
            self.host.set_visual_active(self._active.surface, False)
        self._active = block
        block.is_active = True
        self.host.set_visual_active(block.surface, True)
        self._request_focus(block)

    def move_active(self, direction: Direction) -> None:
        """Activate the neighbouring block, if there is one."""
        target = self.index_of(self._active) + direction.value
        if 0 <= target < len(self._order):
            self.set_active(self._arena[self._order[target]])

    def _request_focus(self, block: Block) -> None:
        self.host.schedule_focus(FocusRequest(block, block.generation, block.content.surface))

    # --- content ---

    def resolve_block(self, surface: Surface | None) -> Block | None:
        """Return the block whose rendered tree contains ``surface``, or None."""
        block_id = self.index.resolve(surface, self.host.get_parent_surface)
        return None if block_id is None else self._arena.get(block_id)

    def transition_content(self, block: Block, variant: Variant) -> None:
        """Replace the block's content with a fresh node of ``variant``."""
        old = self._fill(block, variant)
        logger.debug("block %d: %s -> %s", block.id, old.variant.value, variant.value)
        self._request_focus(block)

    def _fill(self, block: Block, variant: Variant) -> ContentNode | None:
        """Give ``block`` a new content node, swapping out its surface if it had one."""
        surface = self.host.render_content_surface(variant)
        old = block._replace_content(variant, surface)
        if old is None:
            self.host.attach_surface(block.surface, surface)
        else:
            self.host.attach_surface(block.surface, surface, before=old.surface)
            self.host.detach_surface(old.surface)
            self.index.unregister(old.surface)
        self.index.register(surface, block.id)
        return old

    # --- host events ---

    def on_backspace(self, surface: Surface) -> None:
        """Handle backspace in an empty content region.

        An empty heading becomes text; an empty text block is deleted
        unless it is the last one.
        """
        block = self.resolve_block(surface)
        if block is None:
            return
        if self.host.get_text_content(surface) != "":
            return
        demoted = block.variant.demoted
        if demoted is not None:
            self.transition_content(block, demoted)
        else:
            self.delete_if_not_last(block)

    def on_content_mutation(self, surface: Surface) -> None:
        """Promote a text block whose whole content is a heading prefix."""
        block = self.resolve_block(surface)
        if block is None or block.variant.is_heading:
            return
        variant = promotion_for(self.host.get_text_content(surface))
        if variant is not None:
            self.transition_content(block, variant)

    def close(self) -> None:
        """Stop listening for content mutations."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __repr__(self) -> str:
        return f"<BlockList {self.blocks!r}>"
