"""Surface to block lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from eel.host import Surface


class IdentityIndex:
    """Maps host surfaces to the id of the block that owns them.

    Many-to-one: a block's container surface and its content surface both
    map to the same id. Entries are removed explicitly when surfaces are
    discarded; nothing is cleaned up behind the caller's back.
    """

    def __init__(self) -> None:
        self._owner: dict[Surface, int] = {}
        self._surfaces: dict[int, set[Surface]] = {}

    def register(self, surface: Surface, block_id: int) -> None:
        previous = self._owner.get(surface)
        if previous is not None and previous != block_id:
            self._surfaces[previous].discard(surface)
        self._owner[surface] = block_id
        self._surfaces.setdefault(block_id, set()).add(surface)

    def unregister(self, surface: Surface) -> None:
        """Forget one surface. Unknown surfaces are ignored."""
        block_id = self._owner.pop(surface, None)
        if block_id is not None:
            self._surfaces[block_id].discard(surface)

    def forget_block(self, block_id: int) -> None:
        """Forget every surface owned by a block."""
        for surface in self._surfaces.pop(block_id, ()):
            self._owner.pop(surface, None)

    def get(self, surface: Surface) -> int | None:
        return self._owner.get(surface)

    def resolve(self, surface: Surface | None, parent_of: Callable[[Surface], Surface | None]) -> int | None:
        """Find the block owning ``surface`` or its nearest indexed ancestor.

        ``parent_of`` walks one step up the host tree and returns None at the
        top. Returns None if the walk leaves the tree without a match.
        """
        while surface is not None:
            block_id = self._owner.get(surface)
            if block_id is not None:
                return block_id
            surface = parent_of(surface)
        return None

    def __contains__(self, surface: Surface) -> bool:
        return surface in self._owner

    def __len__(self) -> int:
        return len(self._owner)
