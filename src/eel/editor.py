"""Wires host input events to a BlockList."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from eel.config import EditorConfig
from eel.errors import ConfigurationError
from eel.model.block_list import BlockList, Direction

if TYPE_CHECKING:
    from eel.host import HostAdapter, Surface, Unsubscribe

logger = logging.getLogger(__name__)


class Editor:
    """A block editor mounted on a host surface.

    Raises ConfigurationError if the host has no surface named
    ``config.root``. Call ``close`` to detach from the host's events.
    """

    def __init__(self, host: HostAdapter, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self.host = host
        root = host.lookup_surface(self.config.root)
        if root is None:
            raise ConfigurationError(f'Could not find surface "{self.config.root}" to mount on.')
        self.blocks = BlockList(host, root)
        self._subscriptions: list[Unsubscribe] = [
            host.on_key_event(self.handle_key),
            host.on_pointer_select(self.handle_select),
        ]
        logger.debug("editor mounted on %s", self.config.root)

    def handle_key(self, key: str, surface: Surface | None) -> None:
        match key:
            case "enter":
                self.blocks.insert_below_active()
            case "up":
                self.blocks.move_active(Direction.PREVIOUS)
            case "down":
                self.blocks.move_active(Direction.NEXT)
            case "backspace":
                self.blocks.on_backspace(surface)

    def handle_select(self, surface: Surface | None) -> None:
        block = self.blocks.resolve_block(surface)
        if block is not None:
            self.blocks.set_active(block)

    def close(self) -> None:
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        self.blocks.close()
