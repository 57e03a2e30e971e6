"""Shared fixtures for model tests."""

import pytest

from eel.memory import ACTIVE_STYLE, MemoryHost
from eel.model.block_list import BlockList


@pytest.fixture
def host():
    return MemoryHost()


@pytest.fixture
def root(host):
    return host.lookup_surface("editor-root")


@pytest.fixture
def blocks(host, root):
    block_list = BlockList(host, root)
    yield block_list
    block_list.close()


@pytest.fixture
def grow(blocks):
    """Grow the list to ``count`` blocks by inserting below the active block."""

    def _grow(count):
        while len(blocks) < count:
            blocks.insert_below_active()
        return blocks.blocks

    return _grow


@pytest.fixture
def check(blocks, root):
    """Assert everything that must hold after any operation."""

    def _check():
        ordered = blocks.blocks
        assert len(ordered) >= 1
        assert [b for b in ordered if b.is_active] == [blocks.active]
        assert root.children == [b.surface for b in ordered]
        assert [s for s in root.children if ACTIVE_STYLE in s.classes] == [blocks.active.surface]
        for block in ordered:
            assert blocks.index.get(block.surface) == block.id
            assert blocks.index.get(block.content.surface) == block.id
            assert block.surface.children == [block.content.surface]
            assert block.content.owner is block
        assert len(blocks.index) == 2 * len(ordered)

    return _check
