"""Tests for wiring host input to the block list."""

import pytest

from eel.config import EditorConfig
from eel.editor import Editor
from eel.errors import ConfigurationError, EelError
from eel.memory import MemoryHost, Surface
from eel.model.content import Variant


@pytest.fixture
def host():
    return MemoryHost()


@pytest.fixture
def editor(host):
    editor = Editor(host)
    host.advance()
    yield editor
    editor.close()


def test_mounts_on_configured_root(host):
    editor = Editor(host)
    root = host.lookup_surface("editor-root")
    assert root.children == [editor.blocks.active.surface]


def test_custom_root():
    host = MemoryHost(mounts=("notes",))
    editor = Editor(host, EditorConfig(root="notes"))
    assert len(host.mounts["notes"].children) == 1
    assert editor.config.root == "notes"


def test_missing_root_raises():
    host = MemoryHost(mounts=("somewhere-else",))
    with pytest.raises(ConfigurationError, match="editor-root"):
        Editor(host)


def test_configuration_error_is_eel_error():
    assert issubclass(ConfigurationError, EelError)


def test_enter_inserts_block(editor, host):
    first = editor.blocks.active
    host.press("enter")
    assert len(editor.blocks) == 2
    assert editor.blocks.blocks[0] is first
    assert editor.blocks.active is editor.blocks.blocks[1]


def test_arrows_move_active(editor, host):
    host.press("enter")
    host.advance()
    first, second = editor.blocks.blocks
    host.press("up")
    assert editor.blocks.active is first
    host.press("up")
    assert editor.blocks.active is first
    host.press("down")
    assert editor.blocks.active is second


def test_backspace_on_empty_block_deletes(editor, host):
    host.press("enter")
    host.advance()
    host.press("backspace")
    assert len(editor.blocks) == 1


def test_backspace_on_only_block_keeps_it(editor, host):
    only = editor.blocks.active
    host.press("backspace")
    assert editor.blocks.blocks == [only]


def test_other_keys_ignored(editor, host):
    host.press("a")
    host.press("ctrl+b")
    assert len(editor.blocks) == 1


def test_click_selects_block(editor, host):
    host.press("enter")
    first, second = editor.blocks.blocks
    host.click(first.content.surface)
    assert editor.blocks.active is first


def test_click_nested_surface_selects_block(editor, host):
    host.press("enter")
    first, _ = editor.blocks.blocks
    span = first.content.surface.append(Surface(tag="span"))
    host.click(span)
    assert editor.blocks.active is first


def test_click_outside_blocks_is_ignored(editor, host):
    host.press("enter")
    active = editor.blocks.active
    host.click(host.lookup_surface("editor-root"))
    assert editor.blocks.active is active


def test_typing_heading_then_backspace(editor, host):
    block = editor.blocks.active
    host.type_text(host.focused, "## ")
    assert block.variant is Variant.HEADING2
    host.advance()
    assert host.focused is block.content.surface
    host.press("backspace")
    assert block.variant is Variant.TEXT
    assert len(editor.blocks) == 1


def test_close_unsubscribes(host):
    editor = Editor(host)
    editor.close()
    host.press("enter")
    host.type_text(editor.blocks.active.content.surface, "# ")
    assert len(editor.blocks) == 1
    assert editor.blocks.active.variant is Variant.TEXT
