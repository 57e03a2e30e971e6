"""Tests for the in-memory host."""

import pytest

from eel.memory import ACTIVE_STYLE, MemoryHost, Surface
from eel.model.block import Block, FocusRequest
from eel.model.content import Variant


def test_surface_text_content_is_depth_first():
    top = Surface(text="a")
    middle = top.append(Surface(text="b"))
    middle.append(Surface(text="c"))
    top.append(Surface(text="d"))
    assert top.text_content == "abcd"


def test_insert_before():
    parent = Surface()
    a = parent.append(Surface())
    c = parent.append(Surface())
    b = parent.insert(Surface(), before=c)
    assert parent.children == [a, b, c]


def test_insert_before_stranger_raises():
    parent = Surface()
    with pytest.raises(ValueError):
        parent.insert(Surface(), before=Surface())


def test_insert_reparents():
    first, second = Surface(), Surface()
    child = first.append(Surface())
    second.append(child)
    assert first.children == []
    assert child.parent is second


def test_remove_detached_is_noop():
    Surface().remove()  # should not raise


def test_path_uses_names():
    root = Surface(name="editor-root")
    leaf = root.append(Surface()).append(Surface(tag="span"))
    assert leaf.path == "editor-root/div/span"


def test_lookup_surface():
    host = MemoryHost(mounts=("a", "b"))
    assert host.lookup_surface("a").name == "a"
    assert host.lookup_surface("c") is None


def test_render_content_surface_is_editable():
    host = MemoryHost()
    surface = host.render_content_surface(Variant.HEADING1)
    assert surface.editable
    assert "eel-h1" in surface.classes


def test_set_visual_active():
    host = MemoryHost()
    surface = host.render_block_surface()
    host.set_visual_active(surface, True)
    assert ACTIVE_STYLE in surface.classes
    host.set_visual_active(surface, False)
    assert ACTIVE_STYLE not in surface.classes


def _mounted_request(host):
    block = Block(1, host.render_block_surface())
    host.attach_surface(host.mounts["editor-root"], block.surface)
    content = host.render_content_surface(Variant.TEXT)
    host.attach_surface(block.surface, content)
    return block, FocusRequest(block, block.generation, content)


def test_focus_waits_for_delay():
    host = MemoryHost(focus_delay=0.5)
    _, request = _mounted_request(host)
    host.schedule_focus(request)
    host.advance(0.25)
    assert host.focused is None
    host.advance(0.25)
    assert host.focused is request.surface
    assert host.pending_focus == []


def test_stale_focus_is_dropped():
    host = MemoryHost()
    block, request = _mounted_request(host)
    host.schedule_focus(request)
    block.generation += 1
    host.advance()
    assert host.focused is None


def test_focus_on_unmounted_surface_is_dropped():
    host = MemoryHost()
    block = Block(1, host.render_block_surface())
    host.schedule_focus(FocusRequest(block, block.generation, Surface()))
    host.advance()
    assert host.focused is None


def test_detach_clears_focus_inside():
    host = MemoryHost()
    block, request = _mounted_request(host)
    host.schedule_focus(request)
    host.advance()
    host.detach_surface(block.surface)
    assert host.focused is None


def test_unsubscribe():
    host = MemoryHost()
    seen = []
    unsubscribe = host.on_content_mutated(seen.append)
    surface = Surface()
    host.type_text(surface, "x")
    unsubscribe()
    unsubscribe()  # should not raise
    host.type_text(surface, "y")
    assert seen == [surface]


def test_press_defaults_to_focused():
    host = MemoryHost()
    _, request = _mounted_request(host)
    host.schedule_focus(request)
    host.advance()
    seen = []
    host.on_key_event(lambda key, surface: seen.append((key, surface)))
    host.press("enter")
    assert seen == [("enter", request.surface)]
