"""Widgets that serve as block and content surfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widget import Widget
from textual.widgets import TextArea

from eel.model.content import Variant

if TYPE_CHECKING:
    from textual.events import Key

    from eel.ui.host import TextualHost


class ContentArea(TextArea):
    """Editable region for one content node.

    Enter and the arrow keys belong to the block list, not the text, so they
    are reported instead of edited. Backspace is reported only when there is
    nothing left to delete. Tab and shift+tab do nothing: focus only moves
    between blocks through the block list.
    """

    DEFAULT_CSS = """
    ContentArea {
        width: 100%;
        height: auto;
    }
    ContentArea.eel-h1 {
        text-style: bold;
        color: $accent;
    }
    ContentArea.eel-h2 {
        text-style: bold;
    }
    ContentArea.eel-h3 {
        text-style: italic;
    }
    """

    INTERCEPTED = {"enter", "up", "down"}
    PINNED = {"tab", "shift+tab"}

    class KeyPressed(Message):
        """A key the block list handles was pressed."""

        def __init__(self, key: str, area: ContentArea) -> None:
            super().__init__()
            self.key = key
            self.area = area

    class Selected(Message):
        """The area was clicked."""

        def __init__(self, area: ContentArea) -> None:
            super().__init__()
            self.area = area

    def __init__(self, variant: Variant = Variant.TEXT, **kwargs) -> None:
        kwargs.setdefault("soft_wrap", True)
        kwargs.setdefault("compact", True)
        super().__init__(classes=variant.style, **kwargs)
        self.variant = variant
        self.staged_in: BlockView | None = None

    async def _on_key(self, event: Key) -> None:
        if event.key in self.INTERCEPTED or (event.key == "backspace" and not self.text):
            event.prevent_default()
            event.stop()
            self.post_message(self.KeyPressed(event.key, self))
        elif event.key in self.PINNED:
            event.prevent_default()
            event.stop()
        else:
            await super()._on_key(event)

    def on_click(self, event: Click) -> None:
        self.post_message(self.Selected(self))


class BlockView(Vertical):
    """Container for one block.

    Content can be attached before the view itself is mounted; it is held
    back and composed in once the view mounts.
    """

    DEFAULT_CSS = """
    BlockView {
        width: 100%;
        height: auto;
        padding: 0 1;
        border-left: blank;
    }
    BlockView.eel-block--active {
        border-left: thick $accent;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(classes="eel-block", **kwargs)
        self._staged: list[Widget] = []
        self._composed = False

    def compose(self) -> ComposeResult:
        self._composed = True
        staged, self._staged = self._staged, []
        for child in staged:
            if isinstance(child, ContentArea):
                child.staged_in = None
            yield child

    def attach(self, child: Widget, before: Widget | None = None) -> None:
        if self._composed:
            self.mount(child, before=before)
            return
        position = self._staged.index(before) if before in self._staged else len(self._staged)
        self._staged.insert(position, child)
        if isinstance(child, ContentArea):
            child.staged_in = self

    def unstage(self, child: Widget) -> None:
        if child in self._staged:
            self._staged.remove(child)
        if isinstance(child, ContentArea):
            child.staged_in = None


class EditorView(VerticalScroll):
    """Mount target for an editor. Forwards content and input events to its host."""

    DEFAULT_CSS = """
    EditorView {
        width: 100%;
        height: 1fr;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.editor_host: TextualHost | None = None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        if self.editor_host is not None:
            self.editor_host.notify_mutation(event.text_area)

    def on_content_area_key_pressed(self, event: ContentArea.KeyPressed) -> None:
        event.stop()
        if self.editor_host is not None:
            self.editor_host.notify_key(event.key, event.area)

    def on_content_area_selected(self, event: ContentArea.Selected) -> None:
        event.stop()
        if self.editor_host is not None:
            self.editor_host.notify_select(event.area)
