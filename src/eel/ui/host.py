"""HostAdapter backed by Textual widgets."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from textual.css.query import InvalidQueryFormat, NoMatches
from textual.widget import Widget
from textual.widgets import TextArea

from eel.config import DEFAULT_FOCUS_DELAY
from eel.host import subscribe
from eel.ui.widgets import BlockView, ContentArea, EditorView

if TYPE_CHECKING:
    from textual.app import App

    from eel.host import KeyCallback, MutationCallback, PointerCallback, Unsubscribe
    from eel.model.block import FocusRequest
    from eel.model.content import Variant

logger = logging.getLogger(__name__)

ACTIVE_STYLE = "eel-block--active"


class TextualHost:
    """Renders blocks as BlockView/ContentArea widgets inside an EditorView."""

    def __init__(self, app: App, focus_delay: float = DEFAULT_FOCUS_DELAY) -> None:
        self.app = app
        self.focus_delay = focus_delay
        self._mutation_callbacks: list[MutationCallback] = []
        self._key_callbacks: list[KeyCallback] = []
        self._pointer_callbacks: list[PointerCallback] = []

    def lookup_surface(self, name: str) -> EditorView | None:
        try:
            view = self.app.query_one(f"#{name}", EditorView)
        except (NoMatches, InvalidQueryFormat):
            return None
        view.editor_host = self
        return view

    def render_block_surface(self) -> BlockView:
        return BlockView()

    def render_content_surface(self, variant: Variant) -> ContentArea:
        return ContentArea(variant)

    def attach_surface(self, parent: Widget, child: Widget, before: Widget | None = None) -> None:
        if isinstance(parent, BlockView):
            parent.attach(child, before=before)
        else:
            parent.mount(child, before=before)

    def detach_surface(self, surface: Widget) -> None:
        if isinstance(surface, ContentArea) and surface.staged_in is not None:
            surface.staged_in.unstage(surface)
        else:
            surface.remove()

    def set_visual_active(self, surface: Widget, is_active: bool) -> None:
        surface.set_class(is_active, ACTIVE_STYLE)

    def schedule_focus(self, request: FocusRequest) -> None:
        self.app.set_timer(self.focus_delay, partial(self._focus, request))

    def _focus(self, request: FocusRequest) -> None:
        if not request.is_current:
            logger.debug("dropping stale focus request for block %d", request.block.id)
            return
        if request.surface.is_attached:
            request.surface.focus()

    def on_content_mutated(self, callback: MutationCallback) -> Unsubscribe:
        return subscribe(self._mutation_callbacks, callback)

    def on_key_event(self, callback: KeyCallback) -> Unsubscribe:
        return subscribe(self._key_callbacks, callback)

    def on_pointer_select(self, callback: PointerCallback) -> Unsubscribe:
        return subscribe(self._pointer_callbacks, callback)

    def get_text_content(self, surface: Widget) -> str:
        if isinstance(surface, TextArea):
            return surface.text
        return "".join(area.text for area in surface.query(TextArea))

    def get_parent_surface(self, surface: Widget) -> Widget | None:
        parent = surface.parent
        return parent if isinstance(parent, Widget) else None

    # --- called by EditorView ---

    def notify_mutation(self, surface: Widget) -> None:
        for callback in list(self._mutation_callbacks):
            callback(surface)

    def notify_key(self, key: str, surface: Widget) -> None:
        for callback in list(self._key_callbacks):
            callback(key, surface)

    def notify_select(self, surface: Widget) -> None:
        for callback in list(self._pointer_callbacks):
            callback(surface)
