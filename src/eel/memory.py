"""In-memory host: a render tree with simulated input and a manual clock."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from eel.config import DEFAULT_FOCUS_DELAY
from eel.host import KeyCallback, MutationCallback, PointerCallback, Unsubscribe, subscribe

if TYPE_CHECKING:
    from eel.model.block import FocusRequest
    from eel.model.content import Variant

logger = logging.getLogger(__name__)

BLOCK_STYLE = "eel-block"
ACTIVE_STYLE = "eel-block--active"


class Surface:
    """A node in the in-memory render tree.

    Text lives on leaves; ``text_content`` concatenates it depth-first, the
    way a DOM element's textContent does.
    """

    def __init__(
        self,
        tag: str = "div",
        classes: tuple[str, ...] = (),
        *,
        editable: bool = False,
        name: str | None = None,
        text: str = "",
    ) -> None:
        self.tag = tag
        self.classes = set(classes)
        self.editable = editable
        self.name = name
        self.text = text
        self.parent: Surface | None = None
        self.children: list[Surface] = []

    @property
    def text_content(self) -> str:
        return self.text + "".join(child.text_content for child in self.children)

    def append(self, child: Surface) -> Surface:
        """Attach ``child`` at the end. Returns the child for chaining."""
        return self.insert(child)

    def insert(self, child: Surface, before: Surface | None = None) -> Surface:
        if before is not None and before not in self.children:
            raise ValueError(f"{before!r} is not a child of {self!r}")
        if child.parent is not None:
            child.remove()
        position = len(self.children) if before is None else self.children.index(before)
        self.children.insert(position, child)
        child.parent = self
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    @property
    def path(self) -> str:
        """Slash path from the top of the tree, using names where set."""
        parts: list[str] = []
        current: Surface | None = self
        while current is not None:
            parts.append(current.name or current.tag)
            current = current.parent
        return "/".join(reversed(parts))

    def __repr__(self) -> str:
        classes = " ".join(sorted(self.classes))
        label = f"Surface({self.path})"
        return f"<{label} [{classes}]>" if classes else f"<{label}>"


class MemoryHost:
    """A HostAdapter with no display.

    Mount targets are named top-level surfaces. Focus requests queue on a
    manual clock; call ``advance`` to let them fire. The ``type_text``,
    ``press`` and ``click`` helpers simulate a user.
    """

    def __init__(self, mounts: tuple[str, ...] = ("editor-root",), focus_delay: float = DEFAULT_FOCUS_DELAY) -> None:
        self.mounts = {name: Surface(name=name) for name in mounts}
        self.focus_delay = focus_delay
        self.focused: Surface | None = None
        self.now = 0.0
        self._pending: list[tuple[float, FocusRequest]] = []
        self._mutation_callbacks: list[MutationCallback] = []
        self._key_callbacks: list[KeyCallback] = []
        self._pointer_callbacks: list[PointerCallback] = []

    # --- HostAdapter ---

    def lookup_surface(self, name: str) -> Surface | None:
        return self.mounts.get(name)

    def render_block_surface(self) -> Surface:
        return Surface(classes=(BLOCK_STYLE,))

    def render_content_surface(self, variant: Variant) -> Surface:
        return Surface(classes=(variant.style,), editable=True)

    def attach_surface(self, parent: Surface, child: Surface, before: Surface | None = None) -> None:
        parent.insert(child, before=before)

    def detach_surface(self, surface: Surface) -> None:
        surface.remove()
        if self.focused is not None and self._is_within(self.focused, surface):
            self.focused = None

    def set_visual_active(self, surface: Surface, is_active: bool) -> None:
        if is_active:
            surface.classes.add(ACTIVE_STYLE)
        else:
            surface.classes.discard(ACTIVE_STYLE)

    def schedule_focus(self, request: FocusRequest) -> None:
        self._pending.append((self.now + self.focus_delay, request))

    def on_content_mutated(self, callback: MutationCallback) -> Unsubscribe:
        return subscribe(self._mutation_callbacks, callback)

    def on_key_event(self, callback: KeyCallback) -> Unsubscribe:
        return subscribe(self._key_callbacks, callback)

    def on_pointer_select(self, callback: PointerCallback) -> Unsubscribe:
        return subscribe(self._pointer_callbacks, callback)

    def get_text_content(self, surface: Surface) -> str:
        return surface.text_content

    def get_parent_surface(self, surface: Surface) -> Surface | None:
        return surface.parent

    # --- clock ---

    @property
    def pending_focus(self) -> list[FocusRequest]:
        return [request for _, request in self._pending]

    def advance(self, seconds: float | None = None) -> None:
        """Move the clock forward and run focus requests that are due.

        With no argument, advance just far enough to run everything queued.
        """
        if seconds is None:
            seconds = self.focus_delay
        self.now += seconds
        due = [entry for entry in self._pending if entry[0] <= self.now]
        self._pending = [entry for entry in self._pending if entry[0] > self.now]
        for _, request in due:
            self._focus(request)

    def _focus(self, request: FocusRequest) -> None:
        if not request.is_current:
            logger.debug("dropping stale focus request for block %d", request.block.id)
            return
        if not self._is_mounted(request.surface):
            return
        self.focused = request.surface

    def _is_mounted(self, surface: Surface) -> bool:
        root = surface
        while root.parent is not None:
            root = root.parent
        return root in self.mounts.values()

    @staticmethod
    def _is_within(surface: Surface, ancestor: Surface) -> bool:
        current: Surface | None = surface
        while current is not None:
            if current is ancestor:
                return True
            current = current.parent
        return False

    # --- simulated user ---

    def type_text(self, surface: Surface, text: str) -> None:
        """Replace a surface's text and report the mutation."""
        surface.text = text
        for callback in list(self._mutation_callbacks):
            callback(surface)

    def press(self, key: str, surface: Surface | None = None) -> None:
        """Press ``key`` on ``surface``, defaulting to whatever has focus."""
        target = surface if surface is not None else self.focused
        for callback in list(self._key_callbacks):
            callback(key, target)

    def click(self, surface: Surface) -> None:
        for callback in list(self._pointer_callbacks):
            callback(surface)
