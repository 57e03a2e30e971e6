"""The interface a rendering host provides to the editor."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from eel.model.block import FocusRequest
    from eel.model.content import Variant

# Opaque handle to something the host rendered. The editor only hashes and
# compares them.
Surface = Hashable

Unsubscribe = Callable[[], None]
MutationCallback = Callable[[Surface], None]
KeyCallback = Callable[[str, Surface], None]
PointerCallback = Callable[[Surface], None]


class HostAdapter(Protocol):
    """Renders surfaces, reports input and performs focus.

    Subscriptions return a callable that removes the subscription.
    """

    def lookup_surface(self, name: str) -> Surface | None:
        """Find a mount target by name."""

    def render_block_surface(self) -> Surface:
        """Create the container for a block."""

    def render_content_surface(self, variant: Variant) -> Surface:
        """Create the editable region for a content node."""

    def attach_surface(self, parent: Surface, child: Surface, before: Surface | None = None) -> None:
        """Insert ``child`` into ``parent``, ahead of ``before`` or at the end."""

    def detach_surface(self, surface: Surface) -> None:
        """Remove a surface from its parent."""

    def set_visual_active(self, surface: Surface, is_active: bool) -> None:
        """Toggle active styling on a block container."""

    def schedule_focus(self, request: FocusRequest) -> None:
        """Focus ``request.surface`` after a short fixed delay if the request is still current."""

    def on_content_mutated(self, callback: MutationCallback) -> Unsubscribe:
        """Call ``callback`` with the surface whenever editable text changes."""

    def on_key_event(self, callback: KeyCallback) -> Unsubscribe:
        """Call ``callback`` with the key name and target surface on key presses."""

    def on_pointer_select(self, callback: PointerCallback) -> Unsubscribe:
        """Call ``callback`` with the surface the pointer selected."""

    def get_text_content(self, surface: Surface) -> str:
        """Current text of a surface and everything inside it."""

    def get_parent_surface(self, surface: Surface) -> Surface | None:
        """The surface containing ``surface``, or None at the top of the tree."""


def subscribe(callbacks: list[Callable], callback: Callable) -> Unsubscribe:
    """Append ``callback`` to ``callbacks`` and return a callable that removes it."""
    callbacks.append(callback)
    return lambda: callback in callbacks and callbacks.remove(callback)
