"""Textual UI for eel."""

from eel.ui.app import EditorApp
from eel.ui.host import TextualHost
from eel.ui.widgets import BlockView, ContentArea, EditorView

__all__ = [
    "BlockView",
    "ContentArea",
    "EditorApp",
    "EditorView",
    "TextualHost",
]
