"""Textual application hosting a single editor."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.widgets import Footer

from eel.config import EditorConfig
from eel.editor import Editor
from eel.ui.host import TextualHost
from eel.ui.widgets import EditorView


class EditorApp(App):
    """Block editor TUI."""

    TITLE = "eel"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, config: EditorConfig | None = None):
        super().__init__()
        self.config = config or EditorConfig()
        self.surface_host: TextualHost | None = None
        self.block_editor: Editor | None = None

    def compose(self) -> ComposeResult:
        yield EditorView(id=self.config.root)
        yield Footer()

    def on_mount(self) -> None:
        self.surface_host = TextualHost(self, focus_delay=self.config.focus_delay)
        self.block_editor = Editor(self.surface_host, self.config)

    def action_quit(self) -> None:
        """Detach the editor from its host and quit."""
        if self.block_editor is not None:
            self.block_editor.close()
        self.exit()
