"""Editor configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass

from eel.errors import ConfigurationError

DEFAULT_ROOT = "editor-root"
DEFAULT_FOCUS_DELAY = 0.02

# Letters, digits, "_" and "-", not starting with a digit.
_ROOT_NAME = re.compile(r"[a-zA-Z_\-][a-zA-Z0-9_\-]*")


@dataclass
class EditorConfig:
    """Options passed to an Editor when it is created.

    ``root`` names the host surface the editor mounts on. ``focus_delay`` is
    how long, in seconds, a host waits before acting on a focus request.
    """

    root: str = DEFAULT_ROOT
    focus_delay: float = DEFAULT_FOCUS_DELAY

    def __post_init__(self) -> None:
        if not self.root:
            raise ConfigurationError("root must be a non-empty surface name")
        if not _ROOT_NAME.fullmatch(self.root):
            raise ConfigurationError(f'root "{self.root}" is not a valid surface name')
        if self.focus_delay < 0:
            raise ConfigurationError("focus_delay must not be negative")
