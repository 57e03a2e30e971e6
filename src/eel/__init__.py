"""Embeddable block-based rich-text document model."""

from eel.config import EditorConfig
from eel.editor import Editor
from eel.errors import ConfigurationError, EelError, RangeViolation
from eel.memory import MemoryHost
from eel.model import Block, BlockList, Direction, Variant

__all__ = [
    "Block",
    "BlockList",
    "ConfigurationError",
    "Direction",
    "Editor",
    "EditorConfig",
    "EelError",
    "MemoryHost",
    "RangeViolation",
    "Variant",
]
