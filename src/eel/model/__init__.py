"""Block document model."""

from eel.model.block import Block, FocusRequest
from eel.model.block_list import BlockList, Direction
from eel.model.content import PREFIXES, ContentNode, Variant, promotion_for
from eel.model.index import IdentityIndex

__all__ = [
    "PREFIXES",
    "Block",
    "BlockList",
    "ContentNode",
    "Direction",
    "FocusRequest",
    "IdentityIndex",
    "Variant",
    "promotion_for",
]
