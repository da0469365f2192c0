from .bursts import BurstGate
from .constraints import Connection, can_connect, connect
from .cycles import find_cycle, has_cycle
from .graph import (
    CounterIdGenerator,
    Edge,
    IdGenerator,
    ImageData,
    Node,
    NodeId,
    NodeType,
    Position,
    TextData,
    build_adjacency,
    create_node,
    parent_text,
    to_digraph,
)
from .history import HistoryManager, HistorySnapshot
from .images import normalize_image_url
from .validation import (
    VERDICT_MESSAGES,
    SaveVerdict,
    dangling_starts,
    validate_for_save,
)

__all__ = [
    "BurstGate",
    "Connection",
    "CounterIdGenerator",
    "Edge",
    "HistoryManager",
    "HistorySnapshot",
    "IdGenerator",
    "ImageData",
    "Node",
    "NodeId",
    "NodeType",
    "Position",
    "SaveVerdict",
    "TextData",
    "VERDICT_MESSAGES",
    "build_adjacency",
    "can_connect",
    "connect",
    "create_node",
    "dangling_starts",
    "find_cycle",
    "has_cycle",
    "normalize_image_url",
    "parent_text",
    "to_digraph",
    "validate_for_save",
]
