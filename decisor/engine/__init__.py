"""Engine - Motor de decisão e histórico."""
from .engine import DecisionEngine
from .history import DecisionHistory, HistoryEntry

__all__ = [
    "DecisionEngine",
    "DecisionHistory",
    "HistoryEntry",
]
