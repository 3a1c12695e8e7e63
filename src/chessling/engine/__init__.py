"""Chess engine package: minimax search over any ``Evaluate`` state."""

from chessling.engine.minimax import MinimaxEngine
from chessling.engine.search import Evaluate, SearchLimits, SearchResult

__all__ = [
    "Evaluate",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
]
