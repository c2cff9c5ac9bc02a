"""wordlex: Wordle scoring, candidate filtering and entropy-ranked suggestions."""

from .config import RankerConfig
from .session import Session

__version__ = "0.1.0"

__all__ = ["RankerConfig", "Session", "__version__"]
