from .module import DebugModule

__all__ = ["DebugModule"]
