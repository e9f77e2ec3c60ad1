"""Terminal snake games drawn with ANSI cursor movement, with their building blocks."""

__version__ = "0.4.0"
__all__ = ["terminal", "prototype", "straight", "direction", "steering", "walls", "apples"]