"""Snake game logic, menu screens and a drawing interface for a 128x64 display."""

__version__ = "0.1.0"
__all__ = ["apple", "display", "menu", "snake"]