"""
User interface implementations for the course catalog.
"""
from .terminal import (
    TerminalDisplay,
    StyledLine,
    Palette,
    FrameStyle,
    select_palette,
    select_frame,
)

__all__ = ["TerminalDisplay", "StyledLine", "Palette", "FrameStyle", "select_palette", "select_frame"]
