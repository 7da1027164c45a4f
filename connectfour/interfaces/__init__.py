"""
connectfour.interfaces - User interfaces for Connect Four

Presentation layers that drive the engine. Only the terminal CLI lives here.
"""

# Don't import anything here to avoid circular imports
__all__ = []
