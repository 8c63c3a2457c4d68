"""
gravitydrop.interfaces - Drivers for the gravity-drop rules engine

This package contains the console driver that feeds turns to the engine
and prints the grid.
"""

# Don't import anything here to avoid circular imports
__all__ = []
