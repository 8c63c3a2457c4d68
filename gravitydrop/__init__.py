"""
gravitydrop - Rules engine for a two-player gravity-drop grid game

This package provides the game state model, the rules engine that applies
turns and detects wins, a Gymnasium environment and a console driver.
"""

# Version number
__version__ = '0.1.0'
