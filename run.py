#!/usr/bin/env python3
"""
run.py - Main entry point for the gravity-drop grid game

Examples:
    python run.py play
    python run.py --ascii replay --moves 0,0,1,1,2,2,3
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gravitydrop.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
