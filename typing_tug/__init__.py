"""
Typing Tug - a typing tug of war game.
"""

__version__ = "0.1.0"
