"""
Pygame presentation layer. Reads engine state, never owns it.
"""
