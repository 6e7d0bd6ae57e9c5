"""
WordDeck - a multiplayer word-building card game engine.
"""

__version__ = "0.1.0"
