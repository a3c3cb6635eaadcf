"""
Image flashcards core: deck/card persistence and review scheduling.
"""

__version__ = "0.1.0"
