"""
Headless presentation adapter.
"""

from .selection import ClickAction, ClickOutcome, NoSelection, OnePointSelected, SelectionController

__all__ = ['ClickAction', 'ClickOutcome', 'NoSelection', 'OnePointSelected', 'SelectionController']
