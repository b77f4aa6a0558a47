"""
Views Package
=============

Presentation layer for interactive use.

Classes:
    - DepotController: the interactive actions, toolkit independent
    - DepotGui: tkinter form (imported lazily; needs a display)
"""

from .depot_controller import DepotController

__all__ = ["DepotController"]
