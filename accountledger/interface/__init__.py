"""Mini README: Interactive interface package for the account ledger.

Exports the ``MenuSession`` prompt loop used by the command line entry point.
"""

from .menu import MenuChoice, MenuSession

__all__ = ["MenuChoice", "MenuSession"]
