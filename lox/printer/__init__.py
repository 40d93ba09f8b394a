"""
Lox Printer Package

Visitors that render expression trees as text, for debugging the parser
and as the observable output of the command line driver.
"""

from .ast_printer import AstPrinter, stringify
from .rpn_printer import RpnPrinter

__all__ = [
    "AstPrinter",
    "RpnPrinter",
    "stringify",
]
