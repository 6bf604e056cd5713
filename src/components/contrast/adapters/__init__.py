"""
Adapters for the contrast component.
"""

from .resolvers import HexColorResolver, PaletteColorResolver
from .rules import ContrastRulesAdapter

__all__ = [
    "ContrastRulesAdapter",
    "HexColorResolver",
    "PaletteColorResolver",
]
