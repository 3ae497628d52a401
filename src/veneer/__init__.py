"""Veneer - a palette-driven theme generator.

Describe a theme once as a palette whose values are hex colors or dotted
references to other values, resolve it, and render it into any text
template.
"""

__version__ = "0.1.0"
