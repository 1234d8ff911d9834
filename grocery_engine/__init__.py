"""
Ingredient normalization and aggregation engine for grocery lists.
"""

__version__ = "1.0.0"
