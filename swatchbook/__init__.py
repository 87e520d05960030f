"""
Swatchbook

Curated color catalog with deterministic style classification, color naming,
hex similarity matching and natural-language color search.
"""

__version__ = "1.0.0"
