"""
Swatchbook Catalog Module

In-memory storage of the color catalog: seed data, filler generation,
filtering, search and import/export.
"""

from .storage import (
    Color, ColorCatalog, SearchHit, generate_additional_colors, get_catalog, reset_catalog
)

__all__ = [
    "Color", "ColorCatalog", "SearchHit", "generate_additional_colors", "get_catalog", "reset_catalog"
]
