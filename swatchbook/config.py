"""
Swatchbook Configuration
Manages environment variables and defaults for the catalog and search services.
"""
import os
from typing import List, Optional


class Config:
    """Configuration class for Swatchbook services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("SWATCHBOOK_LOG_LEVEL", "INFO")

    # Catalog construction
    CATALOG_SIZE: int = int(os.environ.get("SWATCHBOOK_CATALOG_SIZE", "600"))

    # Search
    SIMILARITY_THRESHOLD: float = float(os.environ.get("SWATCHBOOK_SIMILARITY_THRESHOLD", "90"))
    EXPLAIN_LIMIT: int = int(os.environ.get("SWATCHBOOK_EXPLAIN_LIMIT", "20"))

    # Import limits
    BULK_IMPORT_MAX: int = int(os.environ.get("SWATCHBOOK_BULK_IMPORT_MAX", "1000"))
    REPLACE_MAX: int = int(os.environ.get("SWATCHBOOK_REPLACE_MAX", "2000"))

    # Default (unfiltered) display arrangement
    RAINBOW_PER_HUE: int = int(os.environ.get("SWATCHBOOK_RAINBOW_PER_HUE", "6"))
    RAINBOW_NEUTRALS: int = int(os.environ.get("SWATCHBOOK_RAINBOW_NEUTRALS", "12"))

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("SWATCHBOOK_METRICS_ENABLED", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "SWATCHBOOK_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5000,http://localhost:5173"
    )

    # Filter vocabularies
    HUE_VALUES = ["red", "orange", "yellow", "green", "blue", "purple", "pink", "neutral", "white", "black"]
    KEYWORD_VALUES = ["pastel", "light-neutrals", "dark-neutrals", "muted", "jewel", "vibrant", "earthy"]
    TEMPERATURE_VALUES = ["warm", "cool", "neutral"]
    FAMILY_VALUES = [
        "red", "orange", "yellow", "lime", "green", "teal", "cyan", "blue",
        "indigo", "violet", "magenta", "pink", "brown", "gray", "white", "black"
    ]
    SORT_VALUES = ["none", "lightness", "saturation"]

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Parse the comma separated origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_sort(cls, sort_by: str) -> bool:
        """Validate sort parameter."""
        return sort_by in cls.SORT_VALUES

    @classmethod
    def validate_keyword(cls, keyword: str) -> bool:
        """Validate style keyword filter value."""
        return keyword == "all" or keyword in cls.KEYWORD_VALUES

    @classmethod
    def validate_temperature(cls, temperature: str) -> bool:
        """Validate temperature filter value."""
        return temperature == "all" or temperature in cls.TEMPERATURE_VALUES

    @classmethod
    def validate_family(cls, family: str) -> bool:
        """Validate color family filter value."""
        return family == "all" or family in cls.FAMILY_VALUES

    @classmethod
    def validate_threshold(cls, threshold: Optional[float]) -> bool:
        """Validate similarity threshold percentage."""
        return threshold is None or 0.0 <= threshold <= 100.0


# Global config instance
config = Config()
