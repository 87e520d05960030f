"""
Swatchbook API Schemas
Pydantic models for catalog, search and analysis request/response validation.
"""
from typing import List, Literal, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator

from swatchbook.services.colors.conversion import normalize_hex_color


HueName = Literal["red", "orange", "yellow", "green", "blue", "purple", "pink", "neutral", "white", "black"]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("swatchbook", description="Service name")
    catalog_size: int = Field(..., description="Number of colors currently in the catalog")


# ============================================================================
# CATALOG SCHEMAS
# ============================================================================

class InsertColor(BaseModel):
    """A color supplied by a client for create / import operations."""
    name: str = Field(..., min_length=1, max_length=80, description="Display name")
    hex: str = Field(
        ...,
        pattern=r"^#?[0-9A-Fa-f]{6}$",
        description="Hex color code, #RRGGBB ('#' optional, any case)"
    )
    hue: HueName = Field(..., description="Catalog hue category")
    keywords: List[str] = Field(
        default_factory=list,
        max_length=20,
        description="Style tags; derived from the color when empty"
    )

    @field_validator("hex")
    @classmethod
    def normalize_hex(cls, v):
        return normalize_hex_color(v)

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v):
        cleaned = []
        for keyword in v:
            keyword = keyword.strip().lower()
            if not keyword:
                continue
            if len(keyword) > 32:
                raise ValueError("each keyword must be ≤32 characters")
            if keyword not in cleaned:
                cleaned.append(keyword)
        return cleaned


class ColorOut(BaseModel):
    """A catalog color."""
    id: str
    name: str
    hex: str = Field(..., description="Normalized #RRGGBB")
    hue: str
    keywords: List[str]


class ColorExportItem(BaseModel):
    """A catalog color without its id, as written by export."""
    name: str
    hex: str
    hue: str
    keywords: List[str]


class SearchResultItem(ColorOut):
    """A search hit; carries similarity for hex searches, score for ranked searches."""
    similarity: Optional[float] = Field(None, ge=0.0, le=100.0, description="Hex similarity percentage")
    score: Optional[float] = Field(None, ge=0.0, le=1.0, description="Descriptive query relevance")


class BulkImportRequest(BaseModel):
    """Colors to add (bulk) or to replace the catalog with."""
    colors: List[InsertColor] = Field(..., description="Colors to import")


class BulkImportResponse(BaseModel):
    """Bulk import result."""
    message: str
    colors: List[ColorOut]


class ReplaceResponse(BaseModel):
    """Replace-all result."""
    message: str
    count: int


# ============================================================================
# ANALYSIS SCHEMAS
# ============================================================================

class HSLOut(BaseModel):
    """Integer HSL representation."""
    h: int = Field(..., ge=0, le=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation percent")
    l: int = Field(..., ge=0, le=100, description="Lightness percent")


class ColorAnalysisResponse(BaseModel):
    """Static attributes the classifiers derive for a single hex."""
    hex: str
    rgb: List[int] = Field(..., min_length=3, max_length=3)
    hsl: HSLOut
    style: str
    temperature: str
    family: str
    hue_category: str
    keywords: List[str]
    vividness: float = Field(..., ge=0.0, le=1.0)
    suggested_name: str = Field(..., description="Generated name, unique against the current catalog")


class ParsedQueryOut(BaseModel):
    """Interpretation of a free-text query."""
    hues: List[str]
    lightness_descriptors: List[str]
    saturation_descriptors: List[str]
    original_query: str
    is_descriptive: bool


class SearchExplainResponse(BaseModel):
    """Search debugging output."""
    mode: str = Field(..., description="Resolution mode: hex, ranked or substring")
    parsed: ParsedQueryOut
    results: List[Dict[str, Any]]
