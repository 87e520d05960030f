"""
Swatchbook Color Catalog API Routes
Listing, filtering, search, analysis and import/export of catalog colors.
"""
import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response

from swatchbook.config import config
from swatchbook.schemas import (
    BulkImportRequest, BulkImportResponse, ColorAnalysisResponse, ColorExportItem,
    ColorOut, InsertColor, ReplaceResponse, SearchExplainResponse, SearchResultItem
)
from swatchbook.services.catalog import Color, SearchHit, get_catalog
from swatchbook.utils.logging import get_logger
from swatchbook.utils.metrics import get_metrics

router = APIRouter(prefix="/api/colors", tags=["Colors"])
logger = get_logger()


def _color_out(color: Color) -> ColorOut:
    return ColorOut(**color.to_dict())


def _search_item(hit: SearchHit) -> SearchResultItem:
    return SearchResultItem(
        **hit.color.to_dict(),
        similarity=hit.similarity,
        score=None if hit.score is None else min(1.0, max(0.0, hit.score))
    )


def _insert_records(colors: List[InsertColor]) -> List[dict]:
    return [color.model_dump() for color in colors]


@router.get("", response_model=List[ColorOut], summary="List all colors")
def list_colors():
    """Every color in the catalog, in catalog order."""
    return [_color_out(color) for color in get_catalog().get_all_colors()]


@router.get("/filter", response_model=List[ColorOut], summary="Filter and sort colors")
def filter_colors(
    hue: str = Query("all", description="Catalog hue or 'all'"),
    keyword: str = Query("all", description="Style keyword or 'all'"),
    temperature: str = Query("all", description="warm, cool, neutral or 'all'"),
    family: str = Query("all", description="Color family or 'all'"),
    sort: str = Query("none", description="none, lightness or saturation")
):
    """
    Combined filter.

    With every filter at 'all' and no sort the colors come back in the
    rainbow display order.
    """
    if hue != "all" and hue not in config.HUE_VALUES:
        raise HTTPException(status_code=400, detail=f"hue must be 'all' or one of: {', '.join(config.HUE_VALUES)}")
    if not config.validate_keyword(keyword):
        raise HTTPException(status_code=400, detail=f"keyword must be 'all' or one of: {', '.join(config.KEYWORD_VALUES)}")
    if not config.validate_temperature(temperature):
        raise HTTPException(status_code=400, detail="temperature must be one of: all, warm, cool, neutral")
    if not config.validate_family(family):
        raise HTTPException(status_code=400, detail=f"family must be 'all' or one of: {', '.join(config.FAMILY_VALUES)}")
    if not config.validate_sort(sort):
        raise HTTPException(status_code=400, detail="sort must be one of: none, lightness, saturation")

    colors = get_catalog().filter_colors(
        hue=hue,
        keyword=keyword,
        temperature=temperature,
        family=family,
        sort_by=sort,
        per_hue=config.RAINBOW_PER_HUE,
        max_neutrals=config.RAINBOW_NEUTRALS
    )
    return [_color_out(color) for color in colors]


@router.get("/search", response_model=List[SearchResultItem], summary="Search colors")
def search_colors(q: str = Query(..., description="Hex code, descriptive phrase or free text")):
    """
    Search the catalog.

    - **Hex** (`#FF5733`, `ff5733`): colors within the similarity threshold,
      most similar first, each with a `similarity` percentage
    - **Descriptive** (`light vibrant blue`, `dark red`): every color ranked
      by relevance, each with a `score`
    - **Anything else**: case-insensitive substring match over name, hex,
      hue and keywords
    """
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    start_time = time.time()
    try:
        mode, hits = get_catalog().search_colors(q)
    except Exception as e:
        get_metrics().increment_failure_count("search")
        logger.error("Search failed", extra={"query": q, "error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to search colors")

    duration_ms = (time.time() - start_time) * 1000
    if config.METRICS_ENABLED:
        metrics = get_metrics()
        metrics.increment_search_mode(mode)
        metrics.record_timing("search", duration_ms)

    logger.info("Search completed", extra={
        "query": q,
        "mode": mode,
        "results": len(hits),
        "duration_ms": round(duration_ms, 2)
    })

    return [_search_item(hit) for hit in hits]


@router.get("/search/explain", response_model=SearchExplainResponse, summary="Explain search scoring")
def explain_search(
    q: str = Query(..., description="Search text to explain"),
    limit: Optional[int] = Query(None, ge=1, le=200, description="Number of top-scoring colors to include")
):
    """Parsed query intents plus the score breakdown of the best matches."""
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    explanation = get_catalog().explain_search(q, limit or config.EXPLAIN_LIMIT)
    for result in explanation["results"]:
        logger.debug("Color score", extra={"query": q, **result})

    return explanation


@router.get("/analyze", response_model=ColorAnalysisResponse, summary="Analyze a hex color")
def analyze_color(hex_color: str = Query(..., alias="hex", description="Hex color code, #RRGGBB")):
    """HSL, style, temperature, family, keywords and a suggested name for one color."""
    try:
        return get_catalog().analyze_hex(hex_color)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/export", response_model=List[ColorExportItem], summary="Export colors")
def export_colors(response: Response):
    """Download the catalog as JSON, without ids."""
    response.headers["Content-Disposition"] = 'attachment; filename="colors-export.json"'
    return get_catalog().export_colors()


@router.get("/hue/{hue}", response_model=List[ColorOut], summary="Colors by hue")
def colors_by_hue(hue: str):
    """Colors in one catalog hue ('all' returns everything)."""
    return [_color_out(color) for color in get_catalog().get_colors_by_hue(hue)]


@router.get("/keyword/{keyword}", response_model=List[ColorOut], summary="Colors by keyword")
def colors_by_keyword(keyword: str):
    """Colors tagged with a keyword ('all' returns everything)."""
    return [_color_out(color) for color in get_catalog().get_colors_by_keyword(keyword)]


@router.post("", response_model=ColorOut, status_code=201, summary="Add a color")
def create_color(body: InsertColor):
    """Add one color; empty keywords are derived from the hex."""
    color = get_catalog().create_color(body.name, body.hex, body.hue, body.keywords)

    if config.METRICS_ENABLED:
        get_metrics().increment_catalog_mutation("create")
    logger.info("Color created", extra={"id": color.id, "name": color.name, "hex": color.hex})

    return _color_out(color)


@router.post("/bulk", response_model=BulkImportResponse, status_code=201, summary="Bulk import colors")
def bulk_import(body: BulkImportRequest):
    """Add many colors at once."""
    if len(body.colors) > config.BULK_IMPORT_MAX:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {config.BULK_IMPORT_MAX} colors per bulk import"
        )

    created = get_catalog().bulk_create(_insert_records(body.colors))

    if config.METRICS_ENABLED:
        get_metrics().increment_catalog_mutation("bulk", len(created))
    logger.info("Colors imported", extra={"count": len(created)})

    return BulkImportResponse(
        message=f"Successfully imported {len(created)} colors",
        colors=[_color_out(color) for color in created]
    )


@router.put("", response_model=ReplaceResponse, summary="Replace all colors")
def replace_colors(body: BulkImportRequest):
    """Replace the whole catalog."""
    if len(body.colors) > config.REPLACE_MAX:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {config.REPLACE_MAX} colors total"
        )

    replaced = get_catalog().replace_all_colors(_insert_records(body.colors))

    if config.METRICS_ENABLED:
        get_metrics().increment_catalog_mutation("replace", len(replaced))

    return ReplaceResponse(
        message=f"Successfully replaced database with {len(replaced)} colors",
        count=len(replaced)
    )
