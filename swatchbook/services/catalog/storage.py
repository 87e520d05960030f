"""
In-Memory Color Catalog

Builds the catalog once at startup from curated seed colors plus
deterministically synthesized filler, then serves listing, filtering, search
and import/export. Colors are immutable; mutations replace records wholesale
under a lock and readers work on snapshots.
"""

import time
import uuid
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Dict, Iterable, List, MutableSet, Optional, Sequence, Tuple

from swatchbook.config import config
from swatchbook.services.colors.arrangement import arrange_rainbow, sort_colors
from swatchbook.services.colors.classification import (
    classify_color_family, classify_color_style, classify_color_temperature,
    classify_hue_category, classify_keywords, generate_synonyms
)
from swatchbook.services.colors.conversion import (
    calculate_vividness, hex_to_hsl, hex_to_rgb, hsl_to_hex, is_valid_hex_color,
    normalize_hex_color
)
from swatchbook.services.colors.naming import generate_proper_color_name, preview_color_name
from swatchbook.services.colors.query import (
    categorize_colors, explain_color_score, parse_color_query, rank_colors
)
from swatchbook.services.colors.similarity import DEFAULT_SIMILARITY_THRESHOLD, find_similar_colors
from swatchbook.services.catalog.seed import SEED_COLORS, SeedColor
from swatchbook.utils.logging import get_logger

logger = get_logger()

DEFAULT_CATALOG_SIZE = 600

# Golden angle stepping spreads filler hues evenly around the wheel
GOLDEN_ANGLE = 137.5


@dataclass(frozen=True)
class Color:
    """An immutable catalog color."""
    id: str
    name: str
    hex: str
    hue: str
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "hex": self.hex,
            "hue": self.hue,
            "keywords": list(self.keywords),
        }
        if include_id:
            data = {"id": self.id, **data}
        return data


@dataclass(frozen=True)
class SearchHit:
    """A search result; similarity is set for hex searches, score for ranked ones."""
    color: Color
    similarity: Optional[float] = None
    score: Optional[float] = None


def _new_id() -> str:
    return str(uuid.uuid4())


def generate_additional_colors(count: int, used_names: MutableSet[str]) -> List[Dict[str, Any]]:
    """
    Synthesize filler colors.

    Hue steps by the golden angle, saturation cycles through 30-79% and
    lightness through 20-79%, so the output depends only on ``count`` and the
    names already in ``used_names``.

    Args:
        count: Number of colors to generate (non-positive yields none)
        used_names: Shared name registry (mutated)

    Returns:
        Records with name, hex, hue and keywords
    """
    colors = []
    for i in range(max(0, count)):
        base_hue = (i * GOLDEN_ANGLE) % 360
        saturation = 30 + (i * 47) % 50
        lightness = 20 + (i * 31) % 60

        hex_color = hsl_to_hex(base_hue, saturation, lightness)
        name = generate_proper_color_name(hex_color, used_names)

        colors.append({
            "name": name,
            "hex": hex_color,
            "hue": classify_hue_category(hex_color),
            "keywords": classify_keywords(hex_color),
        })
    return colors


class ColorCatalog:
    """In-memory catalog of named colors."""

    def __init__(
        self,
        size: int = DEFAULT_CATALOG_SIZE,
        seed: Optional[Sequence[SeedColor]] = None,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    ):
        """
        Build the catalog.

        Args:
            size: Target total size; seed colors always load even if they
                exceed it, filler tops up the rest
            seed: Curated colors (defaults to SEED_COLORS)
            similarity_threshold: Minimum similarity for hex searches
        """
        self._lock = Lock()
        self._colors: Dict[str, Color] = {}
        self.similarity_threshold = similarity_threshold
        self._initialize_colors(size, SEED_COLORS if seed is None else seed)

    def _initialize_colors(self, size: int, seed: Sequence[SeedColor]):
        start_time = time.time()
        used_names: set = set()
        records = []

        for seed_color in seed:
            hex_color = normalize_hex_color(seed_color.hex)
            name = seed_color.name
            if name in used_names:
                name = generate_proper_color_name(hex_color, used_names)
            else:
                used_names.add(name)
            records.append({
                "name": name,
                "hex": hex_color,
                "hue": seed_color.hue,
                "keywords": classify_keywords(hex_color),
            })

        records.extend(generate_additional_colors(size - len(records), used_names))

        for record in records:
            color = Color(
                id=_new_id(),
                name=record["name"],
                hex=record["hex"],
                hue=record["hue"],
                keywords=tuple(record["keywords"]),
            )
            self._colors[color.id] = color

        logger.info("Color catalog initialized", extra={
            "seed_colors": len(seed),
            "total_colors": len(self._colors),
            "build_ms": round((time.time() - start_time) * 1000, 2)
        })

    def _snapshot(self) -> List[Color]:
        with self._lock:
            return list(self._colors.values())

    def _build_color(self, name: str, hex_color: str, hue: str, keywords: Iterable[str]) -> Color:
        hex_color = normalize_hex_color(hex_color)
        keyword_list = [keyword for keyword in keywords if keyword]
        if not keyword_list:
            keyword_list = classify_keywords(hex_color)
        return Color(id=_new_id(), name=name, hex=hex_color, hue=hue, keywords=tuple(keyword_list))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._colors)

    def get_all_colors(self) -> List[Color]:
        return self._snapshot()

    def get_color(self, color_id: str) -> Optional[Color]:
        with self._lock:
            return self._colors.get(color_id)

    def get_colors_by_hue(self, hue: str) -> List[Color]:
        colors = self._snapshot()
        if hue == "all":
            return colors
        return [color for color in colors if color.hue == hue]

    def get_colors_by_keyword(self, keyword: str) -> List[Color]:
        colors = self._snapshot()
        if keyword == "all":
            return colors
        return [color for color in colors if keyword in color.keywords]

    def filter_colors(
        self,
        hue: str = "all",
        keyword: str = "all",
        temperature: str = "all",
        family: str = "all",
        sort_by: str = "none",
        per_hue: int = 6,
        max_neutrals: int = 12
    ) -> List[Color]:
        """
        Apply hue / keyword / temperature / family filters and ordering.

        With every filter at "all" and no sort, the result uses the rainbow
        arrangement; otherwise catalog order, optionally sorted.
        """
        colors = self._snapshot()

        if hue != "all":
            colors = [color for color in colors if color.hue == hue]
        if keyword != "all":
            colors = [color for color in colors if keyword in color.keywords]
        if temperature != "all":
            colors = [color for color in colors if classify_color_temperature(color.hex) == temperature]
        if family != "all":
            colors = [color for color in colors if classify_color_family(color.hex) == family]

        if sort_by != "none":
            return sort_colors(colors, sort_by)

        if hue == "all" and keyword == "all" and temperature == "all" and family == "all":
            return arrange_rainbow(colors, per_hue=per_hue, max_neutrals=max_neutrals)

        return colors

    def search_colors(self, query: str) -> Tuple[str, List[SearchHit]]:
        """
        Search the catalog.

        Resolution order: hex similarity for hex-like queries, ranked scoring
        for descriptive queries, then case-insensitive substring matching
        over name, hex, hue and keywords.

        Returns:
            (mode, hits) where mode is "hex", "ranked" or "substring"
        """
        trimmed = query.strip()
        colors = self._snapshot()

        if is_valid_hex_color(trimmed):
            matches = find_similar_colors(trimmed, colors, self.similarity_threshold)
            return "hex", [SearchHit(color=color, similarity=similarity) for color, similarity in matches]

        scored = categorize_colors(colors, trimmed)
        if scored:
            return "ranked", [SearchHit(color=item.color, score=item.total_score) for item in scored]

        lowered = trimmed.lower()
        hits = [
            SearchHit(color=color)
            for color in colors
            if lowered in color.name.lower()
            or lowered in color.hex.lower()
            or lowered in color.hue.lower()
            or any(lowered in keyword.lower() for keyword in color.keywords)
        ]
        return "substring", hits

    def explain_search(self, query: str, limit: int = 20) -> Dict[str, Any]:
        """
        Show how a query is interpreted and how the top colors score against it.

        Scores are computed even for non-descriptive queries so a hue-only
        query can be inspected before it falls back to substring search.
        """
        trimmed = query.strip()
        parsed_query = parse_color_query(trimmed)

        if is_valid_hex_color(trimmed):
            mode = "hex"
        elif parsed_query.is_descriptive:
            mode = "ranked"
        else:
            mode = "substring"

        ranked = rank_colors(self._snapshot(), parsed_query)[:max(0, limit)]
        results = [
            {"id": item.color.id, **explain_color_score(item.color, parsed_query)}
            for item in ranked
        ]

        return {
            "mode": mode,
            "parsed": {
                "hues": list(parsed_query.hues),
                "lightness_descriptors": list(parsed_query.lightness_descriptors),
                "saturation_descriptors": list(parsed_query.saturation_descriptors),
                "original_query": parsed_query.original_query,
                "is_descriptive": parsed_query.is_descriptive,
            },
            "results": results,
        }

    def export_colors(self) -> List[Dict[str, Any]]:
        """Catalog records without ids."""
        return [color.to_dict(include_id=False) for color in self._snapshot()]

    def used_names(self) -> set:
        return {color.name for color in self._snapshot()}

    def analyze_hex(self, hex_color: str) -> Dict[str, Any]:
        """
        Classifier output for a single color.

        Raises:
            ValueError: If hex_color is not a 6-digit hex color
        """
        if not is_valid_hex_color(hex_color):
            raise ValueError(f"Invalid hex color: {hex_color}")

        normalized = normalize_hex_color(hex_color)
        hsl = hex_to_hsl(normalized)
        style = classify_color_style(normalized)

        return {
            "hex": normalized,
            "rgb": list(hex_to_rgb(normalized)),
            "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
            "style": style,
            "temperature": classify_color_temperature(normalized),
            "family": classify_color_family(normalized),
            "hue_category": classify_hue_category(normalized),
            "keywords": generate_synonyms(normalized, style),
            "vividness": round(calculate_vividness(normalized), 4),
            "suggested_name": preview_color_name(normalized, self.used_names()),
        }

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_color(self, name: str, hex_color: str, hue: str, keywords: Iterable[str] = ()) -> Color:
        color = self._build_color(name, hex_color, hue, keywords)
        with self._lock:
            self._colors[color.id] = color
        return color

    def bulk_create(self, records: Sequence[Dict[str, Any]]) -> List[Color]:
        """Add many colors at once; all records are built before any is stored."""
        colors = [
            self._build_color(record["name"], record["hex"], record["hue"], record.get("keywords", ()))
            for record in records
        ]
        with self._lock:
            for color in colors:
                self._colors[color.id] = color
        return colors

    def replace_all_colors(self, records: Sequence[Dict[str, Any]]) -> List[Color]:
        """Swap the whole catalog for the given records."""
        colors = [
            self._build_color(record["name"], record["hex"], record["hue"], record.get("keywords", ()))
            for record in records
        ]
        with self._lock:
            self._colors = {color.id: color for color in colors}
        logger.info("Color catalog replaced", extra={"total_colors": len(colors)})
        return colors


# Global catalog instance, built on first use
_catalog: Optional[ColorCatalog] = None
_catalog_lock = Lock()


def get_catalog() -> ColorCatalog:
    """Get the global catalog instance."""
    global _catalog
    with _catalog_lock:
        if _catalog is None:
            if not config.validate_threshold(config.SIMILARITY_THRESHOLD):
                raise ValueError(
                    f"Similarity threshold must be between 0 and 100, got {config.SIMILARITY_THRESHOLD}"
                )
            _catalog = ColorCatalog(
                size=config.CATALOG_SIZE,
                similarity_threshold=config.SIMILARITY_THRESHOLD
            )
        return _catalog


def reset_catalog():
    """Drop the global catalog so the next access rebuilds it (for testing)."""
    global _catalog
    with _catalog_lock:
        _catalog = None
