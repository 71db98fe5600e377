"""
Sheet Layout

Declarative description of the published sheet: which column holds which
field, which literal texts are noise, reset markers or placeholders, and
the positional row override table.

All of it is loaded from config/sheet_layout.yaml and
config/header_markers.yaml so spreadsheet wording changes never require
touching classification code.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..common.config_loader import load_header_markers, load_row_overrides, load_sheet_layout


@dataclass(frozen=True)
class SheetLayout:
    """0-based column positions of the sheet export."""
    link: int = 2
    image: int = 3
    name: int = 4
    price_usd: int = 8
    price_cny: int = 9
    qc_photo: int = 10

    @classmethod
    def from_config(cls, columns: Optional[Dict[str, int]] = None) -> "SheetLayout":
        """Build from the columns section of config/sheet_layout.yaml."""
        if columns is None:
            columns = load_sheet_layout()
        unknown = set(columns) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown sheet columns: {sorted(unknown)}")
        return cls(**{k: int(v) for k, v in columns.items()})

    @property
    def min_row_length(self) -> int:
        """Rows shorter than this cannot hold a name and are rejected."""
        return self.name + 1


@dataclass(frozen=True)
class RowOverride:
    """Forced category for one absolute row index."""
    category: str
    default_subcategory: Optional[str] = None


def build_row_overrides(entries: Optional[List[Dict[str, Any]]] = None) -> Dict[int, RowOverride]:
    """
    Expand the override table into a row-index mapping.

    Args:
        entries: List of {'category', 'rows', 'default_subcategory'?}.
            If None, loads from config.

    Returns:
        Dictionary mapping row index to RowOverride

    Raises:
        ValueError: If one row is assigned two different overrides
    """
    if entries is None:
        entries = load_row_overrides()

    overrides: Dict[int, RowOverride] = {}
    for entry in entries:
        override = RowOverride(entry['category'], entry.get('default_subcategory'))
        for row_index in entry.get('rows', []):
            existing = overrides.get(int(row_index))
            if existing is not None and existing != override:
                raise ValueError(
                    f"Row {row_index} overridden twice: {existing.category} and {override.category}"
                )
            overrides[int(row_index)] = override
    return overrides


def _lowered(values) -> Tuple[str, ...]:
    return tuple(v.lower() for v in values or ())


@dataclass(frozen=True)
class HeaderMarkers:
    """
    Literal texts that steer header and product detection.

    Reset, bag, placeholder-contains and image markers match
    case-insensitively; noise headers and product noise match as written.
    """
    noise_contains: Tuple[str, ...] = ("My Tiktok", "Click here")
    noise_exact: Tuple[str, ...] = ("Name",)
    reset_markers: Tuple[str, ...] = ("best sellers", "quick link", "repheaven")
    bag_markers: Tuple[str, ...] = ("bag", "handbag")
    product_noise: Tuple[str, ...] = ("Item name", "---")
    link_placeholders_exact: Tuple[str, ...] = ("LINK", "#")
    link_placeholders_contains: Tuple[str, ...] = ("click here",)
    image_markers: Tuple[str, ...] = ("http", "drive.google.com")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "HeaderMarkers":
        """Build from config/header_markers.yaml."""
        if config is None:
            config = load_header_markers()
        placeholders = config.get('link_placeholders', {})
        return cls(
            noise_contains=tuple(config.get('noise_contains', ())),
            noise_exact=tuple(config.get('noise_exact', ())),
            reset_markers=_lowered(config.get('reset_markers')),
            bag_markers=_lowered(config.get('bag_markers')),
            product_noise=tuple(config.get('product_noise', ())),
            link_placeholders_exact=tuple(placeholders.get('exact', ())),
            link_placeholders_contains=_lowered(placeholders.get('contains')),
            image_markers=_lowered(config.get('image_markers')),
        )

    def is_noise_header(self, text: str) -> bool:
        return text in self.noise_exact or any(m in text for m in self.noise_contains)

    def is_reset(self, text: str) -> bool:
        lowered = text.lower()
        return any(m in lowered for m in self.reset_markers)

    def is_bag_header(self, text: str) -> bool:
        lowered = text.lower()
        return any(m in lowered for m in self.bag_markers)

    def is_product_noise(self, name: str) -> bool:
        return any(m in name for m in self.product_noise)

    def is_placeholder_link(self, link: str) -> bool:
        lowered = link.lower()
        return link in self.link_placeholders_exact or any(
            m in lowered for m in self.link_placeholders_contains
        )

    def is_resolvable_image(self, url: str) -> bool:
        lowered = url.lower()
        return any(m in lowered for m in self.image_markers)
