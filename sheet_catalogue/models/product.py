"""
Product data models.

Pure data classes for representing normalized catalogue entries and the
section state carried while scanning the sheet.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class CategoryMatch:
    """Result of classifying a product or header name."""
    category: str = DEFAULT_CATEGORY
    subcategory: Optional[str] = None


@dataclass(frozen=True)
class SectionState:
    """
    Section context carried forward from the last header row.

    Immutable: every transition returns a new state.
    """
    category: Optional[str] = None
    subcategory: Optional[str] = None
    section_count: int = 0

    def reset(self) -> "SectionState":
        """Clear the current section (banner or promo header)."""
        return SectionState(section_count=self.section_count)

    def enter(self, category: str, subcategory: Optional[str]) -> "SectionState":
        """Start a new section under the given category."""
        return SectionState(category, subcategory, self.section_count + 1)


@dataclass(frozen=True)
class ProductRecord:
    """
    Normalized product listing, ready for display.

    Field Groups:
    - Core fields: name and primary image (both required)
    - Purchase: link and prices (USD / CNY, numeric strings)
    - Quality check: reference to QC photos
    - Classification: category (never None) and optional subcategory
    """

    # Core fields (required)
    name: str
    image: str

    # Purchase
    link: Optional[str] = None
    price_usd: Optional[str] = None
    price_cny: Optional[str] = None

    # Quality check
    qc_photo: Optional[str] = None

    # Classification
    category: str = DEFAULT_CATEGORY
    subcategory: Optional[str] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Product name is required")
        if not self.image:
            raise ValueError("Product image is required")
        if not self.category:
            object.__setattr__(self, "category", DEFAULT_CATEGORY)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Serialize using the field names consumers of the catalogue expect."""
        return {
            "name": self.name,
            "image": self.image,
            "link": self.link,
            "priceUSD": self.price_usd,
            "priceCNY": self.price_cny,
            "qcPhoto": self.qc_photo,
            "category": self.category,
            "subcategory": self.subcategory,
        }
