"""
Row Normalizer

Turns tokenized sheet rows into ProductRecords.

The sheet interleaves section-header rows ("Sneakers", "Bags", promo
banners) with product rows. Rows are folded left to right with a
SectionState accumulator:
- header rows move the state (enter a section, or reset it) and emit nothing
- product rows are cleaned, categorized and emitted
- anything else is dropped and logged at DEBUG

Category precedence for a product row, lowest to highest:
section category (or name classification outside a section),
name force overrides, positional row overrides.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..common.config_loader import load_source_settings
from ..common.csv_utils import parse_rows
from ..common.errors import MalformedRowFailure, ParseFailure
from ..common.text_utils import cell, clean_price, collapse_whitespace, join_lines
from ..models import CategoryMatch, ProductRecord, SectionState
from .category_classifier import CategoryClassifier, get_category_classifier
from .fallback import emergency_products
from .image_proxy import ImageProxy
from .sheet_layout import HeaderMarkers, RowOverride, SheetLayout, build_row_overrides

logger = logging.getLogger(__name__)

BAGS = CategoryMatch("Accessories", "Bags")
MIN_HEADER_LENGTH = 3


@dataclass(frozen=True)
class SectionTransition:
    """A header row and the section state it produced."""
    row_index: int
    header: str
    state: SectionState

    @property
    def is_reset(self) -> bool:
        return self.state.category is None


class RowNormalizer:
    """
    Normalizes sheet rows into product records.

    Usage:
        normalizer = RowNormalizer()
        products = normalizer.normalize_text(csv_text)
        stats = normalizer.get_stats()
    """

    def __init__(
        self,
        layout: Optional[SheetLayout] = None,
        markers: Optional[HeaderMarkers] = None,
        classifier: Optional[CategoryClassifier] = None,
        row_overrides: Optional[Dict[int, RowOverride]] = None,
        image_proxy: Optional[ImageProxy] = None,
    ):
        """
        Initialize the normalizer. Anything not given is loaded from config.

        Args:
            layout: Column positions
            markers: Noise / reset / placeholder marker lists
            classifier: Name classifier
            row_overrides: Mapping of absolute row index to forced category
            image_proxy: File-share image rewriter
        """
        self.layout = layout if layout is not None else SheetLayout.from_config()
        self.markers = markers if markers is not None else HeaderMarkers.from_config()
        self.classifier = classifier if classifier is not None else get_category_classifier()
        self.row_overrides = row_overrides if row_overrides is not None else build_row_overrides()
        if image_proxy is None:
            image_proxy = ImageProxy.from_settings(load_source_settings()['image_proxy'])
        self.image_proxy = image_proxy

        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {'rows_seen': 0, 'sections': 0, 'products': 0, 'dropped': 0}

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def normalize_text(self, text: str, source: str = "sheet") -> List[ProductRecord]:
        """
        Tokenize and normalize CSV text.

        Args:
            text: Raw CSV export
            source: Label for log messages

        Returns:
            Product records, or the emergency set if the text is unusable
        """
        logger.info("Parsing data from: %s", source)
        try:
            rows = parse_rows(text)
        except ParseFailure as e:
            logger.warning("Could not parse %s: %s", source, e)
            self._stats = self._empty_stats()
            return emergency_products()
        return self.normalize(rows, source=source)

    def normalize(self, rows: List[List[str]], source: str = "sheet") -> List[ProductRecord]:
        """
        Fold rows into product records, preserving row order.

        Args:
            rows: Tokenized sheet rows
            source: Label for log messages

        Returns:
            Product records; the emergency set when no row yields a product
        """
        stats = self._empty_stats()
        state = SectionState()
        products: List[ProductRecord] = []

        for index, row in enumerate(rows):
            stats['rows_seen'] += 1
            try:
                state, record = self.step(state, index, row)
            except MalformedRowFailure as e:
                stats['dropped'] += 1
                logger.debug("Dropped %s", e)
                continue
            if record is not None:
                products.append(record)

        stats['products'] = len(products)
        stats['sections'] = state.section_count
        self._stats = stats

        logger.info("Loaded %d products from %d sections (%s, %d rows dropped)",
                    len(products), state.section_count, source, stats['dropped'])

        if not products:
            logger.warning("No products in %s, using emergency product set", source)
            return emergency_products()
        return products

    def scan_sections(self, rows: List[List[str]]) -> Iterator[SectionTransition]:
        """
        Yield every header row that changed the section state.

        Noise headers are skipped; running the scan twice over the same rows
        yields the same transitions.

        Args:
            rows: Tokenized sheet rows

        Yields:
            SectionTransition for each reset or section header
        """
        state = SectionState()
        for index, row in enumerate(rows):
            if len(row) < self.layout.min_row_length:
                continue
            header = self.header_text(row)
            if header is None:
                continue
            new_state = self.apply_header(state, header)
            if new_state is not state:
                yield SectionTransition(index, collapse_whitespace(header), new_state)
                state = new_state

    def get_stats(self) -> Dict[str, int]:
        """Return statistics from the last normalization pass."""
        return dict(self._stats)

    # ------------------------------------------------------------------
    # Fold step
    # ------------------------------------------------------------------

    def step(
        self, state: SectionState, index: int, row: List[str]
    ) -> Tuple[SectionState, Optional[ProductRecord]]:
        """
        Process one row.

        Args:
            state: Section state before this row
            index: Absolute row index (used for positional overrides)
            row: Tokenized row

        Returns:
            (state after this row, record or None for header rows)

        Raises:
            MalformedRowFailure: If the row is neither a header nor a valid product
        """
        if len(row) < self.layout.min_row_length:
            raise MalformedRowFailure(index, f"only {len(row)} cells")

        header = self.header_text(row)
        if header is not None:
            return self.apply_header(state, header), None

        return state, self.extract_product(state, index, row)

    def header_text(self, row: List[str]) -> Optional[str]:
        """
        Return the header text if the row is a section header.

        A header has no image, a name of at least three characters, and
        neither a usable link nor a price.
        """
        image = cell(row, self.layout.image)
        name = cell(row, self.layout.name)

        if image or len(name) < MIN_HEADER_LENGTH:
            return None
        if self._link(row) is not None:
            return None
        if cell(row, self.layout.price_usd) or cell(row, self.layout.price_cny):
            return None
        return name

    def apply_header(self, state: SectionState, header: str) -> SectionState:
        """
        Compute the section state a header row leads to.

        Returns the same state object for noise headers.
        """
        if self.markers.is_noise_header(header):
            return state

        if self.markers.is_reset(header):
            return state.reset()

        if self.markers.is_bag_header(header):
            return state.enter(BAGS.category, BAGS.subcategory)

        label = collapse_whitespace(header)
        match = self.classifier.classify(header)
        if match.category == "Other":
            logger.warning("Unrecognized section header %r, products will fall under Other", label)
        return state.enter(match.category, label)

    def extract_product(self, state: SectionState, index: int, row: List[str]) -> ProductRecord:
        """
        Build a ProductRecord from a non-header row.

        Raises:
            MalformedRowFailure: If the name is missing or noise, or no
                resolvable image exists
        """
        raw_name = cell(row, self.layout.name)
        if not raw_name:
            raise MalformedRowFailure(index, "empty name")
        if self.markers.is_product_noise(raw_name):
            raise MalformedRowFailure(index, f"noise name {raw_name!r}")

        qc_photo = cell(row, self.layout.qc_photo) or None
        image = cell(row, self.layout.image) or qc_photo
        if not image or not self.markers.is_resolvable_image(image):
            raise MalformedRowFailure(index, f"no resolvable image for {raw_name!r}")

        category, subcategory = self._resolve_category(state, index, raw_name)

        return ProductRecord(
            name=join_lines(raw_name),
            image=self.image_proxy.rewrite(image, category),
            link=self._link(row),
            price_usd=clean_price(cell(row, self.layout.price_usd)),
            price_cny=clean_price(cell(row, self.layout.price_cny)),
            qc_photo=qc_photo,
            category=category,
            subcategory=subcategory,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _link(self, row: List[str]) -> Optional[str]:
        link = cell(row, self.layout.link)
        if not link or self.markers.is_placeholder_link(link):
            return None
        return link

    def _resolve_category(
        self, state: SectionState, index: int, name: str
    ) -> Tuple[str, Optional[str]]:
        if state.category is None:
            match = self.classifier.classify(name)
            category, subcategory = match.category, match.subcategory
        else:
            category = state.category
            subcategory = state.subcategory or self.classifier.classify(name).subcategory

        forced = self.classifier.force_override(name)
        if forced is not None:
            category, subcategory = forced.category, forced.subcategory

        override = self.row_overrides.get(index)
        if override is not None:
            category = override.category
            if subcategory is None:
                subcategory = override.default_subcategory

        return category, subcategory
