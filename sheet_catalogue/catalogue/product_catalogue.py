"""
Product Catalogue

In-memory view over the normalized product list used by the storefront:
category pills with counts, search, "load more" pagination and the daily
bestseller strip.

The catalogue is replaced wholesale on every delivery from the fetch
orchestrator, never patched incrementally.
"""

import logging
import math
from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..models import ProductRecord

logger = logging.getLogger(__name__)

ALL = "All"
SHOES = "Shoes"
OTHER = "Other"
DEFAULT_PAGE_SIZE = 16


def _price_value(product: ProductRecord) -> float:
    try:
        return float(product.price_usd) if product.price_usd else 0.0
    except ValueError:
        return 0.0


def _daily_score(seed: float) -> float:
    """Deterministic pseudo-random value in [0, 1) for a seed."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


class ProductCatalogue:
    """
    Holds the current product list and answers storefront queries.

    Usage:
        catalogue = ProductCatalogue()
        orchestrator = FetchOrchestrator(live, snapshot, on_data=catalogue.replace)
        await orchestrator.run()
        shoes = catalogue.filter("Shoes", search="dunk")
    """

    def __init__(self, products: Optional[Iterable[ProductRecord]] = None):
        self._products: List[ProductRecord] = list(products or [])
        self.version = 0

    def replace(self, products: Iterable[ProductRecord]) -> None:
        """Swap in a complete new product list."""
        self._products = list(products)
        self.version += 1
        logger.info("Catalogue updated: %d products (version %d)", len(self._products), self.version)

    @property
    def products(self) -> List[ProductRecord]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def category_labels(self) -> List[str]:
        """
        Labels for the category pills.

        Shoes are shown as one label; everything else is listed by its
        subcategory. Products without a specific subcategory only appear
        under "All".

        Returns:
            ["All", *sorted labels]
        """
        labels = set()
        for product in self._products:
            if product.category == SHOES:
                labels.add(SHOES)
            elif product.subcategory and product.subcategory != OTHER:
                labels.add(product.subcategory)
        return [ALL] + sorted(labels)

    def category_counts(self) -> Dict[str, int]:
        """Product count per pill label (plus "All" and "Shoes")."""
        counts: Dict[str, int] = {ALL: len(self._products)}
        counts[SHOES] = sum(1 for p in self._products if p.category == SHOES)
        subcategory_counts = Counter(
            p.subcategory for p in self._products if p.category != SHOES and p.subcategory
        )
        counts.update(subcategory_counts)
        return counts

    def filter(self, selected: str = ALL, search: str = "") -> List[ProductRecord]:
        """
        Products matching a pill label and a search term.

        Args:
            selected: "All", "Shoes", or a subcategory label (exact match)
            search: Free text; matched case-insensitively against name,
                category and subcategory, with dots ignored

        Returns:
            Matching products in catalogue order
        """
        term = (search or "").lower().strip().replace(".", "")

        results = []
        for product in self._products:
            if term and not self._matches_search(product, term):
                continue
            if selected == ALL:
                results.append(product)
            elif selected == SHOES:
                if product.category == SHOES:
                    results.append(product)
            elif product.subcategory == selected:
                results.append(product)
        return results

    @staticmethod
    def _matches_search(product: ProductRecord, term: str) -> bool:
        return (
            term in product.name.lower()
            or term in product.category.lower()
            or (product.subcategory is not None and term in product.subcategory.lower())
        )

    @staticmethod
    def page(products: List[ProductRecord], visible_count: int = DEFAULT_PAGE_SIZE) -> List[ProductRecord]:
        """First visible_count products (the "load more" window)."""
        return products[:max(visible_count, 0)]

    @staticmethod
    def next_visible_count(current: int, total: int, step: int = DEFAULT_PAGE_SIZE) -> int:
        """
        Window size after one more "load more".

        Returns current unchanged when everything is already visible.
        """
        if current >= total:
            return current
        return current + step

    def daily_bestsellers(
        self,
        day: Optional[date] = None,
        limit: int = 8,
        per_category: int = 2,
    ) -> List[ProductRecord]:
        """
        Pick a stable-for-the-day selection of highlighted products.

        At most per_category products per category are taken first; if that
        leaves the strip short, it is topped up from the remaining order.

        Args:
            day: Date used as the seed (default: today)
            limit: Strip size
            per_category: Cap per category in the first pass

        Returns:
            Up to limit products
        """
        if not self._products:
            return []

        day = day or date.today()
        date_seed = day.year * 10000 + day.month * 100 + day.day

        shuffled = sorted(
            self._products,
            key=lambda p: _daily_score(date_seed + len(p.name) + _price_value(p)),
        )

        selected: List[ProductRecord] = []
        per_category_counts: Counter = Counter()
        for product in shuffled:
            if len(selected) >= limit:
                break
            if per_category_counts[product.category] < per_category:
                selected.append(product)
                per_category_counts[product.category] += 1

        if len(selected) < limit:
            chosen = {id(p) for p in selected}
            for product in shuffled:
                if len(selected) >= limit:
                    break
                if id(product) not in chosen:
                    selected.append(product)

        return selected
