"""
Category Classifier

Maps product and header names to (category, subcategory) using ordered
keyword groups:
1. Footwear keywords -> Shoes, with a brand subcategory (Jordan, Yeezy, ...)
2. Outerwear keywords -> Hoodies/Jackets, with a brand subcategory
3. Tops -> T-Shirts/Tops
4. Bottoms -> Pants/Shorts
5. Accessory families (Bags, Beanies, Headwear, ..., Misc) -> Accessories

The first group whose keywords appear in the lower-cased name wins, so the
group order in config/categories.yaml is precedence and is never re-sorted.
"""

import logging
from typing import Any, Dict, List, Optional

from ..common.config_loader import load_category_rules, load_force_overrides
from ..models import DEFAULT_CATEGORY, CategoryMatch

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: List[str]) -> bool:
    return any(keyword in text for keyword in keywords)


class CategoryClassifier:
    """
    Classifies names by ordered keyword matching.

    Usage:
        classifier = CategoryClassifier()
        match = classifier.classify("Jordan 4 Retro Black Cat")
        # Returns: CategoryMatch(category='Shoes', subcategory='Jordan')
    """

    def __init__(
        self,
        rules: Optional[List[Dict[str, Any]]] = None,
        force_overrides: Optional[List[Dict[str, Any]]] = None,
    ):
        """
        Initialize the classifier.

        Args:
            rules: Ordered keyword groups. If None, loads from config.
            force_overrides: Ordered name overrides. If None, loads from config.
        """
        if rules is None:
            rules = load_category_rules()
        if force_overrides is None:
            force_overrides = load_force_overrides()

        self.rules = [self._normalize_group(group) for group in rules]
        self.force_overrides = [self._normalize_group(group) for group in force_overrides]

    @staticmethod
    def _normalize_group(group: Dict[str, Any]) -> Dict[str, Any]:
        """Lower-case keywords once so matching is a plain substring test."""
        if not group.get('category'):
            raise ValueError(f"Keyword group without category: {group!r}")
        return {
            'category': group['category'],
            'subcategory': group.get('subcategory'),
            'keywords': [k.lower() for k in group.get('keywords', [])],
            'subcategories': [
                {'name': sub['name'], 'keywords': [k.lower() for k in sub.get('keywords', [])]}
                for sub in group.get('subcategories', [])
            ],
        }

    def classify(self, name: Optional[str]) -> CategoryMatch:
        """
        Classify a name into (category, subcategory).

        Args:
            name: Product or header name

        Returns:
            First matching group's category, or Other/None when nothing matches

        Example:
            >>> classifier.classify("Trapstar Jordan Jacket")
            CategoryMatch(category='Shoes', subcategory='Jordan')
        """
        if not name:
            return CategoryMatch(DEFAULT_CATEGORY, None)

        text = name.lower()

        for group in self.rules:
            if not _contains_any(text, group['keywords']):
                continue

            subcategory = group['subcategory']
            # Secondary scan, first brand match wins
            for sub in group['subcategories']:
                if _contains_any(text, sub['keywords']):
                    subcategory = sub['name']
                    break

            return CategoryMatch(group['category'], subcategory)

        return CategoryMatch(DEFAULT_CATEGORY, None)

    def force_override(self, name: Optional[str]) -> Optional[CategoryMatch]:
        """
        Return the override a product name forces, if any.

        These beat the section a product sits in (sunglasses listed under
        a shoe section still belong to Glasses).

        Args:
            name: Product name

        Returns:
            CategoryMatch for the first matching override, or None
        """
        if not name:
            return None

        text = name.lower()
        for group in self.force_overrides:
            if _contains_any(text, group['keywords']):
                return CategoryMatch(group['category'], group['subcategory'])
        return None

    @property
    def rule_count(self) -> int:
        """Return the number of keyword groups."""
        return len(self.rules)


_default_classifier: Optional[CategoryClassifier] = None


def get_category_classifier() -> CategoryClassifier:
    """Return the shared classifier built from config/categories.yaml."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = CategoryClassifier()
        logger.debug("Loaded %d category keyword groups", _default_classifier.rule_count)
    return _default_classifier


def classify(name: Optional[str]) -> CategoryMatch:
    """Classify a name with the shared classifier."""
    return get_category_classifier().classify(name)
