"""
Row extraction modules for the catalogue sheet.

Modules:
    category_classifier - CategoryClassifier, ordered keyword matching
    sheet_layout - SheetLayout, HeaderMarkers and positional RowOverrides
    row_normalizer - RowNormalizer, header detection and product cleaning
    image_proxy - ImageProxy for file-share image thumbnails
    fallback - Emergency product set
"""

from .category_classifier import CategoryClassifier, classify, get_category_classifier
from .fallback import EMERGENCY_PRODUCTS, emergency_products
from .image_proxy import ImageProxy, extract_file_id
from .row_normalizer import RowNormalizer, SectionTransition
from .sheet_layout import HeaderMarkers, RowOverride, SheetLayout, build_row_overrides

__all__ = [
    # Classification
    'CategoryClassifier',
    'classify',
    'get_category_classifier',
    # Sheet description
    'SheetLayout',
    'HeaderMarkers',
    'RowOverride',
    'build_row_overrides',
    # Normalization
    'RowNormalizer',
    'SectionTransition',
    # Images
    'ImageProxy',
    'extract_file_id',
    # Fallback data
    'EMERGENCY_PRODUCTS',
    'emergency_products',
]
