"""Shared test fixtures."""

from pathlib import Path

import pytest

from sheet_catalogue.extraction import (
    CategoryClassifier,
    HeaderMarkers,
    ImageProxy,
    RowNormalizer,
    SheetLayout,
)
from sheet_catalogue.models import ProductRecord

PROJECT_ROOT = Path(__file__).parent.parent
SNAPSHOT_PATH = PROJECT_ROOT / "data" / "data_snapshot.csv"


def make_row(name="", image="", link="", price_usd="", price_cny="", qc_photo=""):
    """Build an 11-cell sheet row using the default column layout."""
    row = [""] * 11
    row[2] = link
    row[3] = image
    row[4] = name
    row[8] = price_usd
    row[9] = price_cny
    row[10] = qc_photo
    return row


@pytest.fixture
def snapshot_text():
    """Raw text of the bundled snapshot."""
    return SNAPSHOT_PATH.read_text(encoding="utf-8")


@pytest.fixture
def classifier():
    """Classifier built from config/categories.yaml."""
    return CategoryClassifier()


@pytest.fixture
def sample_rules():
    """Small keyword rule set for classifier tests (no config I/O)."""
    return [
        {
            "category": "Shoes",
            "keywords": ["jordan", "sneaker"],
            "subcategories": [{"name": "Jordan", "keywords": ["jordan"]}],
        },
        {"category": "Hoodies/Jackets", "keywords": ["hoodie", "jacket"]},
        {"category": "Accessories", "subcategory": "Bags", "keywords": ["bag"]},
    ]


@pytest.fixture
def normalizer(classifier):
    """Normalizer with default layout and markers and no positional overrides."""
    return RowNormalizer(
        layout=SheetLayout(),
        markers=HeaderMarkers(),
        classifier=classifier,
        row_overrides={},
        image_proxy=ImageProxy(),
    )


@pytest.fixture
def sample_products():
    """Mixed product list for catalogue tests."""
    return [
        ProductRecord(name="Jordan 4 Black Cat", image="https://img/1.jpg", price_usd="45",
                      category="Shoes", subcategory="Jordan"),
        ProductRecord(name="Nike Dunk Low Panda", image="https://img/2.jpg", price_usd="35",
                      category="Shoes", subcategory="Dunk"),
        ProductRecord(name="Trapstar Hoodie", image="https://img/3.jpg", price_usd="38.50",
                      category="Hoodies/Jackets", subcategory="Trapstar"),
        ProductRecord(name="Essentials Hoodie", image="https://img/4.jpg", price_usd="25",
                      category="Hoodies/Jackets", subcategory="Other"),
        ProductRecord(name="L.V. Keepall", image="https://img/5.jpg", price_usd="85",
                      category="Accessories", subcategory="Bags"),
        ProductRecord(name="Goyard Cardholder", image="https://img/6.jpg", price_usd="22",
                      category="Accessories", subcategory="Wallets"),
        ProductRecord(name="Plain Tee", image="https://img/7.jpg", price_usd=None,
                      category="T-Shirts/Tops", subcategory=None),
    ]
