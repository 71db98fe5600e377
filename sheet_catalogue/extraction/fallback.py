"""
Emergency product set.

Shown only when neither the live sheet nor the bundled snapshot yields a
single product, so the catalogue is never blank.
"""

from ..models import ProductRecord

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

EMERGENCY_PRODUCTS = (
    ProductRecord(
        name="Jordan 4 Black Cat", price_usd="45",
        image=_UNSPLASH.format("1552346154-21d32810aba3"),
        category="Shoes", subcategory="Jordan",
    ),
    ProductRecord(
        name="Nike Dunk Low Panda", price_usd="35",
        image=_UNSPLASH.format("1628149455676-90f77d337a77"),
        category="Shoes", subcategory="Dunk",
    ),
    ProductRecord(
        name="Essentials Hoodie", price_usd="25",
        image=_UNSPLASH.format("1556905055-8f358a7a47b2"),
        category="Hoodies/Jackets", subcategory="Other",
    ),
    ProductRecord(
        name="Travis Scott J1", price_usd="55",
        image=_UNSPLASH.format("1586525198428-225f6f12cff5"),
        category="Shoes", subcategory="Jordan",
    ),
    ProductRecord(
        name="Yeezy Slide", price_usd="15",
        image=_UNSPLASH.format("1606107557195-0e29a4b5b4aa"),
        category="Shoes", subcategory="Slides/Crocs",
    ),
    ProductRecord(
        name="Corteiz T-Shirt", price_usd="20",
        image=_UNSPLASH.format("1521572163474-6864f9cf17ab"),
        category="T-Shirts/Tops", subcategory="Corteiz",
    ),
    ProductRecord(
        name="Gallery Dept Tee", price_usd="22",
        image=_UNSPLASH.format("1583743814966-8936f5b7be1a"),
        category="T-Shirts/Tops", subcategory="Gallery Dept",
    ),
    ProductRecord(
        name="Rick Owens Ramones", price_usd="60",
        image=_UNSPLASH.format("1600185365483-26d7a4cc7519"),
        category="Shoes", subcategory="Rick Owens",
    ),
)


def emergency_products() -> list[ProductRecord]:
    """Return a fresh list holding the emergency product set."""
    return list(EMERGENCY_PRODUCTS)
