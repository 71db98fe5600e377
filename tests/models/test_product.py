"""Tests for sheet_catalogue/models/product.py"""

from dataclasses import FrozenInstanceError

import pytest

from sheet_catalogue.models import CategoryMatch, ProductRecord, SectionState


class TestProductRecord:
    def test_create_minimal(self):
        record = ProductRecord(name="Yeezy Slide", image="https://img/1.jpg")
        assert record.category == "Other"
        assert record.subcategory is None
        assert record.link is None
        assert record.price_usd is None

    def test_raises_on_empty_name(self):
        with pytest.raises(ValueError, match="name is required"):
            ProductRecord(name="  ", image="https://img/1.jpg")

    def test_raises_on_empty_image(self):
        with pytest.raises(ValueError, match="image is required"):
            ProductRecord(name="Yeezy Slide", image="")

    def test_empty_category_defaults_to_other(self):
        record = ProductRecord(name="Thing", image="https://img/1.jpg", category="")
        assert record.category == "Other"

    def test_is_immutable(self):
        record = ProductRecord(name="Yeezy Slide", image="https://img/1.jpg")
        with pytest.raises(FrozenInstanceError):
            record.name = "Other"

    def test_to_dict_uses_consumer_field_names(self):
        record = ProductRecord(
            name="Jordan 4", image="https://img/1.jpg", link="https://shop/1",
            price_usd="45", price_cny="320", qc_photo="https://qc/1",
            category="Shoes", subcategory="Jordan",
        )
        assert record.to_dict() == {
            "name": "Jordan 4",
            "image": "https://img/1.jpg",
            "link": "https://shop/1",
            "priceUSD": "45",
            "priceCNY": "320",
            "qcPhoto": "https://qc/1",
            "category": "Shoes",
            "subcategory": "Jordan",
        }


class TestSectionState:
    def test_starts_empty(self):
        state = SectionState()
        assert state.category is None
        assert state.subcategory is None
        assert state.section_count == 0

    def test_enter_counts_sections(self):
        state = SectionState().enter("Shoes", "Sneakers").enter("Accessories", "Bags")
        assert (state.category, state.subcategory) == ("Accessories", "Bags")
        assert state.section_count == 2

    def test_reset_clears_but_keeps_count(self):
        state = SectionState().enter("Shoes", "Sneakers").reset()
        assert state.category is None
        assert state.subcategory is None
        assert state.section_count == 1

    def test_transitions_return_new_objects(self):
        state = SectionState()
        assert state.enter("Shoes", None) is not state


class TestCategoryMatch:
    def test_defaults(self):
        assert CategoryMatch() == CategoryMatch("Other", None)
